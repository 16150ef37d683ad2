"""
Base extractor holding the shared syntax tree walk
"""
import logging
from abc import ABC, abstractmethod

from funcgraph.errors import InvalidInputError, MalformedNodeError
from funcgraph.extractors.function_classifier import FunctionClassifier, is_class_node, is_function_node
from funcgraph.extractors.nesting_filter import is_nested
from funcgraph.models.analysis_context import AnalysisContext
from funcgraph.utils.node_text import node_text

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """
    Abstract base class for function extractors

    Subclasses decide what a record carries; the walk that finds the
    top-level functions and class methods is shared.
    """

    def __init__(self):
        self.records = []
        self.record_map = {}
        self.skipped = 0

    def extract(self, root_node, source_code, filepath='<string>'):
        """
        Extract function records from a syntax tree

        Args:
            root_node: Tree-sitter root node
            source_code: Source code bytes
            filepath: Relative file path

        Returns:
            List of FunctionRecord objects in source order
        """
        if root_node is None:
            raise InvalidInputError()
        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        self.records = []
        self.record_map = {}
        self.skipped = 0
        self.source_code = source_code
        self.filepath = filepath
        self.classifier = FunctionClassifier(source_code)

        self.walk(root_node, AnalysisContext())
        return self.records

    def walk(self, node, context):
        """
        Pre-order, left-to-right walk; context is replaced, never mutated

        Uses an explicit stack so deeply nested expressions in generated or
        minified code cannot exhaust the interpreter's recursion limit.
        """
        stack = [(node, context)]
        while stack:
            node, context = stack.pop()
            context = self._visit(node, context)
            for child in reversed(node.children):
                stack.append((child, context))

    def _visit(self, node, context):
        """Classify one node; returns the context for its children"""
        if is_class_node(node):
            name_node = node.child_by_field_name('name')
            if name_node is not None:
                context = context.enter_class(node_text(name_node, self.source_code))

        candidate = None
        try:
            candidate = self.classifier.classify(node, context)
        except MalformedNodeError as e:
            self.skipped += 1
            logger.warning(f"{self.filepath}: {e}")

        if candidate is not None and not context.inside_function and not is_nested(candidate.function_node):
            self._add_record(self.build_record(candidate))

        if candidate is not None or is_function_node(node):
            context = context.enter_function()
        return context

    def _add_record(self, record):
        record.filepath = self.filepath
        self.records.append(record)
        self.record_map[f"{self.filepath}::{record.qualified_name}"] = record

    @abstractmethod
    def build_record(self, candidate):
        """
        Turn an accepted candidate into a FunctionRecord

        Args:
            candidate: FunctionCandidate that passed the nesting check

        Returns:
            FunctionRecord
        """
        pass
