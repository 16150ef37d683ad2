"""
Recognizes the function-bearing constructs of JavaScript syntax trees
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from funcgraph.errors import MalformedNodeError
from funcgraph.utils.node_text import node_text

logger = logging.getLogger(__name__)

# Kinds that open a function scope. 'function' is the function expression
# kind in tree-sitter-javascript releases before 0.21.
FUNCTION_NODE_TYPES = frozenset({
    'method_definition',
    'function_declaration',
    'arrow_function',
    'function_expression',
    'function',
    'generator_function',
    'generator_function_declaration',
})

FUNCTION_INITIALIZER_TYPES = frozenset({'arrow_function', 'function_expression', 'function'})
DECLARATION_TYPES = frozenset({'lexical_declaration', 'variable_declaration'})
CLASS_NODE_TYPES = frozenset({'class_declaration', 'class'})
METHOD_NAME_TYPES = frozenset({'property_identifier', 'private_property_identifier'})


def is_function_node(node):
    # keyword tokens share type names with named nodes ('function', 'class')
    return node.is_named and node.type in FUNCTION_NODE_TYPES


def is_class_node(node):
    return node.is_named and node.type in CLASS_NODE_TYPES


def is_async(node):
    return any(child.type == 'async' for child in node.children)


@dataclass
class FunctionCandidate:
    """A node recognized as a named function, pending the nesting check"""
    name: str
    parameters: str
    function_node: Any
    class_name: Optional[str] = None

    @property
    def is_async(self):
        return is_async(self.function_node)

    @property
    def is_arrow(self):
        return self.function_node.type == 'arrow_function'


class FunctionClassifier:
    """Decide whether a node is one of the recognized function forms"""

    def __init__(self, source_code):
        self.source_code = source_code

    def classify(self, node, context):
        """
        Classify a node

        Args:
            node: Tree-sitter node
            context: AnalysisContext at this node

        Returns:
            FunctionCandidate, or None when the node is not a named function

        Raises:
            MalformedNodeError: a recognized function has no parameter list
        """
        if node.type == 'method_definition':
            return self._classify_method(node, context)
        if node.type == 'function_declaration':
            return self._classify_function_declaration(node)
        if node.type in DECLARATION_TYPES:
            return self._classify_declaration(node)
        return None

    def _classify_method(self, node, context):
        name_node = node.child_by_field_name('name')
        if name_node is None:
            return None
        if name_node.type not in METHOD_NAME_TYPES:
            logger.debug(f"Skipping method with {name_node.type} name at {_span(node)}")
            return None
        if any(child.type == '*' for child in node.children):
            logger.debug(f"Skipping generator method at {_span(node)}")
            return None

        return FunctionCandidate(
            name=node_text(name_node, self.source_code),
            parameters=self._parameters(node),
            function_node=node,
            class_name=context.current_class
        )

    def _classify_function_declaration(self, node):
        name_node = node.child_by_field_name('name')
        if name_node is None:
            return None

        return FunctionCandidate(
            name=node_text(name_node, self.source_code),
            parameters=self._parameters(node),
            function_node=node
        )

    def _classify_declaration(self, node):
        declarators = []
        for child in node.named_children:
            if child.type != 'variable_declarator':
                continue
            value = child.child_by_field_name('value')
            if value is not None and value.is_named and value.type in FUNCTION_INITIALIZER_TYPES:
                declarators.append((child, value))

        if len(declarators) != 1:
            if declarators:
                logger.debug(f"Skipping declaration binding {len(declarators)} functions at {_span(node)}")
            return None

        declarator, value = declarators[0]
        name_node = declarator.child_by_field_name('name')
        # destructuring patterns bind no single name
        if name_node is None or name_node.type != 'identifier':
            return None

        return FunctionCandidate(
            name=node_text(name_node, self.source_code),
            parameters=self._parameters(value),
            function_node=value
        )

    def _parameters(self, function_node):
        params_node = function_node.child_by_field_name('parameters')
        if params_node is None and function_node.type == 'arrow_function':
            # x => x
            params_node = function_node.child_by_field_name('parameter')
        if params_node is None:
            raise MalformedNodeError(function_node.type, tuple(function_node.start_point), 'missing parameter list')
        return node_text(params_node, self.source_code)


def _span(node):
    row, column = node.start_point
    return f"{row + 1}:{column}"
