"""
Thread-safe wrapper around the tree-sitter JavaScript parser
"""
import logging
import threading

import tree_sitter_javascript as tsjavascript
from tree_sitter import Language, Parser

from funcgraph.errors import ParseError

logger = logging.getLogger(__name__)


class JavaScriptParser:
    """
    Parse JavaScript source into independent tree-sitter trees

    A tree-sitter Parser must not be used from two threads at once, so
    parse calls are serialized; the returned trees are independent and can
    be extracted in parallel.
    """

    def __init__(self):
        self.language = Language(tsjavascript.language())
        self.parser = Parser(self.language)
        self._lock = threading.Lock()

    def parse(self, source_code, filepath='<string>'):
        """
        Parse source code

        Args:
            source_code: Source code as bytes or str
            filepath: Path used in error messages

        Returns:
            tree_sitter.Tree
        """
        if isinstance(source_code, str):
            source_code = source_code.encode('utf-8')

        try:
            with self._lock:
                tree = self.parser.parse(source_code)
        except (TypeError, ValueError) as e:
            raise ParseError(filepath, e) from e

        if tree.root_node.has_error:
            logger.debug(f"{filepath}: syntax errors present, extracting from partial tree")
        return tree
