"""
funcgraph: function and call list extraction for JavaScript sources
"""
from funcgraph.errors import FuncGraphError, InvalidInputError, MalformedNodeError, ParseError, FileTooLargeError
from funcgraph.extractors import JavaScriptExtractor, SignatureExtractor
from funcgraph.models import FunctionRecord
from funcgraph.parsers import JavaScriptParser, RepositoryScanner, analyze_source

__version__ = '0.1.0'

__all__ = [
    'FuncGraphError',
    'InvalidInputError',
    'MalformedNodeError',
    'ParseError',
    'FileTooLargeError',
    'JavaScriptExtractor',
    'SignatureExtractor',
    'FunctionRecord',
    'JavaScriptParser',
    'RepositoryScanner',
    'analyze_source'
]
