"""
JavaScript parsing and repository scanning
"""
from .javascript_parser import JavaScriptParser
from .repository_scanner import RepositoryScanner, analyze_source

__all__ = [
    'JavaScriptParser',
    'RepositoryScanner',
    'analyze_source'
]
