"""
Function extractors for JavaScript syntax trees
"""
from .base_extractor import BaseExtractor
from .javascript_extractor import JavaScriptExtractor
from .signature_extractor import SignatureExtractor

EXTRACTORS = {
    'rich': JavaScriptExtractor,
    'signature': SignatureExtractor,
}

__all__ = [
    'BaseExtractor',
    'JavaScriptExtractor',
    'SignatureExtractor',
    'EXTRACTORS'
]
