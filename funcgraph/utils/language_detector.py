"""
Language detection utility for source files
"""
import os


class LanguageDetector:
    """Detect JavaScript sources from file extension"""

    LANGUAGE_MAP = {
        '.js': 'javascript',
        '.mjs': 'javascript',
        '.cjs': 'javascript',
        '.jsx': 'javascript',
    }

    @staticmethod
    def detect(filepath):
        """
        Detect language from file extension

        Args:
            filepath: Path to the source file

        Returns:
            Language identifier (str) or None if not supported
        """
        _, ext = os.path.splitext(filepath)
        return LanguageDetector.LANGUAGE_MAP.get(ext.lower())
