"""
Data models produced and consumed by the extractors
"""
from .function_record import FunctionRecord
from .analysis_context import AnalysisContext

__all__ = [
    'FunctionRecord',
    'AnalysisContext'
]
