"""
Utility modules
"""
from .language_detector import LanguageDetector
from .call_graph_builder import CallGraphBuilder
from .node_search import NodeSearch
from .report_printer import ReportPrinter
from .json_output import records_to_json, records_to_dicts

__all__ = [
    'LanguageDetector',
    'CallGraphBuilder',
    'NodeSearch',
    'ReportPrinter',
    'records_to_json',
    'records_to_dicts'
]
