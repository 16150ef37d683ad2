"""
JavaScript extractor producing return types and call lists
"""
from funcgraph.extractors.base_extractor import BaseExtractor
from funcgraph.extractors.call_extractor import CallExtractor
from funcgraph.extractors.return_type import infer_return_type
from funcgraph.models.function_record import FunctionRecord


class JavaScriptExtractor(BaseExtractor):
    """Extract named functions with return type and calls"""

    def build_record(self, candidate):
        record = FunctionRecord(
            name=candidate.name,
            parameters=candidate.parameters,
            class_name=candidate.class_name
        )
        record.return_type = infer_return_type(candidate.function_node, candidate.is_async, candidate.is_arrow)
        record.calls = self.find_calls(candidate.function_node)
        return record

    def find_calls(self, func_node):
        """Find calls made from within a function"""
        return CallExtractor(self.source_code).extract_calls(func_node)
