"""
JavaScript extractor producing signatures with source positions
"""
from funcgraph.extractors.base_extractor import BaseExtractor
from funcgraph.models.function_record import FunctionRecord


class SignatureExtractor(BaseExtractor):
    """Extract named functions as `Class.name(params)` signatures with their spans"""

    def build_record(self, candidate):
        func_node = candidate.function_node

        parameters = candidate.parameters
        if func_node.child_by_field_name('parameters') is None:
            # x => x
            parameters = f"({parameters})"

        signature = f"{candidate.name}{parameters}"
        if candidate.class_name:
            signature = f"{candidate.class_name}.{signature}"

        record = FunctionRecord(
            name=candidate.name,
            parameters=candidate.parameters,
            class_name=candidate.class_name
        )
        record.signature = signature
        record.node_type = func_node.type
        record.start_position = tuple(func_node.start_point)
        record.end_position = tuple(func_node.end_point)
        return record
