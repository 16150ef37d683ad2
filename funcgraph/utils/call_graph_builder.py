"""
Call graph builder for building called_by relationships within a file
"""


class CallGraphBuilder:
    """Build called_by relationships between records of the same file"""

    @staticmethod
    def build_call_graph(records, record_map):
        """
        Build called_by relationships

        Calls are matched by qualified name inside the caller's own file;
        calls into other files are left unresolved.

        Args:
            records: List of FunctionRecord objects
            record_map: Dictionary mapping 'filepath::qualified_name' to FunctionRecord

        Returns:
            Updated records with called_by relationships
        """
        for record in records:
            for called in record.calls:
                target = record_map.get(f"{record.filepath}::{called}")
                if target is not None and record.qualified_name not in target.called_by:
                    target.called_by.append(record.qualified_name)

        return records
