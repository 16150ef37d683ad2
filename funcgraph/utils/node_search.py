"""
Record search and query utilities
"""


class NodeSearch:
    """Search and query function records"""

    @staticmethod
    def search_function(records, func_name):
        """
        Search for functions and methods by bare or qualified name

        Args:
            records: List of FunctionRecord objects
            func_name: 'name' or 'Class.name'

        Returns:
            List of matching FunctionRecord objects
        """
        return [r for r in records if func_name in (r.name, r.qualified_name)]

    @staticmethod
    def search_class(records, class_name):
        """Methods declared in the named class"""
        return [r for r in records if r.class_name == class_name]
