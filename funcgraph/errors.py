"""
Exceptions raised by the extraction core and the repository scanner
"""


class FuncGraphError(Exception):
    """Base class for all funcgraph errors"""


class InvalidInputError(FuncGraphError):
    """Raised when the core is invoked without a syntax tree"""

    def __init__(self, message="No syntax tree given; parse the source before extracting"):
        super().__init__(message)


class MalformedNodeError(FuncGraphError):
    """Raised when a function-bearing node lacks a required structural child"""

    def __init__(self, node_type, start_point, reason):
        self.node_type = node_type
        self.start_point = start_point
        self.reason = reason
        row, column = start_point
        super().__init__(f"Malformed {node_type} at {row + 1}:{column}: {reason}")


class ParseError(FuncGraphError):
    """Raised when tree-sitter fails to parse a file"""

    def __init__(self, file_path, error):
        self.file_path = file_path
        self.original_error = error
        super().__init__(f"Failed to parse {file_path} as javascript: {error}")


class FileTooLargeError(FuncGraphError):
    """Raised when a file exceeds the configured size limit"""

    def __init__(self, file_path, size, limit):
        self.file_path = file_path
        self.size = size
        self.limit = limit
        super().__init__(
            f"File {file_path} is {size:,} bytes, exceeds limit of {limit:,} bytes. "
            f"Set FUNCGRAPH_MAX_FILE_SIZE to increase the limit."
        )
