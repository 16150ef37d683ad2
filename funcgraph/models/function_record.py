"""
Function record model describing one extracted function or method
"""


class FunctionRecord:
    """
    Represents a single top-level function or class method

    The rich extractor fills return_type and calls, the signature extractor
    fills signature, node_type and the start/end positions. Fields left as
    None are omitted from to_dict().
    """

    def __init__(self, name, parameters, class_name=None, filepath=None):
        self.name = name
        self.parameters = parameters
        self.class_name = class_name
        self.filepath = filepath
        self.signature = None
        self.return_type = None
        self.node_type = None
        self.start_position = None
        self.end_position = None
        self.calls = []
        self.called_by = []

    @property
    def qualified_name(self):
        if self.class_name:
            return f"{self.class_name}.{self.name}"
        return self.name

    def to_dict(self):
        """Serialize to a plain dict using the output field names"""
        data = {}
        if self.node_type is not None:
            data['type'] = self.node_type
        if self.signature is not None:
            data['name'] = self.signature
        else:
            data['name'] = self.name
            data['parameters'] = self.parameters
        if self.return_type is not None:
            data['returnType'] = self.return_type
        if self.class_name is not None:
            data['class'] = self.class_name
        if self.calls:
            data['calls'] = list(self.calls)
        if self.start_position is not None:
            data['startPosition'] = _point(self.start_position)
            data['endPosition'] = _point(self.end_position)
        return data

    def __repr__(self):
        return f"<{self.filepath}::{self.qualified_name}>"


def _point(position):
    row, column = position
    return {'row': row, 'column': column}
