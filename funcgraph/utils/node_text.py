"""
Helpers for reading tree-sitter nodes
"""


def node_text(node, source_code):
    """Source text covered by node, decoded from the source bytes"""
    return source_code[node.start_byte:node.end_byte].decode('utf-8', errors='replace')
