"""
Detects functions declared inside other functions
"""
from funcgraph.extractors.function_classifier import is_function_node


def is_nested(node):
    """True if any ancestor of node (node itself excluded) opens a function scope"""
    parent = node.parent
    while parent is not None:
        if is_function_node(parent):
            return True
        parent = parent.parent
    return False
