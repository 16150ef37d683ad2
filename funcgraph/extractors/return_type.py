"""
Coarse return type inference for JavaScript functions

Rules are tried in order and the first one that yields a label wins:

    1. declared async              -> Promise<void>
    2. arrow with expression body  -> any
    3. first literal return        -> number | string
    4. anything else               -> void

Only the function's own return statements are inspected; returns inside
nested functions belong to those functions.
"""
from funcgraph.extractors.function_classifier import is_function_node

VOID = 'void'
ANY = 'any'
NUMBER = 'number'
STRING = 'string'
PROMISE_VOID = 'Promise<void>'

RETURN_TYPE_LABELS = (VOID, ANY, NUMBER, STRING, PROMISE_VOID)

LITERAL_RETURN_TYPES = {
    'number': NUMBER,
    'string': STRING,
    'template_string': STRING,
}


def _async_rule(function_node, is_async, is_arrow):
    if is_async:
        return PROMISE_VOID
    return None


def _expression_arrow_rule(function_node, is_async, is_arrow):
    if not is_arrow:
        return None
    body = function_node.child_by_field_name('body')
    if body is not None and body.type != 'statement_block':
        return ANY
    return None


def _literal_return_rule(function_node, is_async, is_arrow):
    body = function_node.child_by_field_name('body')
    if body is None:
        return None
    for expression in _return_expressions(body):
        label = LITERAL_RETURN_TYPES.get(expression.type)
        if label:
            return label
    return None


RULES = (_async_rule, _expression_arrow_rule, _literal_return_rule)


def infer_return_type(function_node, is_async, is_arrow):
    """
    Infer a coarse return type label

    Args:
        function_node: Tree-sitter function node (declaration, method, arrow or expression)
        is_async: Whether the function is declared async
        is_arrow: Whether the function is an arrow function

    Returns:
        One of RETURN_TYPE_LABELS
    """
    for rule in RULES:
        label = rule(function_node, is_async, is_arrow)
        if label is not None:
            return label
    return VOID


def _return_expressions(node):
    """Yield returned expressions in depth-first order, skipping nested functions"""
    stack = list(reversed(node.children))
    while stack:
        child = stack.pop()
        if is_function_node(child):
            continue
        if child.type == 'return_statement':
            expression = next((c for c in child.named_children if c.type != 'comment'), None)
            if expression is not None:
                yield expression
        else:
            stack.extend(reversed(child.children))
