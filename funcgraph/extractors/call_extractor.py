"""
Call list extraction scoped to a single function
"""
from funcgraph.utils.node_text import node_text


class CallExtractor:
    """
    Collect the functions called from one function body

    Local variables initialized with `new ClassName(...)` are remembered so
    that `instance.method()` is reported as `ClassName.method`. The alias
    table follows the single forward pass: a call that appears before the
    `new` it would resolve through is reported unresolved.
    """

    IGNORED_OBJECTS = frozenset({'console'})
    IGNORED_CALLS = frozenset({'console.log'})

    def __init__(self, source_code):
        self.source_code = source_code

    def extract_calls(self, function_node):
        """
        Find calls within a function

        Args:
            function_node: Tree-sitter function node

        Returns:
            List of called names, deduplicated in first-occurrence order
        """
        aliases = {}
        calls = {}

        # explicit stack, pre-order and left-to-right like the alias table expects
        stack = [function_node]
        while stack:
            node = stack.pop()
            if node.type == 'variable_declarator':
                self._record_alias(node, aliases)
            elif node.type == 'call_expression':
                called = self._resolve_call(node, aliases)
                if called and called not in self.IGNORED_CALLS:
                    calls.setdefault(called, None)

            stack.extend(reversed(node.children))

        return list(calls)

    def _record_alias(self, declarator, aliases):
        name_node = declarator.child_by_field_name('name')
        value = declarator.child_by_field_name('value')
        if name_node is None or value is None:
            return
        if name_node.type != 'identifier' or value.type != 'new_expression':
            return

        constructor = value.child_by_field_name('constructor')
        if constructor is not None:
            aliases[node_text(name_node, self.source_code)] = node_text(constructor, self.source_code)

    def _resolve_call(self, call_node, aliases):
        callee = call_node.child_by_field_name('function')
        if callee is None:
            return None

        if callee.type == 'identifier':
            return node_text(callee, self.source_code)

        if callee.type == 'member_expression':
            object_node = callee.child_by_field_name('object')
            property_node = callee.child_by_field_name('property')
            if object_node is None or property_node is None:
                return None

            obj_name = node_text(object_node, self.source_code)
            if obj_name in self.IGNORED_OBJECTS:
                return None

            method_name = node_text(property_node, self.source_code)
            class_name = aliases.get(obj_name)
            if class_name:
                return f"{class_name}.{method_name}"
            return f"{obj_name}.{method_name}"

        return None
