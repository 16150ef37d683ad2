"""Tests for coarse return type inference."""

import pytest

pytest.importorskip("tree_sitter_javascript")

from funcgraph.extractors.return_type import PROMISE_VOID, RETURN_TYPE_LABELS, infer_return_type


def _return_type(extract, code):
    records = extract(code)
    assert len(records) == 1
    return records[0]["returnType"]


class TestDecisionTable:
    """Each rule in isolation."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("function f() { return 5; }", "number"),
            ("function f() { return 'five'; }", "string"),
            ("function f() { return `five`; }", "string"),
            ("function f() {}", "void"),
            ("function f() { return; }", "void"),
            ("function f() { return compute(); }", "void"),
            ("const f = () => 42;", "any"),
            ("const f = () => ({ a: 1 });", "any"),
            ("const f = () => { return 1; };", "number"),
            ("const f = function () { return 'a'; };", "string"),
            ("async function f() {}", "Promise<void>"),
        ],
    )
    def test_label(self, extract, code, expected):
        assert _return_type(extract, code) == expected

    def test_labels_are_closed_set(self, extract):
        code = """
        function a() { return 1; }
        function b() { return x; }
        const c = () => x;
        async function d() {}
        """
        assert {r["returnType"] for r in extract(code)} <= set(RETURN_TYPE_LABELS)


class TestPrecedence:
    """Earlier rules win over later ones."""

    def test_async_beats_literal_return(self, extract):
        assert _return_type(extract, "async function f() { return 5; }") == "Promise<void>"

    def test_async_arrow_beats_expression_body(self, extract):
        assert _return_type(extract, "const f = async () => 5;") == "Promise<void>"

    def test_async_flag_is_trusted(self, parse_js):
        root, _ = parse_js("function f() { return 5; }")
        func_node = root.named_children[0]

        assert infer_return_type(func_node, True, False) == PROMISE_VOID
        assert infer_return_type(func_node, False, False) == "number"


class TestReturnSearch:
    """Depth-first search over the function's own return statements."""

    def test_first_literal_return_wins(self, extract):
        code = "function f(x) { if (x) { return 'early'; } return 2; }"
        assert _return_type(extract, code) == "string"

    def test_non_literal_returns_are_passed_over(self, extract):
        code = "function f(x) { if (x) { return x; } return 2; }"
        assert _return_type(extract, code) == "number"

    def test_nested_function_returns_are_ignored(self, extract):
        code = "function f() { const inner = () => { return 1; }; inner(); }"
        assert _return_type(extract, code) == "void"

    def test_returns_inside_loops_are_found(self, extract):
        code = "function f(items) { for (const i of items) { while (i) { return 'x'; } } }"
        assert _return_type(extract, code) == "string"
