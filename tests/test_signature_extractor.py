"""Tests for the signature variant reporting node kinds and positions."""

import pytest

pytest.importorskip("tree_sitter_javascript")


CODE = (
    "async function hello() {\n"
    "  const foo = () => 123;\n"
    "}\n"
    "\n"
    "const greet = (name) => {\n"
    "  hello();\n"
    "};\n"
    "\n"
    "class MyClass {\n"
    "  method(a, b, c=1) {}\n"
    "}\n"
    "\n"
    "(function() {})();\n"
)


class TestSignatures:
    """Composed names and node kinds."""

    def test_names_and_types(self, extract):
        records = extract(CODE, variant="signature")

        assert [(r["type"], r["name"]) for r in records] == [
            ("function_declaration", "hello()"),
            ("arrow_function", "greet(name)"),
            ("method_definition", "MyClass.method(a, b, c=1)"),
        ]

    def test_rich_fields_are_absent(self, extract):
        for record in extract(CODE, variant="signature"):
            assert "returnType" not in record
            assert "calls" not in record
            assert "parameters" not in record

    def test_class_field_only_on_methods(self, extract):
        records = extract(CODE, variant="signature")

        assert "class" not in records[0]
        assert records[2]["class"] == "MyClass"


class TestPositions:
    """Zero-based row/column spans of the function node."""

    def test_function_declaration_span(self, extract):
        hello = extract(CODE, variant="signature")[0]

        assert hello["startPosition"] == {"row": 0, "column": 0}
        assert hello["endPosition"] == {"row": 2, "column": 1}

    def test_arrow_span_starts_at_arrow(self, extract):
        greet = extract(CODE, variant="signature")[1]

        assert greet["startPosition"] == {"row": 4, "column": 14}
        assert greet["endPosition"] == {"row": 6, "column": 1}

    def test_method_span(self, extract):
        method = extract(CODE, variant="signature")[2]

        assert method["startPosition"] == {"row": 9, "column": 2}
        assert method["endPosition"] == {"row": 9, "column": 22}


class TestBareParameterArrow:
    """Arrows with an unparenthesized parameter still compose a signature."""

    def test_parameter_is_parenthesized(self, extract):
        records = extract("const inc = x => x + 1;", variant="signature")

        assert records[0]["name"] == "inc(x)"

    def test_rich_variant_keeps_verbatim_text(self, extract):
        assert extract("const inc = x => x + 1;")[0]["parameters"] == "x"
