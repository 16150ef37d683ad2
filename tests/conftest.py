"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(scope="session")
def js_parser():
    """One parser for the whole session; parse calls are lock-guarded."""
    pytest.importorskip("tree_sitter_javascript")
    from funcgraph.parsers.javascript_parser import JavaScriptParser

    return JavaScriptParser()


@pytest.fixture
def parse_js(js_parser):
    """Parse source text, returning (root_node, source_bytes)."""

    def _parse(code):
        source = code.encode("utf-8")
        return js_parser.parse(source).root_node, source

    return _parse


@pytest.fixture
def extract(parse_js):
    """Run an extractor over source text and return the record dicts."""
    from funcgraph.extractors import EXTRACTORS

    def _extract(code, variant="rich"):
        root, source = parse_js(code)
        records = EXTRACTORS[variant]().extract(root, source, "test.js")
        return [record.to_dict() for record in records]

    return _extract
