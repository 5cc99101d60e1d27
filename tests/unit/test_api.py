"""Tests for the composable API functions in transpiler.api."""

from __future__ import annotations

import io

from transpiler.api import dump_tree, parse_source, transpile, transpile_stream
from transpiler.config import TranspilerConfig
from transpiler.syntax import TranslationUnit

SOURCE = "package main\n\nfunc setup() {\n\tif a {\n\t\tf()\n\t}\n}\n"


class TestTranspile:
    def test_returns_string(self):
        assert isinstance(transpile(SOURCE), str)

    def test_custom_indent(self):
        out = transpile(SOURCE, TranspilerConfig(indent="\t"))
        assert out == "void setup() {\n\tif (a) {\n\t\tf();\n\t}\n}\n"


class TestTranspileStream:
    def test_writes_to_stream_and_returns_unit(self):
        buf = io.StringIO()
        unit = transpile_stream(buf, SOURCE)
        assert isinstance(unit, TranslationUnit)
        assert buf.getvalue() == transpile(SOURCE)


class TestDumpTree:
    def test_dump_lists_node_kinds_and_fields(self):
        dump = dump_tree(parse_source(SOURCE))
        lines = dump.splitlines()
        assert lines[0] == "TranslationUnit"
        assert any(line.strip().startswith("0: Function @") for line in lines)
        assert any("name: 'setup'" in line for line in lines)
        assert any("Conditional @" in line for line in lines)

    def test_dump_shows_literal_kind_value(self):
        dump = dump_tree(parse_source("package main\n\nconst a = 1\n"))
        assert "literal_kind: INT" in dump
        assert "is_const: True" in dump
