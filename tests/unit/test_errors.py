"""Tests for fail-fast rejection of constructs outside the subset."""

from __future__ import annotations

import io

import pytest

from transpiler.api import transpile, transpile_stream
from transpiler.errors import (
    TranslationError,
    UnsupportedArity,
    UnsupportedConstruct,
    UnsupportedInitializer,
    UnsupportedType,
)


def _func(body: str, signature: str = "func loop()") -> str:
    return f"package main\n\n{signature} {{\n{body}\n}}\n"


class TestUnsupportedConstruct:
    @pytest.mark.parametrize(
        "body",
        [
            "\tfor {\n\t}",
            "\tx++",
            "\tgo f()",
            "\tdefer f()",
            "\tswitch x {\n\t}",
            "\t{\n\t\tf()\n\t}",
            "\tx += 1",
            "\tx = (a + b) * c",
            "\tx = func() {}",
            "\tx = m[1]",
            "\tx = len(s[1:])",
        ],
    )
    def test_statement_or_expression_outside_subset(self, body):
        with pytest.raises(UnsupportedConstruct):
            transpile(_func(body))

    def test_else_if_chain(self):
        with pytest.raises(UnsupportedConstruct, match="else"):
            transpile(_func("\tif a {\n\t} else if b {\n\t}"))

    def test_if_initializer(self):
        with pytest.raises(UnsupportedConstruct, match="initializer"):
            transpile(_func("\tif x := 1; x > 0 {\n\t}"))

    def test_function_pointer_parameter(self):
        with pytest.raises(UnsupportedConstruct, match="function pointers"):
            transpile(_func("", signature="func each(cb func(int))"))

    def test_map_parameter(self):
        with pytest.raises(UnsupportedConstruct):
            transpile(_func("", signature="func f(m map[string]int)"))

    def test_type_declaration(self):
        with pytest.raises(UnsupportedConstruct, match="type_declaration"):
            transpile("package main\n\ntype led struct{}\n")

    def test_error_reports_line(self):
        with pytest.raises(UnsupportedConstruct) as exc_info:
            transpile("package main\n\nfunc loop() {\n\tfor {\n\t}\n}\n")
        assert exc_info.value.line == 4
        assert str(exc_info.value).startswith("line 4: ")
        assert exc_info.value.kind == "for_statement"


class TestUnsupportedArity:
    def test_two_assignment_targets(self):
        with pytest.raises(UnsupportedArity):
            transpile(_func("\ta, b = 1, 2"))

    def test_two_return_values(self):
        with pytest.raises(UnsupportedArity):
            transpile(_func("\treturn 1, 2", signature="func f() int"))

    def test_two_result_types(self):
        with pytest.raises(UnsupportedArity):
            transpile(_func("", signature="func f() (int, int)"))

    def test_two_named_results(self):
        with pytest.raises(UnsupportedArity):
            transpile(_func("", signature="func f() (a, b int)"))


class TestUnsupportedValues:
    def test_zero_value_of_unknown_type(self):
        with pytest.raises(UnsupportedType):
            transpile("package main\n\nvar f float64\n")

    def test_literal_kind_without_c_type(self):
        with pytest.raises(UnsupportedType, match="FLOAT"):
            transpile("package main\n\nconst pi = 3.14\n")

    def test_non_literal_initializer(self):
        with pytest.raises(UnsupportedInitializer):
            transpile("package main\n\nvar x = y\n")

    def test_computed_constant(self):
        with pytest.raises(UnsupportedInitializer):
            transpile("package main\n\nconst x = 1 << 3\n")

    def test_two_values(self):
        with pytest.raises(UnsupportedInitializer):
            transpile("package main\n\nconst a, b = 1, 2\n")


class TestFailFast:
    def test_output_before_failure_is_kept_and_nothing_after(self):
        buf = io.StringIO()
        source = "package main\n\nconst a = 1\n\nvar b = f()\n\nconst c = 3\n"
        with pytest.raises(UnsupportedInitializer):
            transpile_stream(buf, source)
        assert buf.getvalue() == "const int a = 1;\n"

    def test_every_error_is_a_translation_error(self):
        with pytest.raises(TranslationError):
            transpile("package main\n\nvar x = y\n")
