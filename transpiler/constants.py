"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

LANGUAGE = "go"

INDENT = "  "
TERMINATOR = ";\n"

INT_TYPE = "int"
STRING_TYPE = "string"
INT_ZERO_VALUE = "0"
STRING_ZERO_VALUE = '""'

VOID_TYPE = "void"
INTERFACE_TYPE = "void *"
POINTER_PREFIX = "*"
MEMBER_SEPARATOR = "."

DEFINE_OPERATOR = ":="
ASSIGN_OPERATOR = "="
DEREFERENCE_OPERATOR = "*"

COMMENT_TYPE = "comment"

# Go keywords that tree-sitter exposes as dedicated node types but which
# behave as plain identifiers in the source language.
PREDECLARED_IDENTIFIER_TYPES: frozenset[str] = frozenset(
    {"true", "false", "nil", "iota"}
)

IDENTIFIER_TYPES: frozenset[str] = frozenset(
    {"identifier", "field_identifier", "package_identifier", "type_identifier"}
)
