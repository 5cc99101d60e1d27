"""Literal/type inference for implicitly typed declarations."""

from __future__ import annotations

from . import constants
from .errors import UnsupportedInitializer, UnsupportedType
from .sink import CommentSink
from .syntax import BinaryOp, Expr, Identifier, Literal, LiteralKind, Named, ValueSpec

ZERO_VALUES: dict[str, tuple[LiteralKind, str]] = {
    constants.INT_TYPE: (LiteralKind.INT, constants.INT_ZERO_VALUE),
    constants.STRING_TYPE: (LiteralKind.STRING, constants.STRING_ZERO_VALUE),
}


def guess_type(out: CommentSink, spec: ValueSpec) -> tuple[LiteralKind, str]:
    """Return the literal kind and text a value spec is declared with.

    ``var a int`` yields the zero value of its type; ``const a = 1`` yields
    the literal verbatim. Computed initializers are rejected.
    """
    if len(spec.values) > 1:
        raise out.error(
            UnsupportedInitializer, spec, f"unsupported # of values: {spec.names}"
        )
    if spec.type is not None and not (
        isinstance(spec.type, Named) and spec.type.name in ZERO_VALUES
    ):
        raise out.error(UnsupportedType, spec.type, f"unsupported type: {_type_text(spec)}")
    if not spec.values:
        if spec.type is None:
            raise out.error(
                UnsupportedInitializer, spec, f"missing value: {spec.names}"
            )
        return ZERO_VALUES[spec.type.name]
    value = spec.values[0]
    if not isinstance(value, Literal):
        raise out.error(UnsupportedInitializer, value, f"unsupported value: {value.kind}")
    return value.literal_kind, value.text


def _type_text(spec: ValueSpec) -> str:
    if isinstance(spec.type, Named):
        return spec.type.name
    return spec.type.kind


def token_spelling(kind: LiteralKind, is_const: bool) -> str:
    """Return the closest C type for a literal kind, or "" if there is none."""
    if kind == LiteralKind.INT:
        return "const int" if is_const else "int"
    if kind == LiteralKind.STRING:
        return "const char * const" if is_const else "const char *"
    return ""


def infer_define_type(expr: Expr) -> str:
    """Type token injected before the target of a ``:=`` statement.

    Only literals get a real type. An identifier stands in for its own
    type, and a binary expression takes the token of its left operand, so
    ``x := a + b`` declares ``a x = a+b;``.
    """
    if isinstance(expr, Literal):
        return token_spelling(expr.literal_kind, False)
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, BinaryOp):
        return infer_define_type(expr.left)
    return ""
