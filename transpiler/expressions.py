"""Expression Emitter — renders expressions to Arduino C text."""

from __future__ import annotations

from typing import Callable

from . import constants
from .errors import UnsupportedConstruct
from .sink import CommentSink
from .syntax import (
    BinaryOp,
    Call,
    Dereference,
    Expr,
    Identifier,
    Literal,
    QualifiedAccess,
    UnaryOp,
)
from .typemap import TypeMapper


class ExpressionEmitter:
    """Renders an expression tree as text.

    Operators are spelled without surrounding spaces and nothing is
    re-parenthesized: the output grouping is the tree's grouping.
    """

    def __init__(self, out: CommentSink, types: TypeMapper):
        self._out = out
        self._types = types
        self._EXPR_DISPATCH: dict[type, Callable[..., str]] = {
            Literal: self._emit_literal,
            BinaryOp: self._emit_binary,
            UnaryOp: self._emit_unary,
            Identifier: self._emit_identifier,
            QualifiedAccess: self._emit_selector,
            Dereference: self._emit_dereference,
            Call: self._emit_call,
        }

    def emit(self, expr: Expr) -> str:
        handler = self._EXPR_DISPATCH.get(type(expr))
        if handler:
            return handler(expr)
        raise self._out.error(UnsupportedConstruct, expr, f"unsupported expr {expr.kind}")

    def _emit_literal(self, expr: Literal) -> str:
        return expr.text

    def _emit_binary(self, expr: BinaryOp) -> str:
        return self.emit(expr.left) + expr.op + self.emit(expr.right)

    def _emit_unary(self, expr: UnaryOp) -> str:
        return expr.op + self.emit(expr.operand)

    def _emit_identifier(self, expr: Identifier) -> str:
        return expr.name

    def _emit_selector(self, expr: QualifiedAccess) -> str:
        # Always ".", pointer bases are not tracked.
        return self.emit(expr.base) + constants.MEMBER_SEPARATOR + self.emit(expr.member)

    def _emit_dereference(self, expr: Dereference) -> str:
        return constants.DEREFERENCE_OPERATOR + self.emit(expr.operand)

    def _emit_call(self, expr: Call) -> str:
        args = [self.emit(a) for a in expr.args]
        callee = self._types.callee_spelling(expr.callee)
        return f"{callee}({', '.join(args)})"
