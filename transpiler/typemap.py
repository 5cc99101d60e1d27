"""Type Mapper — Go type expressions to Arduino C spellings.

Arrays and slices decay to plain pointers: no length survives in the
spelling. Qualified names always render with ``.``, even when the base is
known to be a pointer.
"""

from __future__ import annotations

import logging
from typing import Callable

from . import constants
from .errors import UnsupportedArity, UnsupportedConstruct
from .sink import CommentSink
from .syntax import (
    Array,
    Dereference,
    Expr,
    FieldDecl,
    Function,
    FunctionType,
    Identifier,
    Interface,
    Named,
    Pointer,
    Qualified,
    QualifiedAccess,
    TypeExpr,
    Variadic,
)

logger = logging.getLogger(__name__)


class TypeMapper:
    """Maps type expressions to ``(spelling, is_variadic)`` pairs."""

    def __init__(self, out: CommentSink):
        self._out = out
        self._TYPE_DISPATCH: dict[type, Callable] = {
            Named: self._map_named,
            Pointer: self._map_pointer,
            Array: self._map_pointer,
            Variadic: self._map_variadic,
            Interface: self._map_interface,
            Qualified: self._map_qualified,
            FunctionType: self._map_function,
        }
        self._CALLEE_DISPATCH: dict[type, Callable] = {
            Identifier: self._identifier_as_type,
            QualifiedAccess: self._selector_as_type,
            Dereference: self._dereference_as_type,
        }

    # ── entry points ─────────────────────────────────────────────

    def map_type(self, node: TypeExpr) -> tuple[str, bool]:
        """Return the C spelling of *node* and whether it carries ``...``."""
        handler = self._TYPE_DISPATCH.get(type(node))
        if handler:
            return handler(node)
        raise self._out.error(
            UnsupportedConstruct, node, f"unexpected param type {node.kind}"
        )

    def callee_spelling(self, expr: Expr) -> str:
        """Spell a call target through the qualified-name path."""
        name, _ = self.map_type(self._as_type(expr))
        return name

    def parameter_types(self, fn: Function) -> list[str]:
        """Flatten receiver and parameters into one type per bound name.

        A pointer receiver becomes the leading parameter. A value receiver
        contributes nothing.
        """
        fields: list[FieldDecl] = []
        if fn.receiver is not None:
            if len(fn.receiver) != 1:
                raise self._out.error(
                    UnsupportedArity, fn, "expect only one receiver; please fix code"
                )
            if isinstance(fn.receiver[0].type, Pointer):
                fields.append(fn.receiver[0])
            else:
                logger.debug("Dropping value receiver of %s", fn.name)
        fields.extend(fn.params)
        types: list[str] = []
        for i, field in enumerate(fields):
            typ, variadic = self.map_type(field.type)
            if variadic and i != len(fields) - 1:
                raise self._out.error(
                    UnsupportedConstruct, field, "unsupported param type: ... before last parameter"
                )
            types.extend([typ] * max(len(field.names), 1))
        return types

    # ── type expressions ─────────────────────────────────────────

    def _map_named(self, node: Named) -> tuple[str, bool]:
        return node.name, False

    def _map_pointer(self, node: Pointer | Array) -> tuple[str, bool]:
        name, variadic = self.map_type(node.inner)
        return constants.POINTER_PREFIX + name, variadic

    def _map_variadic(self, node: Variadic) -> tuple[str, bool]:
        name, _ = self.map_type(node.inner)
        return name, True

    def _map_interface(self, node: Interface) -> tuple[str, bool]:
        return constants.INTERFACE_TYPE, False

    def _map_qualified(self, node: Qualified) -> tuple[str, bool]:
        x, _ = self.map_type(node.base)
        s, _ = self.map_type(node.member)
        return x + constants.MEMBER_SEPARATOR + s, False

    def _map_function(self, node: FunctionType) -> tuple[str, bool]:
        raise self._out.error(
            UnsupportedConstruct, node, "function pointers are not supported"
        )

    # ── call targets ─────────────────────────────────────────────

    def _as_type(self, expr: Expr) -> TypeExpr:
        handler = self._CALLEE_DISPATCH.get(type(expr))
        if handler:
            return handler(expr)
        raise self._out.error(
            UnsupportedConstruct, expr, f"unsupported callee {expr.kind}"
        )

    def _identifier_as_type(self, expr: Identifier) -> TypeExpr:
        return Named(pos=expr.pos, name=expr.name)

    def _selector_as_type(self, expr: QualifiedAccess) -> TypeExpr:
        return Qualified(
            pos=expr.pos,
            base=self._as_type(expr.base),
            member=Named(pos=expr.member.pos, name=expr.member.name),
        )

    def _dereference_as_type(self, expr: Dereference) -> TypeExpr:
        return Pointer(pos=expr.pos, inner=self._as_type(expr.operand))
