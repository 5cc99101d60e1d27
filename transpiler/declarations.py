"""Declaration Emitter — top-level constants, variables, imports and functions."""

from __future__ import annotations

import logging
from typing import Callable

from . import constants
from .errors import UnsupportedArity, UnsupportedConstruct, UnsupportedType
from .inference import guess_type, token_spelling
from .sink import CommentSink
from .statements import StatementEmitter
from .syntax import Decl, Function, ImportReference, ValueGroup, ValueSpec
from .typemap import TypeMapper

logger = logging.getLogger(__name__)


class DeclarationEmitter:
    """Dispatches each top-level declaration to its handler."""

    def __init__(self, out: CommentSink, types: TypeMapper, stmts: StatementEmitter):
        self._out = out
        self._types = types
        self._stmts = stmts
        self._DECL_DISPATCH: dict[type, Callable] = {
            ValueGroup: self._emit_value_group,
            ImportReference: self._emit_import,
            Function: self._emit_function,
        }

    def emit(self, decl: Decl) -> None:
        handler = self._DECL_DISPATCH.get(type(decl))
        if handler is None:
            raise self._out.error(UnsupportedConstruct, decl, f"unsupported decl {decl.kind}")
        logger.debug("Emitting %s at %d", decl.kind, decl.pos)
        handler(decl)

    # ── const / var ──────────────────────────────────────────────

    def _emit_value_group(self, group: ValueGroup) -> None:
        for spec in group.specs:
            self._emit_value_spec(spec)

    def _emit_value_spec(self, spec: ValueSpec) -> None:
        if not spec.names:
            raise self._out.error(
                UnsupportedArity, spec, f"unsupported # of value names: {spec.names}"
            )
        kind, lit = guess_type(self._out, spec)
        typ = token_spelling(kind, spec.is_const)
        if not typ:
            raise self._out.error(
                UnsupportedType, spec, f"unsupported literal kind: {kind.value}"
            )
        # One line per name; C could declare them all on one line.
        for name in spec.names:
            self._out.write(spec, f"{typ} {name} = {lit}" + constants.TERMINATOR)

    # ── import ───────────────────────────────────────────────────

    def _emit_import(self, decl: ImportReference) -> None:
        # Nothing to emit; writing advances the comment cursor past it.
        self._out.write(decl, "")

    # ── func ─────────────────────────────────────────────────────

    def _return_type(self, fn: Function) -> str:
        if not fn.results:
            return constants.VOID_TYPE
        count = sum(max(len(f.names), 1) for f in fn.results)
        if count != 1:
            raise self._out.error(
                UnsupportedArity, fn, f"unsupported # of return values: {count}"
            )
        ret, _ = self._types.map_type(fn.results[0].type)
        return ret

    def _emit_function(self, fn: Function) -> None:
        ret = self._return_type(fn)
        params = self._types.parameter_types(fn)
        self._out.write(fn, f"{ret} {fn.name}({' '.join(params)}) {{\n")
        self._stmts.emit_block(fn.body, 1)
        self._out.write(fn.body, "}\n")
