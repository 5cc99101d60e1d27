"""Statement Emitter — writes statements through the comment sink."""

from __future__ import annotations

import logging
from typing import Callable

from . import constants
from .config import TranspilerConfig
from .errors import UnsupportedArity, UnsupportedConstruct
from .expressions import ExpressionEmitter
from .inference import infer_define_type
from .sink import CommentSink
from .syntax import (
    Assignment,
    Block,
    Conditional,
    ExpressionStatement,
    Return,
    Stmt,
)

logger = logging.getLogger(__name__)


class StatementEmitter:
    """Writes one statement per line, indented by nesting depth."""

    def __init__(
        self,
        out: CommentSink,
        exprs: ExpressionEmitter,
        config: TranspilerConfig = TranspilerConfig(),
    ):
        self._out = out
        self._exprs = exprs
        self._indent = config.indent
        self._STMT_DISPATCH: dict[type, Callable] = {
            ExpressionStatement: self._emit_expression_statement,
            Assignment: self._emit_assignment,
            Conditional: self._emit_conditional,
            Return: self._emit_return,
        }

    def emit_block(self, block: Block, depth: int) -> None:
        """Emit every statement of *block* at nesting *depth*."""
        for stmt in block.statements:
            self.emit(stmt, depth)

    def emit(self, stmt: Stmt, depth: int) -> None:
        handler = self._STMT_DISPATCH.get(type(stmt))
        if handler is None:
            raise self._out.error(
                UnsupportedConstruct, stmt, f"unsupported statement {stmt.kind}"
            )
        self._out.write(stmt, self._indent * depth)
        handler(stmt, depth)

    def _emit_expression_statement(self, stmt: ExpressionStatement, depth: int) -> None:
        self._out.write(stmt.expr, self._exprs.emit(stmt.expr))
        self._out.write(stmt, constants.TERMINATOR)

    def _emit_assignment(self, stmt: Assignment, depth: int) -> None:
        if stmt.operator not in (constants.DEFINE_OPERATOR, constants.ASSIGN_OPERATOR):
            raise self._out.error(
                UnsupportedConstruct, stmt, f"unexpected assignment: {stmt.operator}"
            )
        if len(stmt.targets) != 1 or len(stmt.values) != 1:
            raise self._out.error(
                UnsupportedArity,
                stmt,
                f"unsupported assignment of {len(stmt.values)} values "
                f"to {len(stmt.targets)} targets",
            )
        target, value = stmt.targets[0], stmt.values[0]
        if stmt.operator == constants.DEFINE_OPERATOR:
            typ = infer_define_type(value)
            if typ:
                self._out.write(stmt, typ + " ")
        self._out.write(target, self._exprs.emit(target))
        self._out.write(stmt, " = ")
        self._out.write(value, self._exprs.emit(value))
        self._out.write(stmt, constants.TERMINATOR)

    def _emit_conditional(self, stmt: Conditional, depth: int) -> None:
        if stmt.init is not None:
            raise self._out.error(
                UnsupportedConstruct, stmt.init, "unsupported if initializer"
            )
        if stmt.alternative is not None and not isinstance(stmt.alternative, Block):
            raise self._out.error(
                UnsupportedConstruct, stmt.alternative, "unsupported else statement"
            )
        self._out.write(stmt, "if (")
        self._out.write(stmt.condition, self._exprs.emit(stmt.condition))
        self._out.write(stmt, ") {\n")
        self.emit_block(stmt.body, depth + 1)
        self._out.write(stmt, self._indent * depth + "}")
        if stmt.alternative is not None:
            self._out.write(stmt, " else {\n")
            self.emit_block(stmt.alternative, depth + 1)
            self._out.write(stmt, self._indent * depth + "}")
        self._out.write(stmt, "\n")

    def _emit_return(self, stmt: Return, depth: int) -> None:
        if len(stmt.results) > 1:
            raise self._out.error(
                UnsupportedArity,
                stmt,
                f"unsupported # of return values: {len(stmt.results)}",
            )
        if not stmt.results:
            self._out.write(stmt, "return" + constants.TERMINATOR)
            return
        result = stmt.results[0]
        self._out.write(stmt, "return ")
        self._out.write(result, self._exprs.emit(result))
        self._out.write(stmt, constants.TERMINATOR)
