"""Composable API functions for the Go -> Arduino C translator.

Each function corresponds to a CLI workflow but is callable
programmatically without argparse.
"""

from __future__ import annotations

import io
import logging
from enum import Enum
from typing import Any, TextIO

from pydantic import BaseModel

from .config import TranspilerConfig
from .declarations import DeclarationEmitter
from .expressions import ExpressionEmitter
from .frontend import get_frontend
from .parser import Parser, TreeSitterParserFactory
from .sink import CommentSink
from .statements import StatementEmitter
from .syntax import Node, TranslationUnit
from .typemap import TypeMapper

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = TranspilerConfig()


def parse_source(source: str, config: TranspilerConfig = _DEFAULT_CONFIG) -> TranslationUnit:
    """Parse Go source text into a typed translation unit.

    Raises:
        ParseError: If the source is not syntactically valid.
    """
    source_bytes = source.encode("utf-8")
    tree = Parser(TreeSitterParserFactory()).parse(source_bytes, config.language)
    return get_frontend(config.language).build(tree, source_bytes)


def translate_unit(
    out: TextIO, unit: TranslationUnit, config: TranspilerConfig = _DEFAULT_CONFIG
) -> None:
    """Write the translation of *unit* to *out*.

    Stops at the first unsupported construct. Whatever was written before
    the failing declaration stays in *out* and must not be used.
    """
    sink = CommentSink(out, unit)
    types = TypeMapper(sink)
    stmts = StatementEmitter(sink, ExpressionEmitter(sink, types), config)
    decls = DeclarationEmitter(sink, types, stmts)
    logger.info("Translating %d declarations", len(unit.decls))
    for decl in unit.decls:
        decls.emit(decl)
    if sink.pending_comments:
        logger.debug("%d trailing comment groups not emitted", sink.pending_comments)


def transpile_stream(
    out: TextIO, source: str, config: TranspilerConfig = _DEFAULT_CONFIG
) -> TranslationUnit:
    """Parse *source* and write its translation to *out*.

    Returns:
        The parsed translation unit, e.g. for dumping with ``dump_tree``.

    Raises:
        TranslationError: On the first construct outside the subset.
    """
    unit = parse_source(source, config)
    translate_unit(out, unit, config)
    return unit


def transpile(source: str, config: TranspilerConfig = _DEFAULT_CONFIG) -> str:
    """Translate Go *source* and return the Arduino C text."""
    buf = io.StringIO()
    transpile_stream(buf, source, config)
    return buf.getvalue()


def dump_tree(node: BaseModel) -> str:
    """Return an indented, one-field-per-line dump of a typed tree."""
    lines: list[str] = []
    _dump_value("", node, 0, lines)
    return "\n".join(lines)


def _dump_value(label: str, value: Any, depth: int, lines: list[str]) -> None:
    prefix = "  " * depth + (f"{label}: " if label else "")
    if isinstance(value, Node):
        lines.append(f"{prefix}{value.kind} @{value.pos}")
        _dump_fields(value, depth, lines)
    elif isinstance(value, BaseModel):
        lines.append(f"{prefix}{type(value).__name__}")
        _dump_fields(value, depth, lines)
    elif isinstance(value, list):
        lines.append(f"{prefix}[{len(value)}]")
        for i, item in enumerate(value):
            _dump_value(str(i), item, depth + 1, lines)
    elif isinstance(value, Enum):
        lines.append(f"{prefix}{value.value}")
    else:
        lines.append(f"{prefix}{value!r}")


def _dump_fields(value: BaseModel, depth: int, lines: list[str]) -> None:
    for name in type(value).model_fields:
        if name in ("pos", "source", "node_type"):
            continue
        _dump_value(name, getattr(value, name), depth + 1, lines)
