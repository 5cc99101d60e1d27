"""Tests for CommentSink — comment interleaving and line lookup."""

from __future__ import annotations

import io

from transpiler.errors import UnsupportedConstruct
from transpiler.sink import CommentSink
from transpiler.syntax import CommentGroup, Identifier, TranslationUnit

SOURCE = b"// a\nx\n// b\n// c\ny\n// d\n"


def _sink(buf: io.StringIO) -> CommentSink:
    unit = TranslationUnit(
        source=SOURCE,
        comments=[
            CommentGroup(pos=0, lines=["// a"]),
            CommentGroup(pos=7, lines=["// b", "// c"]),
            CommentGroup(pos=19, lines=["// d"]),
        ],
    )
    return CommentSink(buf, unit)


def _ident(pos: int) -> Identifier:
    return Identifier(pos=pos, name="n")


class TestCommentSinkWrite:
    def test_flushes_comments_preceding_node(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(5), "x;\n")
        assert buf.getvalue() == "// a\nx;\n"

    def test_flushes_whole_groups_in_order(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(17), "y;\n")
        assert buf.getvalue() == "// a\n// b\n// c\ny;\n"

    def test_comment_at_node_position_is_not_flushed(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(0), "x")
        assert buf.getvalue() == "x"
        assert sink.pending_comments == 3

    def test_groups_are_flushed_once(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(5), "x")
        sink.write(_ident(5), "x")
        assert buf.getvalue().count("// a") == 1

    def test_trailing_comment_is_never_flushed(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(5), "x\n")
        sink.write(_ident(17), "y\n")
        assert "// d" not in buf.getvalue()
        assert sink.pending_comments == 1

    def test_empty_text_still_advances_cursor(self):
        buf = io.StringIO()
        sink = _sink(buf)
        sink.write(_ident(6), "")
        assert buf.getvalue() == "// a\n"
        assert sink.pending_comments == 2


class TestCommentSinkLines:
    def test_line_of(self):
        sink = _sink(io.StringIO())
        assert sink.line_of(0) == 1
        assert sink.line_of(5) == 2
        assert sink.line_of(17) == 5

    def test_error_carries_line_and_kind(self):
        sink = _sink(io.StringIO())
        err = sink.error(UnsupportedConstruct, _ident(17), "unsupported expr")
        assert isinstance(err, UnsupportedConstruct)
        assert err.line == 5
        assert err.kind == "Identifier"
        assert str(err) == "line 5: unsupported expr"
