"""Comment-ordered output sink.

Merges two position-ordered streams into the output: the text emitted for
syntax nodes and the source comment groups. Before any node's text is
written, every pending comment group that starts before the node is flushed,
so comments keep their original top-to-bottom order.
"""

from __future__ import annotations

import bisect
import logging
from collections import deque
from typing import TextIO

from .errors import TranslationError
from .syntax import Node, TranslationUnit

logger = logging.getLogger(__name__)


class CommentSink:
    """Append-only writer that interleaves pending comments by position.

    The comment cursor only ever moves forward: a group is written at most
    once, and a group that sits after the last written node is never
    written at all.
    """

    def __init__(self, out: TextIO, unit: TranslationUnit):
        self._out = out
        self._pending = deque(unit.comments)
        self._lines = [i for i, c in enumerate(unit.source) if c == 0x0A]

    def write(self, node: Node, text: str) -> None:
        while self._pending and node.pos > self._pending[0].pos:
            group = self._pending.popleft()
            logger.debug("Flushing comment group at %d before %s", group.pos, node.kind)
            for line in group.lines:
                self._out.write(line + "\n")
        self._out.write(text)

    @property
    def pending_comments(self) -> int:
        return len(self._pending)

    def line_of(self, pos: int) -> int:
        """1-based line number of byte offset *pos*."""
        return bisect.bisect_right(self._lines, pos) + 1

    def error(
        self, exc_type: type[TranslationError], node: Node, message: str
    ) -> TranslationError:
        """Build *exc_type* for *node*, reported as ``line N: message``."""
        return exc_type(
            message, line=self.line_of(node.pos), kind=node.kind, pos=node.pos
        )
