"""Tree-Sitter Parsing Layer."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from . import constants
from .errors import ParseError

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


def _first_error(node):
    """Return the first ERROR or MISSING node under *node*, depth first."""
    if node.type == "ERROR" or node.is_missing:
        return node
    return next(
        (
            found
            for child in node.children
            if child.has_error or child.is_missing
            if (found := _first_error(child)) is not None
        ),
        None,
    )


class Parser:
    """Thin wrapper around a parser factory.

    Rejects trees that tree-sitter could only recover with ERROR or MISSING
    nodes; the translator never sees a partially parsed unit.
    """

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: bytes, language: str = constants.LANGUAGE):
        logger.info("Parsing %d bytes of %s", len(source), language)
        parser = self._factory.get_parser(language)
        tree = parser.parse(source)
        if tree.root_node.has_error:
            bad = _first_error(tree.root_node) or tree.root_node
            line = bad.start_point[0] + 1
            raise ParseError(
                f"failed to parse: unexpected {bad.type!r}",
                line=line,
                kind=bad.type,
                pos=bad.start_byte,
            )
        return tree
