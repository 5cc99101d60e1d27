"""Translation configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class TranspilerConfig:
    """Groups translation configuration."""

    indent: str = constants.INDENT
    language: str = constants.LANGUAGE
    verbose: bool = False
