"""Golden tests: translate the example sketches and compare to their .ino."""

from __future__ import annotations

from pathlib import Path

import pytest

from transpiler.api import transpile

SKETCH_DIR = Path(__file__).parent / "sketches"

SKETCHES = ["blink", "button", "fade"]


def _normalize(text: str) -> list[str]:
    """Drop blank lines and trailing whitespace; the layout is not byte exact."""
    return [line.rstrip() for line in text.splitlines() if line.strip()]


@pytest.mark.parametrize("sketch", SKETCHES)
def test_sketch_matches_ino(sketch: str):
    source = (SKETCH_DIR / sketch / f"{sketch}.go").read_text(encoding="utf-8")
    expected = (SKETCH_DIR / sketch / f"{sketch}.ino").read_text(encoding="utf-8")
    assert _normalize(transpile(source)) == _normalize(expected)
