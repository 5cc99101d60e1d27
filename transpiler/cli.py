"""mugo command line: translate one Go file to Arduino C."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import dump_tree, parse_source, translate_unit
from .config import TranspilerConfig
from .errors import TranslationError

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mugo", description="Transpile a subset of Go to Arduino C++")
    parser.add_argument("file", nargs="?",
                        help="Go source file (default: stdin)")
    parser.add_argument("--output", "-o", default=None,
                        help="Destination file (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log progress and dump the syntax tree to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    config = TranspilerConfig(verbose=args.verbose)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    out = None
    unit = None
    try:
        source = _read_source(args.file)
        out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
        unit = parse_source(source, config)
        translate_unit(out, unit, config)
    except (TranslationError, OSError, UnicodeDecodeError) as exc:
        print(f"mugo: {exc}", file=sys.stderr)
        return 1
    finally:
        if out is not None:
            out.flush()
            if out is not sys.stdout:
                out.close()
        if config.verbose and unit is not None:
            print(dump_tree(unit), file=sys.stderr)
    return 0


def _read_source(path: str | None) -> str:
    if not path:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


if __name__ == "__main__":
    sys.exit(main())
