from __future__ import annotations

import argparse
import io
import logging
import sys
from collections import Counter
from pathlib import Path

from .counter import count_files, count_lines, duplicates, format_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dup",
        description="Print lines that appear more than once, with their counts",
    )
    p.add_argument("files", nargs="*", type=Path, help="Input files (default: standard input)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def count_stdin(counts: Counter) -> Counter:
    """Count standard input decoded like files, independent of the locale."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        # already a text stream without bytes underneath (e.g. io.StringIO)
        return count_lines(sys.stdin, counts)
    stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace", newline="\n")
    try:
        return count_lines(stream, counts)
    finally:
        # leave sys.stdin's buffer open
        stream.detach()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-dup"))
        except Exception:
            print("unknown")
        return 0

    failed = []
    if ns.files:
        counts, failed = count_files(ns.files)
    else:
        counts = count_stdin(Counter())
    logging.debug("distinct_lines=%d", len(counts))

    for row in format_report(duplicates(counts)):
        print(row)
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
