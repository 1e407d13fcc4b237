"""
Duplicate-line counting over text streams and files.
Notes:
- Lines are compared exactly, after removing the trailing "\n" or "\r\n".
- Counter keeps first-seen order, so reports are deterministic.
"""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def count_lines(stream: TextIO, counts: Counter) -> Counter:
    for line in stream:
        counts[_chomp(line)] += 1
    return counts


def count_files(
    paths: Iterable[Path], counts: Optional[Counter] = None
) -> Tuple[Counter, List[Path]]:
    """Count lines of every file; unreadable files are logged and returned."""
    if counts is None:
        counts = Counter()
    failed: List[Path] = []
    for path in paths:
        try:
            with Path(path).open("r", encoding="utf-8", errors="replace", newline="\n") as f:
                count_lines(f, counts)
        except OSError as e:
            logging.error("dup: %s", e)
            failed.append(Path(path))
    return counts, failed


def duplicates(counts: Counter) -> List[Tuple[str, int]]:
    return [(line, n) for line, n in counts.items() if n > 1]


def format_report(dups: Iterable[Tuple[str, int]]) -> Iterator[str]:
    for line, n in dups:
        yield f"{n}\t{line}"
