"""dup package.

Counts repeated lines across files or standard input and reports those
seen more than once.
"""

from .counter import count_files, count_lines, duplicates, format_report

__all__ = [
    "count_lines",
    "count_files",
    "duplicates",
    "format_report",
]
