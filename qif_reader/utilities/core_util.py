#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- Line and string helpers
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import IO, Optional, Union

StrPath = Union[str, "os.PathLike[str]"]

# region Common functions


def open_for_read(path: StrPath, encoding: str = "utf-8", errors: str = "replace") -> IO[str]:
    """Open ``path`` for text reading with universal newlines."""
    return open(path, "r", encoding=encoding, errors=errors, newline=None)


# endregion Common functions

# region Lines


def strip_line_ending(line: str) -> str:
    """Remove a trailing ``\\n``, ``\\r\\n`` or ``\\r``; keep every other character."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(source: Iterable[str]) -> Iterator[str]:
    """Yield the lines of ``source`` without their line endings."""
    for raw in source:
        yield strip_line_ending(raw)


def describe_line(line: Optional[str], limit: int = 40) -> str:
    """Short printable form of ``line`` for error messages."""
    if line is None:
        return "end of input"
    if len(line) > limit:
        line = line[:limit] + "..."
    return repr(line)


# endregion Lines
