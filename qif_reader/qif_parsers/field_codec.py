# qif_reader/qif_parsers/field_codec.py
from __future__ import annotations

from typing import Optional, Tuple

EXTRA_FIELD_PREFIX = "X"


def field_code_length(line: str) -> int:
    """Two characters for ``X`` extension codes, one for everything else."""
    return 2 if line.startswith(EXTRA_FIELD_PREFIX) else 1


def split_field_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a QIF data line into ``(code, value)``.

    Lines of one character or less carry no field and return ``None``.
    The value is the rest of the line exactly as given, whitespace included:
    ``"PCoffee Shop "`` gives ``("P", "Coffee Shop ")`` and ``"XAfoo"`` gives
    ``("XA", "foo")``.
    """
    if len(line) <= 1:
        return None
    n = field_code_length(line)
    return line[:n], line[n:]
