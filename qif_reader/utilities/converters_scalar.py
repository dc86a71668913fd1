from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Final

from qif_reader.errors import FieldCoercionError

DEFAULT_DATE_FORMAT: Final[str] = "dd/MM/yyyy"
MDY_DATE_FORMAT: Final[str] = "MM/dd/yyyy"

# region Date patterns


def _pattern_letter(letter: str, count: int, pattern: str) -> str:
    if letter == "y":
        return "%y" if count == 2 else "%Y"
    if letter == "M":
        if count <= 2:
            return "%m"
        return "%b" if count == 3 else "%B"
    if letter == "E":
        return "%a" if count <= 3 else "%A"
    simple = _SIMPLE_LETTERS.get(letter)
    if simple is None:
        raise ValueError(
            f"Unsupported date pattern letter {letter!r} in {pattern!r}"
        )
    return simple


@lru_cache(maxsize=64)
def to_strptime_format(pattern: str) -> str:
    """
    Translate a ``SimpleDateFormat``-style pattern into a ``strptime`` format.

    ``dd/MM/yyyy`` becomes ``%d/%m/%Y``. Text between single quotes is copied
    literally and ``''`` stands for one quote. A pattern that already holds
    ``%`` directives is returned unchanged.

    Raises:
        ValueError: for an empty pattern, an unterminated quote or a pattern
            letter with no ``strptime`` counterpart.
    """
    if not pattern:
        raise ValueError("Date pattern must not be empty")
    if "%" in pattern:
        return pattern

    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                out.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            if end < 0:
                raise ValueError(f"Unterminated quote in date pattern {pattern!r}")
            out.append(pattern[i + 1 : end].replace("%", "%%"))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            out.append(_pattern_letter(ch, j - i, pattern))
            i = j
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def to_date(raw: str, date_format: str = DEFAULT_DATE_FORMAT, code: str = "D") -> date:
    """
    Parse the raw value of a date field.

    Surrounding whitespace is ignored. ``date_format`` uses the pattern
    notation understood by :func:`to_strptime_format`.

    Raises:
        FieldCoercionError: if ``raw`` does not match the format.
    """
    fmt = to_strptime_format(date_format)
    try:
        return datetime.strptime(raw.strip(), fmt).date()
    except ValueError as e:
        raise FieldCoercionError(code, raw, f"date ({date_format})") from e


# endregion Date patterns

# region Amounts


def to_amount(raw: str, code: str = "T") -> Decimal:
    """
    Parse the raw value of an amount field.

    Every ``,`` is treated as a thousands separator and removed before the
    remainder is read as a ``Decimal``: ``"-1,234.50"`` gives
    ``Decimal('-1234.50')``.

    Raises:
        FieldCoercionError: if the cleaned text is not a finite decimal number.
    """
    cleaned = raw.replace(",", "").strip()
    # Decimal reads "1_000" as a digit-grouped number
    if "_" in cleaned:
        raise FieldCoercionError(code, raw, "amount")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise FieldCoercionError(code, raw, "amount") from e
    if not value.is_finite():
        raise FieldCoercionError(code, raw, "amount")
    return value


# endregion Amounts

_SIMPLE_LETTERS: Final[dict[str, str]] = {
    "d": "%d",
    "H": "%H",
    "h": "%I",
    "m": "%M",
    "s": "%S",
    "S": "%f",
    "a": "%p",
}
_DATE_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"%[a-zA-Z]")


def has_date_directives(fmt: str) -> bool:
    """True when ``fmt`` contains at least one ``strptime`` directive."""
    return bool(_DATE_DIRECTIVE_RE.search(fmt))


def check_date_format(date_format: str) -> str:
    """
    Translate ``date_format`` and make sure it can read a date.

    Returns:
        The ``strptime`` form of ``date_format``.

    Raises:
        ValueError: if the pattern is malformed or has no date fields.
    """
    fmt = to_strptime_format(date_format)
    if not has_date_directives(fmt):
        raise ValueError(f"Date format {date_format!r} has no date fields")
    return fmt
