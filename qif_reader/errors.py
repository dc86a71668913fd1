# qif_reader/errors.py
"""
Exceptions raised by the QIF reader.

``InvalidHeaderError`` aborts a parse. ``FieldCoercionError`` never escapes the
typed accessors of a transaction; it is caught there and reported as a missing
value. I/O problems are not wrapped and surface as ``OSError``.
"""

from __future__ import annotations


class QifError(Exception):
    """Base class for every error defined by this package."""


class InvalidHeaderError(QifError, ValueError):
    """The leading ``!Option:``/``!Type:`` lines are missing or not understood."""

    def __init__(self, message: str, *, expected: str = "", found: str | None = None):
        super().__init__(message)
        self.expected = expected
        self.found = found


class FieldCoercionError(QifError, ValueError):
    """A raw field value cannot be read as a date or an amount."""

    def __init__(self, code: str, raw: str, target: str):
        super().__init__(f"Cannot convert field {code!r} value {raw!r} to {target}")
        self.code = code
        self.raw = raw
        self.target = target
