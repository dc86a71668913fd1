"""
Runtime-checkable protocol for line-oriented QIF readers.

A reader turns a *sequence of text lines* into an ``ITransactions``
collection. Where the lines come from (a file it opens itself, a caller's
stream, a literal string) is an input concern layered on top of
``read_lines``.

### Expectations for implementers

- **Streaming:** ``read_lines`` consumes its iterable once, front to back,
  looking at no more than one line at a time.
- **Determinism:** The same lines always produce equal collections, and two
  calls never share records or state.
- **Errors:** A malformed header raises ``InvalidHeaderError`` (a
  ``ValueError``) before any collection is returned. Body lines never abort a
  read. I/O errors propagate unchanged.
- **Ownership:** A stream passed in by the caller is left open; a file the
  reader opens itself is closed on every exit path.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from typing_extensions import Protocol, runtime_checkable

from .i_transactions import ITransactions


@runtime_checkable
class IQifReader(Protocol):
    """
    Structural type for QIF readers.

    Attributes
    ----------
    date_format : str
        Date pattern handed to every record unless the file carries
        ``!Option:MDY``.
    """

    date_format: str

    def read_lines(self, lines: Iterable[str]) -> ITransactions:
        """
        Parse an iterable of lines (line endings optional) into a collection.

        Raises
        ------
        InvalidHeaderError
            If the input is empty, carries an unknown ``!Option:`` or lacks the
            ``!Type:`` line.
        """
        ...

    def read_text(self, text: str) -> ITransactions: ...

    def read_stream(
        self, stream: BinaryIO, encoding: str = "utf-8", errors: str = "replace"
    ) -> ITransactions: ...
