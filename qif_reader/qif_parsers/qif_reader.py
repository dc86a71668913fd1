# qif_reader/qif_parsers/qif_reader.py
"""
Streaming reader for Quicken Interchange Format (QIF) files.

A QIF file is read one line at a time:

1. the header (``!Option:MDY`` optionally, then ``!Type:<type>``),
2. field lines ``<code><value>`` collected into the current record,
3. a ``^`` line closing the record.

A record left open when the input ends is still returned. Header problems
raise :class:`~qif_reader.errors.InvalidHeaderError`; nothing after the header
can stop a read, and unreadable dates or amounts are only noticed when the
corresponding accessor is used.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable
from typing import IO, TYPE_CHECKING, BinaryIO, Optional, Union

from qif_reader.data_model.interfaces import IQifReader
from qif_reader.data_model.q_wrapper import Transactions
from qif_reader.utilities.converters_scalar import (
    DEFAULT_DATE_FORMAT,
    check_date_format,
)
from qif_reader.utilities.core_util import StrPath, iter_lines, open_for_read

from .field_codec import split_field_line
from .header_interpreter import read_header
from .record_accumulator import RecordAccumulator

log = logging.getLogger(__name__)

TRANSACTION_END_MARKER = "^"

QifSource = Union[StrPath, BinaryIO, IO[str], Iterable[str]]


class QifReader:
    """Read QIF text into a :class:`Transactions` collection."""

    def __init__(
        self,
        date_format: str = DEFAULT_DATE_FORMAT,
        logger: Optional[logging.Logger] = None,
    ):
        check_date_format(date_format)
        self.date_format = date_format
        self._log = logger or log

    # region Sources

    def read(self, source: QifSource, encoding: str = "utf-8", errors: str = "replace") -> Transactions:
        """
        Read from a path, a binary stream, a text stream or an iterable of lines.

        ``str`` and ``os.PathLike`` values are treated as file paths; use
        :meth:`read_text` for QIF content held in a string.
        """
        if isinstance(source, (str, os.PathLike)):
            return self.read_path(source, encoding=encoding, errors=errors)
        if isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
            return self.read_stream(source, encoding=encoding, errors=errors)  # type: ignore[arg-type]
        if isinstance(source, (bytes, bytearray)):
            raise TypeError("Decode bytes first or wrap them in io.BytesIO")
        return self.read_lines(source)

    def read_path(self, path: StrPath, encoding: str = "utf-8", errors: str = "replace") -> Transactions:
        """Open ``path``, read it and close it again, whatever the outcome."""
        self._log.debug("Reading %s (encoding=%s)", path, encoding)
        with open_for_read(path, encoding=encoding, errors=errors) as f:
            return self.read_lines(f)

    def read_stream(self, stream: BinaryIO, encoding: str = "utf-8", errors: str = "replace") -> Transactions:
        """Decode and read a binary stream. The stream is left open."""
        wrapper = io.TextIOWrapper(stream, encoding=encoding, errors=errors, newline=None)  # type: ignore[arg-type]
        try:
            return self.read_lines(wrapper)
        finally:
            wrapper.detach()

    def read_text(self, text: str) -> Transactions:
        return self.read_lines(io.StringIO(text, newline=None))

    # endregion Sources

    def read_lines(self, lines: Iterable[str]) -> Transactions:
        """
        Parse QIF lines into a collection.

        Line endings are optional and removed; no other whitespace is touched.
        The iterable is consumed once.
        """
        it = iter_lines(lines)
        header = read_header(it, self.date_format, self._log)
        transactions = Transactions(header.type)
        current = RecordAccumulator()

        for line in it:
            if line.strip() == TRANSACTION_END_MARKER:
                self._flush(current, transactions, header.date_format)
                continue
            field = split_field_line(line)
            if field is not None:
                current.put(*field)

        # last record without a closing "^"
        if not current.is_empty:
            self._log.debug("Input ended inside a record; keeping it")
            self._flush(current, transactions, header.date_format)

        self._log.debug("Read %d %r record(s)", len(transactions), transactions.type)
        return transactions

    def _flush(self, current: RecordAccumulator, transactions: Transactions, date_format: str) -> None:
        transaction = current.flush(date_format, self._log)
        if transaction is not None:
            transactions.add(transaction)
            self._log.debug("Record %d: %d field(s)", len(transactions), len(transaction))


def read_qif(
    source: QifSource,
    date_format: str = DEFAULT_DATE_FORMAT,
    encoding: str = "utf-8",
    errors: str = "replace",
    logger: Optional[logging.Logger] = None,
) -> Transactions:
    """Shortcut for ``QifReader(date_format, logger).read(source, encoding, errors)``."""
    return QifReader(date_format, logger).read(source, encoding=encoding, errors=errors)


if TYPE_CHECKING:
    _is_i_qif_reader: type[IQifReader] = QifReader
