# qif_reader/controllers/qif_loader.py
from __future__ import annotations

import codecs
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from qif_reader.data_model import Transactions
from qif_reader.qif_parsers import QifReader
from qif_reader.utilities import DEFAULT_DATE_FORMAT

log = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of loading one file: either ``transactions`` or ``error`` is set."""

    path: Path
    transactions: Optional[Transactions] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_transactions(
    path: Path,
    encoding: str = "utf-8",
    date_format: str = DEFAULT_DATE_FORMAT,
    logger: Optional[logging.Logger] = None,
) -> Transactions:
    """
    Read one QIF file.

    Raises whatever the reader raises: ``InvalidHeaderError`` for a bad header,
    ``OSError`` when the file cannot be opened or read.
    """
    return QifReader(date_format, logger).read_path(Path(path), encoding=encoding)


def load_many(
    paths: Iterable[Path],
    encoding: str = "utf-8",
    date_format: str = DEFAULT_DATE_FORMAT,
    logger: Optional[logging.Logger] = None,
) -> Iterator[LoadResult]:
    """
    Read several QIF files, one result per path, in order.

    A file that fails to load yields a result carrying the exception; the
    remaining paths are still read. An unusable ``date_format`` raises
    ``ValueError`` and an unknown ``encoding`` raises ``LookupError`` here,
    before any file is opened.
    """
    codecs.lookup(encoding)
    reader = QifReader(date_format, logger)
    return _load_each(reader, paths, encoding)


def _load_each(reader: QifReader, paths: Iterable[Path], encoding: str) -> Iterator[LoadResult]:
    for p in paths:
        path = Path(p)
        try:
            yield LoadResult(path, transactions=reader.read_path(path, encoding=encoding))
        except (OSError, ValueError) as e:
            log.debug("Loading %s failed: %s", path, e)
            yield LoadResult(path, error=e)
