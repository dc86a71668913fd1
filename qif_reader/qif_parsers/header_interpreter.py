# qif_reader/qif_parsers/header_interpreter.py
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

from qif_reader.data_model.q_wrapper import (
    HEADER_OPTION_PREFIX,
    HEADER_TYPE_PREFIX,
    QifHeader,
)
from qif_reader.errors import InvalidHeaderError
from qif_reader.utilities.converters_scalar import MDY_DATE_FORMAT
from qif_reader.utilities.core_util import describe_line

log = logging.getLogger(__name__)

# option value -> date format it selects
_DATE_OPTIONS = {
    "MDY": MDY_DATE_FORMAT,
}


def read_header(
    lines: Iterator[str],
    default_date_format: str,
    logger: Optional[logging.Logger] = None,
) -> QifHeader:
    """
    Consume the ``!Option:`` (optional) and ``!Type:`` lines from ``lines``.

    Only ``!Option:MDY`` is understood; it switches the date format to
    ``MM/dd/yyyy``. The type is the text after ``!Type:``, verbatim.

    Args:
        lines: Iterator over lines without line endings. At most two lines are
            taken from it.
        default_date_format: Format used when the file has no option line.
        logger: Receives DEBUG messages; defaults to this module's logger.

    Returns:
        The effective date format and the record type.

    Raises:
        InvalidHeaderError: if ``lines`` is empty, the option is unknown, or
            the type line is missing.
    """
    logger = logger or log
    current = next(lines, None)
    if current is None:
        raise InvalidHeaderError(
            "Cannot read QIF header from empty input",
            expected=f"{HEADER_OPTION_PREFIX} or {HEADER_TYPE_PREFIX}",
            found=None,
        )

    date_format = default_date_format
    option: Optional[str] = None
    if current.startswith(HEADER_OPTION_PREFIX):
        option = current[len(HEADER_OPTION_PREFIX):]
        if option not in _DATE_OPTIONS:
            raise InvalidHeaderError(
                f"Unknown option: {current}",
                expected=f"{HEADER_OPTION_PREFIX}MDY",
                found=current,
            )
        date_format = _DATE_OPTIONS[option]
        logger.debug("Option %r selects date format %r", option, date_format)
        current = next(lines, None)

    if current is None or not current.startswith(HEADER_TYPE_PREFIX):
        raise InvalidHeaderError(
            f"Invalid QIF header. Expected {HEADER_TYPE_PREFIX!r}, "
            f"but found: {describe_line(current)}",
            expected=HEADER_TYPE_PREFIX,
            found=current,
        )

    header = QifHeader(
        type=current[len(HEADER_TYPE_PREFIX):],
        date_format=date_format,
        option=option,
    )
    logger.debug("Read header type=%r date_format=%r", header.type, header.date_format)
    return header
