from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HEADER_OPTION_PREFIX = "!Option:"
HEADER_TYPE_PREFIX = "!Type:"


@dataclass(frozen=True)
class QifHeader:
    """Settings taken from the leading lines of a QIF file."""

    type: str
    date_format: str
    # the text after "!Option:", when the file has an option line
    option: Optional[str] = None
