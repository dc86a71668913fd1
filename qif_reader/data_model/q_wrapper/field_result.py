from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FieldStatus(Enum):
    """
    Outcome of reading a typed field from a record.
    """

    MISSING = "missing"  # code not present in the record
    INVALID = "invalid"  # present, but the raw text could not be converted
    VALID = "valid"


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """
    Typed view of one field that keeps "absent" apart from "unreadable".

    ``value`` is only set for ``VALID``; ``raw`` is the stored text for
    ``VALID`` and ``INVALID`` and ``None`` for ``MISSING``.
    """

    status: FieldStatus
    value: Optional[T] = None
    raw: Optional[str] = None

    @classmethod
    def missing(cls) -> "FieldResult[T]":
        return cls(FieldStatus.MISSING)

    @classmethod
    def invalid(cls, raw: str) -> "FieldResult[T]":
        return cls(FieldStatus.INVALID, None, raw)

    @classmethod
    def valid(cls, value: T, raw: str) -> "FieldResult[T]":
        return cls(FieldStatus.VALID, value, raw)

    @property
    def is_missing(self) -> bool:
        return self.status is FieldStatus.MISSING

    @property
    def is_invalid(self) -> bool:
        return self.status is FieldStatus.INVALID

    @property
    def is_valid(self) -> bool:
        return self.status is FieldStatus.VALID

    def value_or(self, default: T) -> T:
        return self.value if self.status is FieldStatus.VALID else default  # type: ignore[return-value]
