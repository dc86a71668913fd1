# qif_reader/data_model/q_wrapper/q_transaction.py
from __future__ import annotations

import logging
from collections.abc import KeysView, Mapping
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Optional

from qif_reader.data_model.interfaces import FieldDict, IToDict, ITransaction
from qif_reader.errors import FieldCoercionError
from qif_reader.utilities.converters_scalar import (
    DEFAULT_DATE_FORMAT,
    check_date_format,
    to_amount,
    to_date,
)

from .field_result import FieldResult

log = logging.getLogger(__name__)

CODE_DATE = "D"
CODE_AMOUNT = "T"
CODE_NUMBER = "N"
CODE_PAYEE = "P"
CODE_MEMO = "M"


class Transaction:
    """
    A single QIF record: field codes mapped to their raw text.

    The mapping is copied on construction and cannot be changed afterwards.
    ``date`` and ``amount`` are converted on access and fall back to ``None``
    when the stored text cannot be read; use :meth:`date_field` or
    :meth:`amount_field` to tell that case apart from a missing code.
    """

    __slots__ = ("_values", "_date_format", "_log", "_owner")

    def __init__(
        self,
        values: Optional[Mapping[str, str]] = None,
        date_format: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._date_format = date_format if date_format is not None else DEFAULT_DATE_FORMAT
        # typed accessors rely on a readable format
        check_date_format(self._date_format)
        self._values: dict[str, str] = dict(values) if values is not None else {}
        if any(not code for code in self._values):
            raise ValueError("Field codes must not be empty")
        self._log = logger or log
        # set by the Transactions collection that takes this record
        self._owner: Optional[object] = None

    # region Raw fields

    @property
    def date_format(self) -> str:
        return self._date_format

    @property
    def values(self) -> Mapping[str, str]:
        """Read-only view of the stored fields."""
        return MappingProxyType(self._values)

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def get_value(self, code: str) -> Optional[str]:
        """Return the raw text stored under ``code``, or ``None`` if absent."""
        return self._values.get(code)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, code: object) -> bool:
        return code in self._values

    # endregion Raw fields

    # region Typed accessors

    def date_field(self) -> FieldResult[date]:
        raw = self._values.get(CODE_DATE)
        if raw is None:
            return FieldResult.missing()
        try:
            return FieldResult.valid(to_date(raw, self._date_format, CODE_DATE), raw)
        except FieldCoercionError as e:
            self._log.warning(
                "Failed to parse date string %r with format %r: %s",
                raw,
                self._date_format,
                e,
            )
            return FieldResult.invalid(raw)

    def amount_field(self) -> FieldResult[Decimal]:
        raw = self._values.get(CODE_AMOUNT)
        if raw is None:
            return FieldResult.missing()
        try:
            return FieldResult.valid(to_amount(raw, CODE_AMOUNT), raw)
        except FieldCoercionError as e:
            self._log.warning("Failed to parse amount string %r: %s", raw, e)
            return FieldResult.invalid(raw)

    @property
    def date(self) -> Optional[date]:
        """Date of the transaction; ``None`` if missing or unreadable."""
        return self.date_field().value

    @property
    def amount(self) -> Optional[Decimal]:
        """Amount of the transaction; ``None`` if missing or unreadable."""
        return self.amount_field().value

    @property
    def number(self) -> Optional[str]:
        return self._values.get(CODE_NUMBER)

    @property
    def payee(self) -> Optional[str]:
        return self._values.get(CODE_PAYEE)

    @property
    def memo(self) -> Optional[str]:
        return self._values.get(CODE_MEMO)

    # endregion Typed accessors

    # region IEquatable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._date_format == other._date_format and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._date_format, frozenset(self._values.items())))

    # endregion IEquatable

    def to_dict(self) -> FieldDict:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"Transaction({self._values!r}, date_format={self._date_format!r})"

    def __str__(self) -> str:
        return str(self._values)


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = Transaction
    _is_IToDict: type[IToDict] = Transaction
