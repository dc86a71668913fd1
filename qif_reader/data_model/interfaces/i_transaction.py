# qif_reader/data_model/interfaces/i_transaction.py
from __future__ import annotations

from collections.abc import KeysView, Mapping
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict

if TYPE_CHECKING:
    from ..q_wrapper.field_result import FieldResult


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of one parsed QIF record."""

    @property
    def date_format(self) -> str: ...

    @property
    def values(self) -> Mapping[str, str]: ...

    def keys(self) -> KeysView[str]: ...
    def get_value(self, code: str) -> Optional[str]: ...
    def __len__(self) -> int: ...

    # region Typed accessors

    @property
    def date(self) -> Optional[date]: ...
    @property
    def amount(self) -> Optional[Decimal]: ...
    @property
    def number(self) -> Optional[str]: ...
    @property
    def payee(self) -> Optional[str]: ...
    @property
    def memo(self) -> Optional[str]: ...

    def date_field(self) -> "FieldResult[date]": ...
    def amount_field(self) -> "FieldResult[Decimal]": ...

    # endregion Typed accessors
