# qif_reader/data_model/interfaces/i_transactions.py
from __future__ import annotations

from collections.abc import Iterator

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import FieldDict
from .i_transaction import ITransaction


@runtime_checkable
class ITransactions(Protocol):
    """An ordered, typed collection of records read from one QIF file."""

    @property
    def type(self) -> str: ...

    def add(self, transaction: ITransaction) -> None: ...
    def codes(self) -> set[str]: ...
    def to_dicts(self) -> list[FieldDict]: ...
    def __len__(self) -> int: ...
    def __iter__(self) -> Iterator[ITransaction]: ...
    def __getitem__(self, index: int) -> ITransaction: ...
