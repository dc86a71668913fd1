from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from qif_reader.data_model.interfaces import FieldDict, ITransactions

from .q_transaction import Transaction


class Transactions:
    """
    Ordered records read from one QIF file, tagged with the file's ``!Type:``.

    The collection owns its records; a Transaction can belong to one
    collection only.
    """

    def __init__(self, type: str):
        self._type = type
        self._transactions: list[Transaction] = []

    @property
    def type(self) -> str:
        """Record type from the header, e.g. ``"Bank"``."""
        return self._type

    def add(self, transaction: Transaction) -> None:
        owner = transaction._owner
        if owner is not None and owner is not self:
            raise ValueError("Transaction already belongs to another collection")
        transaction._owner = self
        self._transactions.append(transaction)

    def codes(self) -> set[str]:
        """All field codes used by at least one record."""
        return {code for t in self._transactions for code in t.keys()}

    def to_dicts(self) -> list[FieldDict]:
        return [t.to_dict() for t in self._transactions]

    def __getitem__(self, index: int) -> Transaction:
        return self._transactions[index]

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transactions):
            return NotImplemented
        return self._type == other._type and self._transactions == other._transactions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Transactions(type={self._type!r}, count={len(self._transactions)})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(t) for t in self._transactions) + "]"


if TYPE_CHECKING:
    _is_i_transactions: type[ITransactions] = Transactions
