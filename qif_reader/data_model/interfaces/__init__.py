"""
Protocols for the QIF data model.
"""

from .i_qif_reader import IQifReader
from .i_to_dict import FieldDict, IToDict
from .i_transaction import ITransaction
from .i_transactions import ITransactions

__all__ = [
    "FieldDict",
    "IQifReader",
    "IToDict",
    "ITransaction",
    "ITransactions",
]
