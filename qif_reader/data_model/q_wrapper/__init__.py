# qif_reader/data_model/q_wrapper/__init__.py

from .field_result import FieldResult, FieldStatus
from .q_transaction import Transaction
from .q_transactions import Transactions
from .qif_header import HEADER_OPTION_PREFIX, HEADER_TYPE_PREFIX, QifHeader

__all__ = [
    "FieldResult",
    "FieldStatus",
    "HEADER_OPTION_PREFIX",
    "HEADER_TYPE_PREFIX",
    "QifHeader",
    "Transaction",
    "Transactions",
]
