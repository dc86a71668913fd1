# qif_reader/data_model/__init__.py
from .interfaces import FieldDict, IQifReader, IToDict, ITransaction, ITransactions
from .q_wrapper import (
    FieldResult, FieldStatus, QifHeader, Transaction, Transactions)
__all__ = [
    "FieldDict", "IQifReader", "IToDict", "ITransaction", "ITransactions",
    "FieldResult", "FieldStatus", "QifHeader", "Transaction", "Transactions"]
