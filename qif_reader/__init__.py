"""
qif_reader: read Quicken Interchange Format (QIF) files into typed records.
"""

from .data_model import FieldResult, FieldStatus, QifHeader, Transaction, Transactions
from .errors import FieldCoercionError, InvalidHeaderError, QifError
from .qif_parsers import QifReader, read_qif
from .utilities import DEFAULT_DATE_FORMAT, MDY_DATE_FORMAT

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "MDY_DATE_FORMAT",
    "FieldCoercionError",
    "FieldResult",
    "FieldStatus",
    "InvalidHeaderError",
    "QifError",
    "QifHeader",
    "QifReader",
    "Transaction",
    "Transactions",
    "read_qif",
]
