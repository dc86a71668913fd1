from .qif_loader import LoadResult, load_many, load_transactions
from .transactions_frame import transactions_to_frame, write_csv

__all__ = [
    "LoadResult",
    "load_many",
    "load_transactions",
    "transactions_to_frame",
    "write_csv",
]
