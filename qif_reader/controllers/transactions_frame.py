# qif_reader/controllers/transactions_frame.py
"""
Tabular export of parsed QIF records.

- One row per record, one column per field code.
- Optional typed ``date``/``amount`` columns built from the record accessors.
- CSV output through ``pandas.DataFrame.to_csv``.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from qif_reader.data_model import ITransactions

DATE_COLUMN = "date"
AMOUNT_COLUMN = "amount"


def transactions_to_frame(transactions: ITransactions, typed: bool = True) -> pd.DataFrame:
    """
    Build a DataFrame from ``transactions``.

    Raw field columns are named after their codes and sorted; codes a record
    does not carry are ``None``. With ``typed=True`` two more columns hold the
    parsed date (``datetime.date``) and amount (``Decimal``), ``None`` where
    the value is missing or unreadable.

    ``frame.attrs["qif_type"]`` is the collection's record type.
    """
    codes = sorted(transactions.codes())
    rows = []
    for t in transactions:
        row = {code: t.get_value(code) for code in codes}
        if typed:
            row[DATE_COLUMN] = t.date
            row[AMOUNT_COLUMN] = t.amount
        rows.append(row)

    columns = codes + ([DATE_COLUMN, AMOUNT_COLUMN] if typed else [])
    frame = pd.DataFrame(rows, columns=columns, dtype=object)
    frame.attrs["qif_type"] = transactions.type
    return frame


def write_csv(transactions: ITransactions, path: Path, typed: bool = True) -> Path:
    """Write ``transactions`` as CSV to ``path`` and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    transactions_to_frame(transactions, typed=typed).to_csv(path, index=False)
    return path
