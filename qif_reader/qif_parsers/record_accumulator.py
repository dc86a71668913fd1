from __future__ import annotations

import logging
from typing import Optional

from qif_reader.data_model.q_wrapper import Transaction


class RecordAccumulator:
    """Fields of the record currently being read."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def put(self, code: str, value: str) -> None:
        # a repeated code replaces the earlier value
        self._values[code] = value

    @property
    def is_empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def reset(self) -> None:
        self._values = {}

    def flush(
        self, date_format: str, logger: Optional[logging.Logger] = None
    ) -> Optional[Transaction]:
        """
        Build a Transaction from the collected fields and start a new record.

        Returns ``None`` and leaves the state untouched when nothing was collected.
        """
        if not self._values:
            return None
        transaction = Transaction(self._values, date_format, logger)
        self.reset()
        return transaction
