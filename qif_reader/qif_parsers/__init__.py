"""
Line-oriented QIF parsing.
"""

from .field_codec import EXTRA_FIELD_PREFIX, split_field_line
from .header_interpreter import read_header
from .qif_reader import TRANSACTION_END_MARKER, QifReader, read_qif
from .record_accumulator import RecordAccumulator

__all__ = [
    "EXTRA_FIELD_PREFIX",
    "TRANSACTION_END_MARKER",
    "QifReader",
    "RecordAccumulator",
    "read_header",
    "read_qif",
    "split_field_line",
]
