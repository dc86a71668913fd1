# qif_reader/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing_extensions import Protocol, TypeAlias, runtime_checkable

FieldDict: TypeAlias = dict[str, str]


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> FieldDict: ...
