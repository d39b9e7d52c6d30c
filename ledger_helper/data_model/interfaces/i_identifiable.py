# ledger_helper/data_model/interfaces/i_identifiable.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IIdentifiable(Protocol):
    """Holds a unique identifier that can be regenerated or adopted."""

    uid: str

    def generate_uid(self) -> str: ...
    def assign(self, uid: str) -> None: ...
