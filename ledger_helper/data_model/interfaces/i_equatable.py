# ledger_helper/data_model/interfaces/i_equatable.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IEquatable(Protocol):
    """Hashable with equality consistent with the hash (set members, dict keys)."""

    def __eq__(self, other: object) -> bool: ...
    def __hash__(self) -> int: ...
