# ledger_helper/data_model/interfaces/i_money.py
from __future__ import annotations

from decimal import Decimal

from typing_extensions import Protocol, runtime_checkable

from .i_equatable import IEquatable


@runtime_checkable
class IMoney(IEquatable, Protocol):
    """Structural shape of a signed amount bound to a currency."""

    amount: Decimal

    @property
    def currency_code(self) -> str: ...

    def is_negative(self) -> bool: ...
    def absolute(self) -> IMoney: ...
    def as_string(self) -> str: ...
