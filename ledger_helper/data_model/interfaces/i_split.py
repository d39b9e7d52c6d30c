# ledger_helper/data_model/interfaces/i_split.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .enum_transaction_type import TransactionType
from .i_equatable import IEquatable
from .i_money import IMoney
from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IEquatable, IToDict, Protocol):
    """Structural shape of one leg of a double-entry transaction."""

    amount: IMoney
    account_uid: str
    transaction_uid: str
    type: TransactionType
    memo: str | None

    @property
    def uid(self) -> str: ...

    def __lt__(self, other: object) -> bool: ...

    def create_pair(self, account_uid: str) -> ISplit: ...
    def is_pair_of(self, other: ISplit) -> bool: ...
    def has_same_values(self, other: ISplit) -> bool: ...
    def to_csv(self) -> str: ...
