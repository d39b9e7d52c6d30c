# ledger_helper/data_model/interfaces/enum_transaction_type.py
from __future__ import annotations

from enum import Enum

from ..errors import InvalidPolarityError


class TransactionType(Enum):
    """
    Direction of a split: CREDIT or DEBIT.

    Member values equal their names so ``.name`` and ``.value`` are both the
    serialized token.
    """

    CREDIT = "CREDIT"
    DEBIT = "DEBIT"

    def invert(self) -> TransactionType:
        """Return the opposite direction. ``t.invert().invert() is t``."""
        return _INVERSE[self]

    @classmethod
    def from_name(cls, name: str) -> TransactionType:
        """
        Parse the exact member name.

        Raises
        ------
        InvalidPolarityError
            If ``name`` is not exactly ``"CREDIT"`` or ``"DEBIT"``.
        """
        try:
            return cls[name]
        except (KeyError, TypeError) as exc:
            raise InvalidPolarityError(name) from exc

    def __str__(self) -> str:
        return self.name


_INVERSE = {
    TransactionType.CREDIT: TransactionType.DEBIT,
    TransactionType.DEBIT: TransactionType.CREDIT,
}
