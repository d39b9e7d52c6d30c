# ledger_helper/data_model/ledger/money.py
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from ..interfaces import IMoney

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")
_PLAIN_DECIMAL = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, str) and not _PLAIN_DECIMAL.fullmatch(value):
        raise ValueError(f"Not a plain decimal amount: {value!r}")
    else:
        try:
            d = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Cannot convert {value!r} to an amount") from exc
    if not d.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return d


@dataclass(frozen=True)
class Money:
    """
    Immutable signed amount bound to an ISO 4217 style currency code.

    Only what a split needs is provided: sign test, absolute value and the
    canonical string form. No arithmetic or rounding happens here.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        if not isinstance(self.currency, str) or not _CURRENCY_CODE.fullmatch(
            self.currency
        ):
            raise ValueError(f"Invalid currency code: {self.currency!r}")

    @classmethod
    def parse(cls, amount: str, currency_code: str) -> Money:
        """Build from the serialized amount and currency tokens."""
        return cls(_to_decimal(amount), currency_code)

    @property
    def currency_code(self) -> str:
        return self.currency

    def is_negative(self) -> bool:
        return self.amount < 0

    def absolute(self) -> Money:
        if not self.amount.is_signed():
            return self
        return Money(self.amount.copy_abs(), self.currency)

    def negate(self) -> Money:
        return Money(self.amount.copy_negate(), self.currency)

    def as_string(self) -> str:
        """Plain decimal string, never in exponent notation."""
        return format(self.amount, "f")

    def __str__(self) -> str:
        return f"{self.as_string()} {self.currency}"


if TYPE_CHECKING:
    _is_i_money: type[IMoney] = Money
