# ledger_helper/data_model/ledger/split.py
from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING, Final

from ..errors import InvalidArgumentError, MalformedRecordError
from ..interfaces import (
    IEquatable,
    ISplit,
    IToDict,
    RecursiveDictStr,
    TransactionType,
)
from .identity import Identity
from .money import Money

SEPARATOR: Final = ";"
REQUIRED_FIELDS: Final = 5


@total_ordering
@dataclass(eq=False)
class Split:
    """
    One leg of a double-entry transaction.

    Every transaction is made up of at least two splits. The amount is kept
    as a magnitude together with a CREDIT/DEBIT ``type``; negative numbers
    shown to users are a presentation concern. How the split moves an
    account balance depends on the account's normal balance and the type.

    ``type`` defaults from the sign of ``amount`` at construction only.
    Later assignments to ``amount`` or ``type`` never re-derive each other.
    """

    amount: Money
    account_uid: str
    transaction_uid: str = ""
    type: TransactionType = None  # type: ignore[assignment]
    memo: str | None = None
    identity: Identity = field(default_factory=Identity, repr=False)

    def __post_init__(self) -> None:
        if self.amount is None:
            raise InvalidArgumentError("A split requires an amount")
        if self.type is None:
            # Simplified: the proper direction also depends on the account
            # type, which would need an account lookup. Set it explicitly
            # when that matters.
            self.type = (
                TransactionType.DEBIT
                if self.amount.is_negative()
                else TransactionType.CREDIT
            )

    @property
    def uid(self) -> str:
        return self.identity.uid

    # region Copies and pairs

    def copy(self, generate_uid: bool) -> Split:
        """
        Copy this split with its amount normalized to the absolute value.

        Parameters
        ----------
        generate_uid : bool
            Mint a new identifier when True, otherwise keep this split's
            identifier (avoiding collisions is then up to the caller).
        """
        dup = Split(
            self.amount.absolute(),
            self.account_uid,
            transaction_uid=self.transaction_uid,
            type=self.type,
            memo=self.memo,
        )
        if not generate_uid:
            dup.identity.assign(self.uid)
        return dup

    def clone(self) -> Split:
        """Exact copy, identifier and raw amount included."""
        return Split(
            self.amount,
            self.account_uid,
            transaction_uid=self.transaction_uid,
            type=self.type,
            memo=self.memo,
            identity=Identity(self.uid),
        )

    __copy__ = clone

    def create_pair(self, account_uid: str) -> Split:
        """
        Create the opposite leg of this split in another account.

        The pair has the same absolute amount, memo and transaction, the
        inverted type and a fresh identifier.
        """
        return Split(
            self.amount.absolute(),
            account_uid,
            transaction_uid=self.transaction_uid,
            type=self.type.invert(),
            memo=self.memo,
        )

    def is_pair_of(self, other: ISplit) -> bool:
        """
        True when both splits have the same absolute amount (value and
        currency) and opposite types. Accounts and transactions are ignored.
        """
        return (
            self.amount.absolute() == other.amount.absolute()
            and self.type.invert() == other.type
        )

    def has_same_values(self, other: ISplit) -> bool:
        """Field-wise comparison ignoring the identifier and amount sign."""
        return (
            self.amount.absolute() == other.amount.absolute()
            and self.account_uid == other.account_uid
            and self.transaction_uid == other.transaction_uid
            and self.type == other.type
            and self.memo == other.memo
        )

    # endregion Copies and pairs

    # region IEquatable

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ISplit):
            return NotImplemented
        return self.uid == other.uid

    def __hash__(self) -> int:
        return hash(self.uid)

    # endregion IEquatable

    # region Ordering

    def _sort_key(self) -> tuple:
        return (
            self.account_uid,
            self.transaction_uid,
            self.type.name,
            self.amount.currency_code,
            self.amount.amount,
            self.memo or "",
            self.uid,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Split):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    # endregion Ordering

    # region Parser/Emitter

    def to_csv(self) -> str:
        """
        Return ``amount;currency;account_uid;transaction_uid;TYPE[;memo]``.

        The memo field is only written when ``memo is not None``.
        Use :meth:`parse_split` to read it back.
        """
        fields = [
            self.amount.as_string(),
            self.amount.currency_code,
            self.account_uid,
            self.transaction_uid,
            self.type.name,
        ]
        if self.memo is not None:
            fields.append(self.memo)
        return SEPARATOR.join(fields)

    @classmethod
    def parse_split(cls, split_string: str) -> Split:
        """
        Parse a record produced by :meth:`to_csv`.

        The memo is the last field, so everything after the fifth separator
        belongs to it, separators included. The serialized type wins over the
        one implied by the amount sign. The result gets a fresh identifier.

        Raises
        ------
        MalformedRecordError
            Fewer than five fields, or a bad amount or currency token.
        InvalidPolarityError
            The type token is not ``CREDIT`` or ``DEBIT``. It is a
            ``MalformedRecordError`` too, so one except clause covers both.
        """
        tokens = split_string.split(SEPARATOR, REQUIRED_FIELDS)
        if len(tokens) < REQUIRED_FIELDS:
            raise MalformedRecordError(
                f"Expected at least {REQUIRED_FIELDS} fields, "
                f"got {len(tokens)}: {split_string!r}"
            )
        try:
            amount = Money.parse(tokens[0], tokens[1])
        except ValueError as exc:
            raise MalformedRecordError(
                f"Bad amount in split record {split_string!r}: {exc}"
            ) from exc
        split_type = TransactionType.from_name(tokens[4])
        return cls(
            amount,
            tokens[2],
            transaction_uid=tokens[3],
            type=split_type,
            memo=tokens[5] if len(tokens) > REQUIRED_FIELDS else None,
        )

    # endregion Parser/Emitter

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        """
        Convert the split to a dictionary representation.
        """
        d: dict[str, RecursiveDictStr] = {
            "uid": self.uid,
            "amount": self.amount.as_string(),
            "currency": self.amount.currency_code,
            "account_uid": self.account_uid,
            "transaction_uid": self.transaction_uid,
            "type": self.type.name,
        }
        if self.memo is not None:
            d["memo"] = self.memo
        return d

    def __str__(self) -> str:
        return f"{self.type.name} of {self.amount} in account: {self.account_uid}"


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = Split
    _is_IToDict: type[IToDict] = Split
    _is_IEquatable: type[IEquatable] = Split
