# tests/data_model/ledger/test_split.py
import copy
from decimal import Decimal

import pytest

from ledger_helper.data_model import (
    InvalidArgumentError,
    ISplit,
    Money,
    Split,
    TransactionType,
)


def usd(value: str) -> Money:
    return Money(Decimal(value), "USD")


# ---------- construction ----------

@pytest.mark.parametrize("value", ["-5.00", "-0.01", "-1000000"])
def test_negative_amount_defaults_to_debit(value):
    assert Split(usd(value), "acct").type is TransactionType.DEBIT


@pytest.mark.parametrize("value", ["0", "0.00", "5.00", "-0.00"])
def test_non_negative_amount_defaults_to_credit(value):
    assert Split(usd(value), "acct").type is TransactionType.CREDIT


def test_new_split_starts_standalone():
    # Act
    s = Split(usd("10.00"), "acct-1")

    # Assert
    assert s.transaction_uid == ""
    assert s.memo is None
    assert s.account_uid == "acct-1"
    assert len(s.uid) == 32
    assert isinstance(s, ISplit)


def test_missing_amount_is_rejected():
    with pytest.raises(InvalidArgumentError):
        Split(None, "acct-1")  # type: ignore[arg-type]


def test_account_uid_is_not_validated():
    assert Split(usd("1.00"), "").account_uid == ""


def test_setting_type_does_not_look_at_amount_and_vice_versa():
    # Arrange
    s = Split(usd("-5.00"), "acct")

    # Act
    s.type = TransactionType.CREDIT
    s.amount = usd("-7.00")

    # Assert
    assert s.type is TransactionType.CREDIT
    assert s.amount == usd("-7.00")


def test_explicit_type_overrides_sign_default():
    s = Split(usd("-5.00"), "acct", type=TransactionType.CREDIT)
    assert s.type is TransactionType.CREDIT


# ---------- copy / clone ----------

def _full_split(value: str = "-5.00") -> Split:
    s = Split(usd(value), "acct-1")
    s.transaction_uid = "txn-1"
    s.memo = "lunch"
    return s


def test_copy_with_new_uid_normalizes_amount_and_keeps_fields():
    # Arrange
    src = _full_split("-5.00")

    # Act
    dup = src.copy(generate_uid=True)

    # Assert
    assert dup.amount == src.amount.absolute() == usd("5.00")
    assert dup.type is TransactionType.DEBIT
    assert (dup.account_uid, dup.transaction_uid, dup.memo) == ("acct-1", "txn-1", "lunch")
    assert dup.uid != src.uid


def test_copy_keeping_uid_adopts_source_identifier():
    # Arrange
    src = _full_split("-5.00")

    # Act
    dup = src.copy(generate_uid=False)

    # Assert
    assert dup.uid == src.uid
    assert dup.amount == usd("5.00")
    assert dup.identity is not src.identity


def test_clone_is_exact_including_raw_amount():
    # Arrange
    src = _full_split("-5.00")

    # Act
    twin = src.clone()
    shallow = copy.copy(src)

    # Assert
    for c in (twin, shallow):
        assert c is not src
        assert c.uid == src.uid
        assert c.amount == usd("-5.00")
        assert c.has_same_values(src)
        assert c.type is src.type


def test_clone_identity_is_independent():
    # Arrange
    src = _full_split()
    twin = src.clone()

    # Act
    twin.identity.generate_uid()

    # Assert
    assert twin.uid != src.uid


# ---------- pairing ----------

def test_create_pair_inverts_type_and_keeps_transaction_and_memo():
    # Arrange
    src = _full_split("-5.00")

    # Act
    pair = src.create_pair("acct-2")

    # Assert
    assert pair.amount == usd("5.00")
    assert pair.type is TransactionType.CREDIT
    assert pair.memo == "lunch"
    assert pair.transaction_uid == "txn-1"
    assert pair.account_uid == "acct-2"
    assert pair.uid != src.uid


@pytest.mark.parametrize("value", ["-5.00", "0", "12.34"])
@pytest.mark.parametrize("t", list(TransactionType))
def test_pair_relation_is_symmetric(value, t):
    # Arrange
    s = Split(usd(value), "acct-1", type=t)

    # Act
    pair = s.create_pair("acct-2")

    # Assert
    assert s.is_pair_of(pair)
    assert pair.is_pair_of(s)


def test_pairing_ignores_amount_sign():
    # Arrange
    negative = Split(usd("-5.00"), "a")  # DEBIT
    positive = Split(usd("5.00"), "b")   # CREDIT

    # Assert
    assert negative.is_pair_of(positive)
    assert positive.is_pair_of(negative)


def test_pairing_ignores_accounts_and_transactions():
    a = Split(usd("5.00"), "a", transaction_uid="t1")
    b = Split(usd("5.00"), "a", transaction_uid="t2", type=TransactionType.DEBIT)
    assert a.is_pair_of(b)


def test_not_a_pair_when_same_type_or_amount_or_currency_differs():
    # Arrange
    base = Split(usd("5.00"), "a")
    same_type = Split(usd("5.00"), "b")
    other_amount = Split(usd("-5.01"), "b")
    other_currency = Split(Money(Decimal("-5.00"), "EUR"), "b")

    # Assert
    assert not base.is_pair_of(same_type)
    assert not base.is_pair_of(other_amount)
    assert not base.is_pair_of(other_currency)


def test_split_is_not_a_pair_of_itself():
    s = Split(usd("5.00"), "a")
    assert not s.is_pair_of(s)


# ---------- equality / ordering / dict ----------

def test_equality_and_hash_follow_identifier():
    # Arrange
    a = Split(usd("1.00"), "x")
    same_values = Split(usd("1.00"), "x")
    twin = a.clone()

    # Act
    unique = {a, same_values, twin}

    # Assert
    assert a == twin
    assert hash(a) == hash(twin)
    assert a != same_values
    assert a.has_same_values(same_values)
    assert len(unique) == 2


def test_equality_with_non_split_is_not_implemented():
    assert Split(usd("1.00"), "x") != "x"


def test_has_same_values_detects_each_field():
    # Arrange
    base = _full_split("5.00")
    variants = []
    for attr, value in [
        ("account_uid", "acct-9"),
        ("transaction_uid", "txn-9"),
        ("type", TransactionType.DEBIT),
        ("memo", None),
        ("amount", usd("5.01")),
    ]:
        v = base.clone()
        setattr(v, attr, value)
        variants.append(v)

    # Assert
    assert all(not base.has_same_values(v) for v in variants)


def test_sorting_uses_account_then_transaction():
    # Arrange
    b = Split(usd("1.00"), "b")
    a2 = Split(usd("1.00"), "a", transaction_uid="2")
    a1 = Split(usd("9.00"), "a", transaction_uid="1")

    # Act
    result = sorted([b, a2, a1])

    # Assert
    assert [s.account_uid + s.transaction_uid for s in result] == ["a1", "a2", "b"]


def test_to_dict_omits_missing_memo():
    # Arrange
    s = Split(usd("10.00"), "acct-1")

    # Act
    d = s.to_dict()

    # Assert
    assert d == {
        "uid": s.uid,
        "amount": "10.00",
        "currency": "USD",
        "account_uid": "acct-1",
        "transaction_uid": "",
        "type": "CREDIT",
    }
    s.memo = ""
    assert s.to_dict()["memo"] == ""


def test_str_names_type_amount_and_account():
    assert str(Split(usd("10.00"), "acct-1")) == "CREDIT of 10.00 USD in account: acct-1"


def test_pairing_and_copy_are_exact_beyond_default_decimal_precision():
    # Arrange
    digits = "1234567890123456789012345.678901"
    negative = Split(usd("-" + digits), "a")
    positive = Split(usd(digits), "b")

    # Act
    dup = negative.copy(generate_uid=True)
    pair = negative.create_pair("c")

    # Assert
    assert dup.amount == positive.amount
    assert pair.amount.as_string() == digits
    assert negative.is_pair_of(positive)
    assert positive.is_pair_of(negative)
