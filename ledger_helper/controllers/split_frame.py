"""
pandas export/import of splits.

Amounts stay strings in the frame so no precision is lost on the way through.
"""

# ledger_helper/controllers/split_frame.py
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ledger_helper.data_model.interfaces import ISplit
from ledger_helper.data_model.ledger import SEPARATOR, Split
from ledger_helper.utilities import is_null_or_whitespace

COLUMNS = [
    "uid",
    "amount",
    "currency",
    "account_uid",
    "transaction_uid",
    "type",
    "memo",
]
_REQUIRED = ["amount", "currency", "account_uid", "transaction_uid", "type"]


def splits_to_frame(splits: Iterable[ISplit]) -> pd.DataFrame:
    """One row per split, columns as in :data:`COLUMNS`. A missing memo is None."""
    rows = [s.to_dict() for s in splits]
    return pd.DataFrame(
        {c: pd.Series([r.get(c) for r in rows], dtype=object) for c in COLUMNS}
    )


def _cell(value: object) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)


def splits_from_frame(df: pd.DataFrame) -> List[Split]:
    """Rebuild splits from a frame shaped like :func:`splits_to_frame` output.

    Raises
    ------
    ValueError
        If a required column is missing.
    MalformedRecordError, InvalidPolarityError
        Same as :meth:`Split.parse_split` for a bad row.
    """
    missing = [c for c in _REQUIRED if c not in df.columns]
    if missing:
        raise ValueError(f"Frame is missing columns: {missing}")

    splits: List[Split] = []
    for _, r in df.iterrows():
        fields = [_cell(r[c]) or "" for c in _REQUIRED]
        memo = _cell(r["memo"]) if "memo" in df.columns else None
        if memo is not None:
            fields.append(memo)
        split = Split.parse_split(SEPARATOR.join(fields))
        uid = _cell(r["uid"]) if "uid" in df.columns else None
        if not is_null_or_whitespace(uid):
            split.identity.assign(uid.strip())
        splits.append(split)
    return splits
