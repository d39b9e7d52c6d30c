# ledger_helper/data_model/errors.py
"""
Error types raised by the split model and its record codec.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can keep catching ``ValueError``. A bad type token inside a
record is both an ``InvalidPolarityError`` and a ``MalformedRecordError``.
"""

from __future__ import annotations


class SplitError(ValueError):
    """Base class for invalid split input."""


class InvalidArgumentError(SplitError):
    """A required constructor argument is missing."""


class MalformedRecordError(SplitError):
    """A serialized split record cannot be decoded."""


class InvalidPolarityError(MalformedRecordError):
    """A polarity token is neither ``CREDIT`` nor ``DEBIT``."""

    def __init__(self, token: str, line: int | None = None):
        where = f"Line {line}: " if line is not None else ""
        super().__init__(f"{where}Unknown transaction type: {token!r}")
        self.token = token
        self.line = line
