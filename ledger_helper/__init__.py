"""Double-entry split model, record codec and helpers."""

from .data_model import (
    InvalidArgumentError,
    InvalidPolarityError,
    MalformedRecordError,
    Money,
    Split,
    SplitCsvParserEmitter,
    TransactionType,
)

__all__ = [
    "InvalidArgumentError",
    "InvalidPolarityError",
    "MalformedRecordError",
    "Money",
    "Split",
    "SplitCsvParserEmitter",
    "TransactionType",
]
