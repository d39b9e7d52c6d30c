# ledger_helper/data_model/__init__.py
from .errors import (
    InvalidArgumentError,
    InvalidPolarityError,
    MalformedRecordError,
    SplitError,
)
from .interfaces import (
    IIdentifiable, IMoney, IParserEmitter, ISplit,
    LedgerFileType, TransactionType)
from .ledger import Identity, Money, Split
from .csv_parsers_emitters import SplitCsvParserEmitter

__all__ = [
    "InvalidArgumentError", "InvalidPolarityError", "MalformedRecordError",
    "SplitError", "IIdentifiable", "IMoney", "IParserEmitter", "ISplit",
    "LedgerFileType", "TransactionType", "Identity", "Money", "Split",
    "SplitCsvParserEmitter"]
