"""
Interfaces and Enums for the ledger data model.
"""

from .enum_ledger_file_types import LedgerFileType
from .enum_transaction_type import TransactionType
from .i_equatable import IEquatable
from .i_identifiable import IIdentifiable
from .i_money import IMoney
from .i_parser_emitter import IParserEmitter
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "LedgerFileType",
    "TransactionType",
    "IEquatable",
    "IIdentifiable",
    "IMoney",
    "IParserEmitter",
    "ISplit",
    "IToDict",
    "RecursiveDictStr",
]
