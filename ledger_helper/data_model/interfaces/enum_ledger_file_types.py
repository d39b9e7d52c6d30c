from enum import Enum


class LedgerFileType(Enum):
    """
    Enum representing the text formats a parser/emitter can handle.
    """
    SPLIT_CSV = "SPLIT_CSV"
