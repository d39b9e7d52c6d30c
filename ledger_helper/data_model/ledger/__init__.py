# ledger_helper/data_model/ledger/__init__.py

from .identity import Identity, new_uid
from .money import Money
from .split import SEPARATOR, Split

__all__ = [
    "Identity",
    "Money",
    "SEPARATOR",
    "Split",
    "new_uid",
]
