# ledger_helper/data_model/ledger/identity.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..interfaces import IIdentifiable


def new_uid() -> str:
    """Return a fresh 32 character hex identifier."""
    return uuid.uuid4().hex


@dataclass
class Identity:
    """Unique identifier held by an entity instance."""

    uid: str = field(default_factory=new_uid)

    def generate_uid(self) -> str:
        self.uid = new_uid()
        return self.uid

    def assign(self, uid: str) -> None:
        self.uid = uid


if TYPE_CHECKING:
    _is_i_identifiable: type[IIdentifiable] = Identity
