# ledger_helper/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over a specific ledger text
format: a **parser** that converts a textual document into a sequence of
domain objects, and an **emitter** that serializes such objects back to text.

### Expectations for implementers

- **Determinism:** the same input string always parses to the same items, and
  the same items always emit the same text.
- **Losslessness:** ``parse(emit(items))`` reproduces every field the format
  carries.
- **Order preservation:** ``parse`` yields items in document order.
- **Purity:** neither operation mutates its argument or relies on global state.
- **Errors:** malformed input raises ``ValueError`` (or a documented subclass)
  with the line number of the offending record.

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching attributes/methods is considered compatible without explicit
inheritance.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from typing_extensions import Protocol, runtime_checkable

from .enum_ledger_file_types import LedgerFileType

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    """
    Runtime-checkable protocol for paired parser/emitter implementations.

    Attributes
    ----------
    file_format : LedgerFileType
        Identifier of the concrete format handled by this implementation.
        Constant per class.
    """

    file_format: LedgerFileType

    def parse(self, unparsed_string: str) -> Iterable[T]:
        """
        Parse a complete textual document into an iterable of items.

        Parameters
        ----------
        unparsed_string : str
            Full contents of the source document. Line endings ``\\n``,
            ``\\r\\n`` and ``\\r`` are treated equivalently.

        Returns
        -------
        Iterable[T]
            Parsed items in document order.

        Raises
        ------
        ValueError
            If the input is malformed. The message names the offending line.
        """
        ...

    def emit(self, items: Iterable[T] | T) -> str:
        """
        Serialize one item, or an iterable of items, into a document.

        Returns
        -------
        str
            One record per line, ``\\n`` separated, no trailing newline.
        """
        ...
