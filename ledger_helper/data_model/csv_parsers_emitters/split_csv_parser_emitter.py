from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from ..errors import InvalidPolarityError, MalformedRecordError
from ..interfaces import IParserEmitter, ISplit, LedgerFileType
from ..ledger import Split

log = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class SplitCsvParserEmitter(IParserEmitter[ISplit]):
    """Parse split record documents (one record per line) and emit them back."""

    file_format: LedgerFileType = LedgerFileType.SPLIT_CSV

    def __init__(self, parse_record: Callable[[str], ISplit] | None = None):
        self._parse_record = parse_record or Split.parse_split

    # --- required by IParserEmitter ---

    def parse(self, unparsed_string: str) -> list[ISplit]:
        """Return the splits in `unparsed_string`, skipping blank lines."""
        splits: list[ISplit] = []
        for lineno, line in enumerate(_LINE_BREAK.split(unparsed_string), start=1):
            if not line.strip():
                continue
            try:
                split = self._parse_record(line)
            except InvalidPolarityError as exc:
                raise InvalidPolarityError(exc.token, line=lineno) from exc
            except MalformedRecordError as exc:
                raise MalformedRecordError(f"Line {lineno}: {exc}") from exc
            log.debug("Line %d: parsed %s", lineno, split)
            splits.append(split)
        log.info("Parsed %d split record(s)", len(splits))
        return splits

    def emit(self, items: Iterable[ISplit] | ISplit) -> str:
        if isinstance(items, ISplit):
            return items.to_csv()
        return "\n".join(s.to_csv() for s in items)
