#!/usr/bin/env python3
"""
Command line helper for split record files.

Each line of the input is one split record:

    amount;currency;account_uid;transaction_uid;CREDIT|DEBIT[;memo]

Usage:
  split-tool splits.txt --output splits.csv
  split-tool splits.txt --check-pairs
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ledger_helper.controllers import splits_to_frame, unpaired
from ledger_helper.data_model import SplitCsvParserEmitter
from ledger_helper.utilities import configure_logging, open_for_read

log = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Inspect and convert split record files.")
    ap.add_argument("input", type=Path, help="Path to the split record file")
    ap.add_argument("--output", type=Path,
                    help="Write the splits as a tabular CSV to this path")
    ap.add_argument("--check-pairs", action="store_true",
                    help="Report splits without an opposite leg; exit 1 if any")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the input file (default: utf-8)")
    ap.add_argument("--log-file", type=Path, default=None,
                    help="Rotating log file (default: logs/ledger_helper.log)")

    args = ap.parse_args(argv)

    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")
    if not args.input.is_file():
        raise SystemExit(f"Input path is not a file: {args.input}")

    configure_logging(args.log_file)

    # newline="" keeps \r so the parser sees the original line endings
    with open_for_read(args.input, encoding=args.encoding, newline="") as fp:
        splits = SplitCsvParserEmitter().parse(fp.read())

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        splits_to_frame(splits).to_csv(args.output, index=False)
        log.info("Wrote %d split(s) to %s", len(splits), args.output)

    if args.check_pairs:
        leftovers = unpaired(splits)
        for s in leftovers:
            print(f"unpaired: {s}")
        if leftovers:
            return 1
        print(f"all {len(splits)} split(s) paired")
    return 0


if __name__ == "__main__":
    sys.exit(main())
