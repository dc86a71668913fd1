#!/usr/bin/env python3
"""
QIF reader command line

Reads each QIF file given on the command line and logs its record type,
record count and a one-line summary per record. A file that cannot be read
is reported and skipped; the remaining files are still processed.
"""

from __future__ import annotations

import argparse
import logging
import logging.config
from pathlib import Path
from typing import Optional, Sequence

from qif_reader.controllers import load_many, write_csv
from qif_reader.data_model import Transactions
from qif_reader.utilities import DEFAULT_DATE_FORMAT, build_logging_config

log = logging.getLogger("qif_reader.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="qif-reader",
        description="Read QIF (Quicken Interchange Format) files and summarize their transactions.",
    )
    ap.add_argument("files", nargs="+", type=Path, metavar="FILE", help="QIF file(s) to read")
    ap.add_argument(
        "--date-format",
        default=DEFAULT_DATE_FORMAT,
        help=f"Date pattern for D fields unless the file says !Option:MDY (default: {DEFAULT_DATE_FORMAT})",
    )
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the input files (default: utf-8). Try cp1252 for old exports.")
    ap.add_argument("--csv-dir", type=Path, help="Also write <name>.csv for every file into this directory")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level (default: INFO)")
    ap.add_argument("--log-file", help="Also log to this file (rotating, DEBUG level)")
    return ap


def log_summary(transactions: Transactions) -> None:
    log.info("Type: %s, Count: %d", transactions.type, len(transactions))
    for t in transactions:
        log.info("  - Date: %s, Amount: %s, Payee: %s, Memo: %s", t.date, t.amount, t.payee, t.memo)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.config.dictConfig(build_logging_config(args.log_level, args.log_file))

    try:
        results = load_many(args.files, encoding=args.encoding, date_format=args.date_format)
    except (ValueError, LookupError) as e:
        # rejected --date-format or --encoding
        log.error("%s", e)
        return 2

    failures = 0
    for result in results:
        log.info("--> Reading file: %s", result.path)
        transactions = result.transactions
        if transactions is None:
            failures += 1
            log.error("Failed to process file: %s", result.path, exc_info=result.error)
            continue
        log_summary(transactions)
        if args.csv_dir is not None:
            target = args.csv_dir / f"{result.path.stem}.csv"
            try:
                write_csv(transactions, target)
            except OSError:
                failures += 1
                log.exception("Failed to write %s", target)
                continue
            log.info("Wrote %s", target)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
