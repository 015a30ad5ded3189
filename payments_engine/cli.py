"""Command line entry point: print final account balances for a transactions file."""

from __future__ import annotations

import csv
import sys
from typing import Iterable, Optional, Sequence, TextIO

from payments_engine.account import ACCOUNT_FIELDS, Account
from payments_engine.transactions import TransactionParseError, from_file

USAGE = "Usage: \n payments-engine <transactions.csv>"


def write_accounts(accounts: Iterable[Account], stream: TextIO) -> None:
    """Write accounts as CSV; the header comes with the first account."""
    writer: Optional[csv.DictWriter] = None
    for account in accounts:
        if writer is None:
            writer = csv.DictWriter(stream, fieldnames=ACCOUNT_FIELDS, lineterminator="\n")
            writer.writeheader()
        writer.writerow(account.to_row())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        accounts = from_file(args[0])
    except (OSError, TransactionParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    write_accounts(accounts, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())