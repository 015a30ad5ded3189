"""Reading transactions from CSV and applying them to client accounts."""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from payments_engine.account import Account

_MAX_CLIENT = 0xFFFF
_MAX_TX = 0xFFFFFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class TransactionParseError(ValueError):
    """A transaction record could not be read."""


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @classmethod
    def lookup(cls, name: str) -> Optional[TransactionType]:
        """The type with this exact name, or None if there is none."""
        try:
            return cls(name)
        except ValueError:
            return None


# Types that refer to an earlier transaction instead of carrying their own id.
_REFERENCING = {TransactionType.DISPUTE, TransactionType.RESOLVE, TransactionType.CHARGEBACK}


@dataclass(frozen=True)
class Transaction:
    """One input record; kind is the raw type name and may be unrecognised."""

    kind: str
    client: int
    tx: int
    amount: Decimal


def _parse_unsigned(text: str, column: str, maximum: int, line: int) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise TransactionParseError(f"line {line}: invalid {column} {text!r}")
    value = int(text)
    if value > maximum:
        raise TransactionParseError(f"line {line}: {column} {text!r} out of range")
    return value


def _parse_amount(text: str, line: int) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise TransactionParseError(f"line {line}: invalid amount {text!r}") from None
    if not value.is_finite():
        raise TransactionParseError(f"line {line}: invalid amount {text!r}")
    return value


def _field(record: dict[str, str], column: str, line: int) -> str:
    try:
        return record[column]
    except KeyError:
        raise TransactionParseError(f"line {line}: missing column {column!r}") from None


def parse_transactions(lines: Iterable[str]) -> Iterator[Transaction]:
    """Yield transactions from CSV lines with a header; fields are trimmed."""
    reader = csv.reader(lines)
    header: Optional[list[str]] = None
    for row in reader:
        if not row:
            continue
        fields = [value.strip() for value in row]
        if header is None:
            header = fields
            continue
        line = reader.line_num
        if len(fields) != len(header):
            raise TransactionParseError(
                f"line {line}: expected {len(header)} fields, found {len(fields)}"
            )
        record = dict(zip(header, fields))
        yield Transaction(
            kind=_field(record, "type", line),
            client=_parse_unsigned(_field(record, "client", line), "client", _MAX_CLIENT, line),
            tx=_parse_unsigned(_field(record, "tx", line), "tx", _MAX_TX, line),
            amount=_parse_amount(_field(record, "amount", line), line),
        )


def read_transactions(path: Union[str, Path]) -> list[Transaction]:
    """Read every transaction from a CSV file."""
    with open(path, newline="", encoding="utf-8") as handle:
        return list(parse_transactions(handle))


def process_transactions(transactions: Iterable[Transaction]) -> list[Account]:
    """Apply transactions in order and return the resulting accounts."""
    accounts: dict[int, Account] = {}
    transactions_by_id: dict[int, Transaction] = {}
    disputed: dict[int, Transaction] = {}

    for transaction in transactions:
        kind = TransactionType.lookup(transaction.kind)

        if kind is TransactionType.DISPUTE:
            if transaction.tx in disputed:
                continue
            disputed[transaction.tx] = transaction

        if kind not in _REFERENCING:
            transactions_by_id[transaction.tx] = transaction

        account = accounts.setdefault(transaction.client, Account(transaction.client))
        referenced = transactions_by_id.get(transaction.tx)

        if kind is TransactionType.DEPOSIT:
            account.deposit(transaction.amount)
        elif kind is TransactionType.WITHDRAWAL:
            account.withdraw(transaction.amount)
        elif kind is TransactionType.DISPUTE:
            account.dispute(referenced)
        elif kind is TransactionType.RESOLVE:
            account.resolve(referenced, disputed)
        elif kind is TransactionType.CHARGEBACK:
            account.chargeback(referenced, disputed)

    return list(accounts.values())


def from_file(path: Union[str, Path]) -> list[Account]:
    """Read a transactions file and return the final accounts."""
    return process_transactions(read_transactions(path))