"""Client accounts and the balance changes that transactions make to them."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING, MutableMapping, Optional

if TYPE_CHECKING:
    from payments_engine.transactions import Transaction

ACCOUNT_FIELDS = ("client", "available", "held", "total", "locked")

_FOUR_PLACES = Decimal("0.0001")


def round_four_digits(value: Decimal) -> str:
    """Render a decimal with at most four fractional digits, rounding half to even."""
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -4:
        value = value.quantize(_FOUR_PLACES, rounding=ROUND_HALF_EVEN)
    return format(value, "f")


@dataclass
class Account:
    """Balances of one client. A locked account ignores every further change."""

    client: int
    available: Decimal = Decimal(0)
    held: Decimal = Decimal(0)
    total: Decimal = Decimal(0)
    locked: bool = False

    def deposit(self, amount: Decimal) -> None:
        """Credit the account."""
        if self.locked:
            return
        self.available += amount
        self.total += amount

    def withdraw(self, amount: Decimal) -> None:
        """Debit the account if enough funds are available; otherwise do nothing."""
        if self.locked:
            return
        if self.available >= amount:
            self.available -= amount
            self.total -= amount

    def dispute(self, transaction: Optional[Transaction]) -> None:
        """Move the disputed transaction's amount from available to held."""
        if self.locked or transaction is None:
            return
        self.available -= transaction.amount
        self.held += transaction.amount

    def resolve(
        self,
        transaction: Optional[Transaction],
        disputed: MutableMapping[int, Transaction],
    ) -> None:
        """Release held funds of a transaction under dispute and end the dispute."""
        if self.locked or transaction is None:
            return
        if transaction.tx not in disputed:
            return
        self.available += transaction.amount
        self.held -= transaction.amount
        del disputed[transaction.tx]

    def chargeback(
        self,
        transaction: Optional[Transaction],
        disputed: MutableMapping[int, Transaction],
    ) -> None:
        """Withdraw held funds of a disputed transaction and lock the account."""
        if self.locked or transaction is None:
            return
        if transaction.tx not in disputed:
            return
        self.held -= transaction.amount
        self.total -= transaction.amount
        self.locked = True
        del disputed[transaction.tx]

    def to_row(self) -> dict[str, str]:
        """The account as an output record keyed by ACCOUNT_FIELDS."""
        return {
            "client": str(self.client),
            "available": round_four_digits(self.available),
            "held": round_four_digits(self.held),
            "total": round_four_digits(self.total),
            "locked": "true" if self.locked else "false",
        }