from dataclasses import replace
from decimal import Decimal

import pytest

from payments_engine.account import ACCOUNT_FIELDS, Account, round_four_digits
from payments_engine.transactions import Transaction


def _deposited(amount="7", tx=1):
    account = Account(client=1)
    account.deposit(Decimal(amount))
    return account, Transaction(kind="deposit", client=1, tx=tx, amount=Decimal(amount))


def _balances(account):
    return account.available, account.held, account.total, account.locked


def _nothing(account, tx, disputed):
    pass


def _withdraw_all(account, tx, disputed):
    account.withdraw(Decimal("7"))


def _dispute(account, tx, disputed):
    account.dispute(tx)


def _dispute_and_resolve(account, tx, disputed):
    account.dispute(tx)
    account.resolve(tx, disputed)


def _dispute_and_chargeback(account, tx, disputed):
    account.dispute(tx)
    account.chargeback(tx, disputed)


def test_new_account_is_empty_and_unlocked():
    account = Account(client=5)
    assert account.client == 5
    assert _balances(account) == (0, 0, 0, False)


@pytest.mark.parametrize(
    ("operation", "expected", "still_disputed"),
    [
        pytest.param(_nothing, ("7", "0", "7", False), True, id="deposit"),
        pytest.param(_withdraw_all, ("0", "0", "0", False), True, id="withdraw-all"),
        pytest.param(_dispute, ("0", "7", "7", False), True, id="dispute"),
        pytest.param(_dispute_and_resolve, ("7", "0", "7", False), False, id="resolve"),
        pytest.param(_dispute_and_chargeback, ("0", "0", "0", True), False, id="chargeback"),
    ],
)
def test_operations_change_balances(operation, expected, still_disputed):
    account, tx = _deposited("7")
    disputed = {tx.tx: tx}
    operation(account, tx, disputed)
    available, held, total, locked = expected
    assert _balances(account) == (Decimal(available), Decimal(held), Decimal(total), locked)
    assert account.total == account.available + account.held
    assert (tx.tx in disputed) is still_disputed


@pytest.mark.parametrize(
    "operation",
    [
        pytest.param(lambda account, tx: account.withdraw(Decimal("8")), id="overdraw"),
        pytest.param(lambda account, tx: account.dispute(None), id="dispute-missing"),
        pytest.param(lambda account, tx: account.resolve(tx, {}), id="resolve-undisputed"),
        pytest.param(lambda account, tx: account.chargeback(tx, {}), id="chargeback-undisputed"),
    ],
)
def test_ignored_operations_leave_account_unchanged(operation):
    account, tx = _deposited("7")
    before = replace(account)
    operation(account, tx)
    assert account == before


def test_resolve_of_held_funds_requires_open_dispute():
    account, tx = _deposited("7")
    account.dispute(tx)
    before = replace(account)
    account.resolve(tx, {})
    assert account == before


def test_locked_account_ignores_changes():
    account = Account(client=1, available=Decimal("3"), total=Decimal("3"), locked=True)
    before = replace(account)
    tx = Transaction(kind="deposit", client=1, tx=9, amount=Decimal("3"))
    account.deposit(Decimal("10"))
    account.withdraw(Decimal("1"))
    account.dispute(tx)
    account.resolve(tx, {9: tx})
    account.chargeback(tx, {9: tx})
    assert account == before


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("44", "44"),
        ("2.5", "2.5"),
        ("1.23456", "1.2346"),
        ("0.00005", "0.0000"),
    ],
)
def test_round_four_digits(value, expected):
    assert round_four_digits(Decimal(value)) == expected


def test_to_row():
    account = Account(
        client=3,
        available=Decimal("1.5"),
        held=Decimal("2"),
        total=Decimal("3.5"),
        locked=True,
    )
    row = account.to_row()
    assert tuple(row) == ACCOUNT_FIELDS
    assert row == {
        "client": "3",
        "available": "1.5",
        "held": "2",
        "total": "3.5",
        "locked": "true",
    }