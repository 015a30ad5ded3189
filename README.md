# payments_engine

A small payments engine. It reads a CSV file of transactions (deposits,
withdrawals, disputes, resolves and chargebacks), replays them in order and
prints the resulting state of every client account as CSV.

## Installation

```
pip install .
```

## Usage

```
payments-engine transactions.csv > accounts.csv
```

The input file has a header row naming the columns `type`, `client`, `tx` and
`amount`. Whitespace around fields is ignored and blank lines are skipped.
Every row must have as many fields as the header, and every row needs an
amount, including disputes, resolves and chargebacks (use `0` there):

```
type,       client, tx, amount
deposit,    1,      1,  1.0
deposit,    2,      2,  2.0
deposit,    1,      3,  2.0
withdrawal, 1,      4,  1.5
withdrawal, 2,      5,  3.0
```

`client` must be a whole number from 0 to 65535, `tx` a whole number from 0 to
4294967295, and `amount` a finite decimal number.

The output has a header row and one row per client with the columns `client`,
`available`, `held`, `total` and `locked`. Amounts keep their decimal digits,
but anything past four decimal places is rounded (half to even):

```
client,available,held,total,locked
1,1.5,0,1.5,false
2,2.0,0,2.0,false
```

Rows come out in the order in which each client first appears in the input.
If there are no transactions, nothing at all is printed.

If the tool is not given exactly one argument, it prints a usage message and
exits with status 0. If the file cannot be opened or a row cannot be read, it
prints `error: ...` to standard error and exits with status 1.

## Transaction rules

- **deposit**: adds the amount to the available and total funds.
- **withdrawal**: takes the amount from the available and total funds. If the
  available funds are too low, nothing happens.
- **dispute**: moves the amount of an earlier deposit or withdrawal (found by its
  `tx` id) from available to held. A second dispute of the same transaction
  while it is still open is ignored, and so is a dispute of an unknown one.
- **resolve**: ends a dispute and moves the held amount back to available.
  Nothing happens if the transaction is not under dispute.
- **chargeback**: ends a dispute, takes the held amount out of held and total,
  and locks the account. Nothing happens if the transaction is not under
  dispute.
- A locked account ignores every later transaction.
- Unknown transaction types are ignored, though the client's account is still
  created.

## Library use

```python
import sys

from payments_engine.cli import write_accounts
from payments_engine.transactions import from_file

accounts = from_file("transactions.csv")
write_accounts(accounts, sys.stdout)
```

`payments_engine.transactions` provides:

- `from_file(path)`: read a file and return the final list of `Account`s.
- `read_transactions(path)`: read a file into a list of `Transaction`s.
- `parse_transactions(lines)`: yield `Transaction`s from CSV lines.
- `process_transactions(transactions)`: apply transactions and return the
  accounts.
- `Transaction`: a frozen dataclass with `kind`, `client`, `tx` and `amount`.
- `TransactionType`: the recognised types; `TransactionType.lookup(name)`
  returns `None` for an unknown name.
- `TransactionParseError`: a `ValueError` raised for unreadable rows.

`payments_engine.account` provides the `Account` dataclass with `deposit`,
`withdraw`, `dispute`, `resolve`, `chargeback` and `to_row`, along with
`round_four_digits` and the output column names in `ACCOUNT_FIELDS`.

`payments_engine.cli` provides `write_accounts(accounts, stream)` and `main`.

## Running the tests

```
pip install ".[test]"
pytest
```