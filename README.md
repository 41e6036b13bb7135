# moneyboard

A library for personal finance bookkeeping. It models transactions,
recurring contracts and savings goals, and computes a wealth history over
fixed periods and a month-by-month extrapolation of what is left to spend
until the end of the year. It also has view helpers for a web front end:
routes, list rows and chart configurations.

Amounts are whole cents throughout. The package has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Transactions

```python
from datetime import datetime
from moneyboard.transaction import Transaction, TransactionType

groceries = Transaction(
    id="t1",
    kind=TransactionType.OUT,
    date=datetime(2024, 3, 5).astimezone(),
    amount=1250,
    sender="Main account",
    budgets={"Food": 1250},
)

groceries.validate()       # True: the amount is fully assigned to budgets and debts
groceries.signed_amount()  # -1250
groceries.title()          # "Main account"
```

A transaction is `IN`, `OUT` or `MOVE`. An incoming transaction is valid when
its inbudgets and debts add up to its amount, an outgoing one when its budgets
and debts do, and a move when it has no budgets, inbudgets or debts.
`Transaction.to_dict()` and `Transaction.from_dict()` convert to and from the
JSON form, with the type under the key `"type"`.

`TransactionValues.from_transaction_pod()` turns a transaction into signed
amounts per pod (account), `TransactionValues.from_transaction_debt()` into
signed amounts per debt.

## Contracts and goals

`moneyboard.contract.Contract` holds a `Payment` with a cycle in months.
`Payment.signed_monthly_amount()` gives the net amount per month, negative
for expenses, and `Payment.date_of_next_payment(now)` the next due date.

`moneyboard.goal.Goal` is a due date with a `RealWealth` target.

## Wealth history

`moneyboard.history.Wealth.history` groups date-sorted transactions into
periods of `year` years, `month` months and `day` days, the last one ending
just after `date`, and returns one `Wealth` per period:

```python
from moneyboard.history import Wealth

points = Wealth.history(transactions, datetime.now().astimezone(),
                        year=0, month=1, day=0, length=12)
for point in points:
    print(point.date, point.real.value, point.real.delta)
```

Each `Wealth` carries `income`, `out` and `change` of the period and the
running balances `real`, `debt` and `total`, each as a `ValueDiff` with the
`value` and its `delta` towards the following period. In `to_dict()` the
total appears under `"sum"` and each delta under `"diff"`.

`AssociatedTypeValues.history` does the same for per-name values such as
pods, budgets or debts.

## Extrapolation

```python
from moneyboard.extrapolation import create_extrapolation

plan = create_extrapolation(contracts, goals, history_wealth, current_wealth,
                            year=2024, month=6)
plan.freely_available
plan.equalized_free_money
```

It combines the past periods with one planned item per month from `month` to
December. Each planned month sums the contracts due in it, sets aside the
monthly saving needed for the most demanding goal (`savings_rate`), and leaves
the rest as freely available. `equalized_free_money` spreads the free money
evenly over the months. Every contract must have a payment cycle of at least
one month.

## Parsing dates, amounts and queries

`moneyboard.fields` reads the formats found in bank exports and queries:

```python
from moneyboard.fields import parse_amount, parse_optional_ymd

parse_amount("+1,23 €")      # 123
parse_amount("-8.99")        # 899 (the sign is dropped)
parse_optional_ymd("2024-3") # local midnight on 1 March 2024
```

`moneyboard.filters.Filter.from_query()` builds a transaction filter from
query parameters (`start`, `end` as `YYYY`, `YYYY-MM` or `YYYY-MM-DD`, `pod`,
`debt`, `budget`, `inbudget`, `type`); `Filter.matches()` tests a transaction
against it and `Filter.conditions()` renders it as query conditions.
`HistoryQuery.from_query()` reads `year`, `month`, `day`, `len`, `start` and
`end`.

## Settings

`moneyboard.settings.Settings.from_env()` reads `DB_HOST`, `DB_PORT`,
`DB_USER`, `DB_PASSWORD`, `DB_NAMESPACE`, `DB_DATABASE`, `HOST` and `PORT`
from the environment, falling back to defaults (port 8082 to listen on).

## Front end helpers

- `moneyboard.frontend.routes`: `parse_route("/contracts/abc")` gives
  `Route("contract", "abc")`; `nav_items()` lists the navigation bar.
- `moneyboard.frontend.list_item.ListItem`: a list row with colour, formatted
  amount and `render()` to HTML.
- `moneyboard.frontend.charts`: `wealth_history_config()` and
  `monthly_extrapolation_config()` build chart configurations;
  `ChartConfig.to_dict()` gives their JSON form.
- `moneyboard.frontend.transactions`: `TransactionQuery.api_url()` builds the
  API address of a transaction list, `transaction_list_items()` its rows.

## What it does not do

The package is a library only. It has no command and no web server, it does
not store records anywhere, it handles no attachment files, and it does not
import bank statement files; the `moneyboard.importers` package is empty.
Reading records, keeping them and serving them is up to the application that
uses it.