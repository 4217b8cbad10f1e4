# finapp

A small personal expense tracker. Expenses are stored in an SQLite
database and served over a JSON HTTP API built with Flask. Every request
has to carry a JWT, and each user sees and changes only their own expenses.

## Installation

```
pip install .
```

## Running the server

```
finapp
```

This opens (or creates) `expenses.db` in the current directory, makes sure
the `expenses` table exists, adds three sample expenses for user 1, prints
the expenses of users 0, 1 and 2 to the console, and then serves the API
on `0.0.0.0:8080`.

Options:

| Option         | Default                                  | Meaning                               |
|----------------|------------------------------------------|---------------------------------------|
| `--db`         | `expenses.db`                            | database file                         |
| `--host`       | `0.0.0.0`                                | address to listen on                  |
| `--port`       | `8080`                                   | port to listen on                     |
| `--jwt-secret` | value of `FINAPP_JWT_SECRET`, else empty | key used to verify bearer tokens      |

If the database cannot be opened or the table cannot be created, the
command prints the error and exits with status 1.

## Authentication

Every request needs an `Authorization` header of the form
`Bearer <jwt>`. The token must be signed with HS256 using the server's
secret, have the issuer `finapp`, and carry the user's numeric id as a
string in the `user_id` claim. A missing header (or one not starting with
`Bearer `) is answered with `401 Missing Authorization header`; a token
that fails verification with `401 Invalid or expired token`.

## Endpoints

| Method | Path             | Description                                         |
|--------|------------------|-----------------------------------------------------|
| POST   | `/expenses`      | Add an expense; answers `201` with its id           |
| GET    | `/expenses`      | List the user's expenses, newest first              |
| DELETE | `/expenses/<id>` | Delete one of the user's expenses; `404` if absent  |

A new expense is a JSON object with `amount` (a number), `currency` and
`category` (strings) and, optionally, `comment` (defaults to an empty
string) and `timestamp` (Unix seconds, defaults to now). A body that is not
such an object is answered with `400` and `{"error": "..."}`:

```
curl -X POST http://localhost:8080/expenses \
     -H "Authorization: Bearer token" \
     -d '{"amount": 12.5, "currency": "EUR", "category": "food", "comment": "lunch"}'
```

A successful POST answers `{"id": <new id>, "status": "success"}`.

`GET /expenses` takes the optional query parameters `from` and `to`
(Unix seconds, inclusive; 0 or absent means no bound). A value that is not
an integer gives `400` with `{"error": "Invalid 'from' parameter"}` or
`{"error": "Invalid 'to' parameter"}`. Each listed expense has `id`,
`amount`, `currency`, `category`, `comment` and `timestamp`.

A successful DELETE answers `{"id": <id>, "status": "deleted"}`.

## Using it from Python

```python
import time

from finapp.api import create_app
from finapp.db import DBManager
from finapp.expenses_dao import ExpensesDAO
from finapp.models import Expense

with DBManager("expenses.db") as db:
    dao = ExpensesDAO(db)
    dao.create_table()
    dao.add_expense(Expense(amount=500.0, currency="RUB", category="food",
                            comment="dinner", timestamp=int(time.time()), user_id=1))
    for expense in dao.get_expenses(1, 0, 0):
        print(expense)

    app = create_app(dao, "secret")
```

- `finapp.db.DBManager` opens one SQLite connection; it is a context
  manager, and `initialize()`, `connection()` and `close()` can also be
  called directly. Failures raise `finapp.db.DatabaseError`.
- `finapp.expenses_dao.ExpensesDAO` offers `create_table`, `add_expense`,
  `get_expenses`, `delete_expense` and `get_expense_by_id`, always scoped
  to one user id.
- `finapp.api.create_app` returns a Flask application whose routes check
  tokens signed with the given secret.
- `finapp.auth.user_id_from_header` does that check on its own and raises
  `finapp.auth.AuthError` when the header or token is not acceptable.
- `finapp.app.fill_test_expenses` and `finapp.app.format_expenses` add the
  sample expenses and render a user's expenses as text.
- `finapp.textutils.timestamp_to_string` formats a Unix timestamp as local
  `YYYY-MM-DD HH:MM:SS`.

## What it does not do

- It does not issue tokens or manage user accounts: there is no sign-up or
  login endpoint. `finapp.models.User` is only a record with
  `to_dict`/`from_dict`, and tokens must be made elsewhere with the same
  secret.
- It does not store or fetch currency exchange rates or receipts;
  `CurrencyRate` and `Receipt` in `finapp.models` are plain records with
  no storage or endpoints behind them.
- Amounts are not converted between currencies.