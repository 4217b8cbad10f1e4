"""Command-line entry point that seeds the database and serves the API."""

from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Sequence

from finapp.api import create_app
from finapp.db import DatabaseError, DBManager
from finapp.expenses_dao import ExpensesDAO
from finapp.models import Expense
from finapp.textutils import timestamp_to_string


def fill_test_expenses(dao: ExpensesDAO, user_id: int) -> None:
    """Insert three sample expenses for a user."""
    now = int(time.time())
    samples = [
        Expense(0, 500.0, "RUB", "АПАППАВвававапр", "dinner", now, user_id),
        Expense(0, 1200.0, "USD", "transport", "taxi", now, user_id),
        Expense(0, 300.0, "EUR", "entartainment", "cinema", now, user_id),
    ]
    for expense in samples:
        dao.add_expense(expense)


def format_expenses(dao: ExpensesDAO, user_id: int) -> str:
    """Describe each of the user's expenses on its own line."""
    return "".join(
        f"ID: {e.id}, Amount: {e.amount:g}, Currency: {e.currency}, "
        f"Category: {e.category}, Comment: {e.comment}, "
        f"Timestamp: {timestamp_to_string(e.timestamp)}, UserID: {e.user_id}\n"
        for e in dao.get_expenses(user_id)
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="finapp", description="Expense tracking server.")
    parser.add_argument("--db", default="expenses.db", help="database file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument(
        "--jwt-secret",
        default=os.environ.get("FINAPP_JWT_SECRET", ""),
        help="key used to verify bearer tokens",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Seed the database, print its contents and run the HTTP server."""
    args = _parse_args(argv)
    db = DBManager(args.db)
    try:
        db.initialize()
    except DatabaseError as exc:
        print(exc, file=sys.stderr)
        print("Failed to initialize database!", file=sys.stderr)
        return 1
    try:
        dao = ExpensesDAO(db)
        try:
            dao.create_table()
        except DatabaseError as exc:
            print(exc, file=sys.stderr)
            print("Failed to create expenses table!", file=sys.stderr)
            return 1

        fill_test_expenses(dao, 1)
        for user_id in (0, 1, 2):
            print(format_expenses(dao, user_id))

        app = create_app(dao, args.jwt_secret)
        app.run(host=args.host, port=args.port, threaded=True)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())