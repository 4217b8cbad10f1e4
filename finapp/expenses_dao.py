"""Storage of expenses in the ``expenses`` table."""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

from finapp.db import DatabaseError, DBManager
from finapp.models import Expense

_CREATE_SQL = (
    "CREATE TABLE IF NOT EXISTS expenses ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "amount REAL NOT NULL, "
    "currency TEXT NOT NULL, "
    "category TEXT NOT NULL, "
    "comment TEXT, "
    "timestamp INTEGER NOT NULL, "
    "user_id INTEGER NOT NULL);"
)
_INSERT_SQL = (
    "INSERT INTO expenses (amount, currency, category, comment, timestamp, user_id) "
    "VALUES (?, ?, ?, ?, ?, ?);"
)
_SELECT_COLUMNS = "SELECT id, amount, currency, category, comment, timestamp FROM expenses "


class ExpensesDAO:
    """Reads and writes expenses, always scoped to one user."""

    def __init__(self, db_manager: DBManager) -> None:
        self._db = db_manager
        self._lock = threading.Lock()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = self._db.connection()
        with self._lock:
            try:
                with conn:
                    yield conn
            except sqlite3.Error as exc:
                raise DatabaseError(f"SQL error: {exc}") from exc

    @staticmethod
    def _to_expense(row: tuple, user_id: int) -> Expense:
        expense_id, amount, currency, category, comment, timestamp = row
        return Expense(
            id=expense_id,
            amount=amount,
            currency=currency,
            category=category,
            comment=comment or "",
            timestamp=timestamp,
            user_id=user_id,
        )

    def create_table(self) -> None:
        """Create the expenses table if it does not exist yet."""
        with self._transaction() as conn:
            conn.execute(_CREATE_SQL)

    def add_expense(self, expense: Expense) -> int:
        """Insert an expense and return the id of the new row."""
        with self._transaction() as conn:
            cursor = conn.execute(
                _INSERT_SQL,
                (
                    expense.amount,
                    expense.currency,
                    expense.category,
                    expense.comment,
                    expense.timestamp,
                    expense.user_id,
                ),
            )
            return cursor.lastrowid

    def get_expenses(self, user_id: int, from_date: int = 0, to_date: int = 0) -> list[Expense]:
        """Return the user's expenses, newest first; a bound of 0 means unbounded."""
        sql = _SELECT_COLUMNS + "WHERE user_id = ? "
        params: list[int] = [user_id]
        if from_date > 0:
            sql += "AND timestamp >= ? "
            params.append(from_date)
        if to_date > 0:
            sql += "AND timestamp <= ? "
            params.append(to_date)
        sql += "ORDER BY timestamp DESC;"
        with self._transaction() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._to_expense(row, user_id) for row in rows]

    def delete_expense(self, expense_id: int, user_id: int) -> bool:
        """Delete an expense the user owns; return whether a row was removed."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM expenses WHERE id = ? AND user_id = ?;", (expense_id, user_id)
            )
            return cursor.rowcount > 0

    def get_expense_by_id(self, expense_id: int, user_id: int) -> Expense | None:
        """Return the user's expense with this id, or None."""
        with self._transaction() as conn:
            row = conn.execute(
                _SELECT_COLUMNS + "WHERE id = ? AND user_id = ?;", (expense_id, user_id)
            ).fetchone()
        return None if row is None else self._to_expense(row, user_id)