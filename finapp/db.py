"""Ownership of the SQLite connection."""

from __future__ import annotations

import os
import sqlite3


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class DBManager:
    """Opens and holds one SQLite connection for a database file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._conn: sqlite3.Connection | None = None

    def initialize(self) -> None:
        """Open the database and set its encoding to UTF-8."""
        if self._conn is not None:
            return
        try:
            conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Cannot open database: {exc}") from exc
        try:
            conn.execute("PRAGMA encoding = 'UTF-8';")
        except sqlite3.Error as exc:
            conn.close()
            raise DatabaseError(f"Failed to set encoding: {exc}") from exc
        self._conn = conn

    def connection(self) -> sqlite3.Connection:
        """Return the open connection."""
        if self._conn is None:
            raise DatabaseError("Database is not initialized")
        return self._conn

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DBManager":
        self.initialize()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()