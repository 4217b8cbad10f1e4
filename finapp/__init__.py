"""Expense tracking with an SQLite store and a JWT-protected JSON API."""

__version__ = "0.1.0"

__all__ = ["__version__"]