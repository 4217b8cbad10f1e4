"""Plain data records used throughout the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class Expense:
    """A single expense entry owned by a user."""

    id: int = 0
    amount: float = 0.0
    currency: str = ""
    category: str = ""
    comment: str = ""
    timestamp: int = 0
    user_id: int = 0


@dataclass
class Receipt:
    """An uploaded receipt image and the text recognised on it."""

    id: int
    user_id: int
    file_path: str
    ocr_text: str
    uploaded_at: int


@dataclass
class CurrencyRate:
    """Exchange rate between two currencies at a point in time."""

    base_currency: str
    target_currency: str
    rate: float
    timestamp: int


@dataclass
class User:
    """An application user; ``telegram_id`` is 0 when not linked."""

    id: int
    email: str
    password_hash: str
    create_date: int
    telegram_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the user as a JSON-ready mapping."""
        return {
            "id": self.id,
            "email": self.email,
            "password_hash": self.password_hash,
            "create_date": self.create_date,
            "telegram_id": self.telegram_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a user from a mapping; a missing or null telegram_id becomes 0."""
        telegram_id = data.get("telegram_id")
        return cls(
            id=data["id"],
            email=data["email"],
            password_hash=data["password_hash"],
            create_date=data["create_date"],
            telegram_id=0 if telegram_id is None else telegram_id,
        )