import pytest

from finapp.models import CurrencyRate, Expense, Receipt, User


def test_expense_defaults():
    expense = Expense()
    assert expense.id == 0
    assert expense.amount == 0.0
    assert expense.currency == ""
    assert expense.category == ""
    assert expense.comment == ""
    assert expense.timestamp == 0
    assert expense.user_id == 0


def test_expense_fields_kept():
    expense = Expense(amount=500.0, currency="RUB", category="food", comment="dinner", user_id=1)
    assert (expense.amount, expense.currency, expense.user_id) == (500.0, "RUB", 1)


def test_receipt_and_rate_fields():
    receipt = Receipt(id=3, user_id=4, file_path="r.png", ocr_text="total", uploaded_at=100)
    rate = CurrencyRate("USD", "EUR", 0.9, 200)
    assert receipt.file_path == "r.png"
    assert rate.base_currency == "USD"
    assert rate.target_currency == "EUR"


def test_user_to_dict_keys_and_values():
    user = User(id=7, email="user@example.com", password_hash="placeholder", create_date=1000, telegram_id=55)
    assert user.to_dict() == {
        "id": 7,
        "email": "user@example.com",
        "password_hash": "placeholder",
        "create_date": 1000,
        "telegram_id": 55,
    }


def test_user_round_trip():
    user = User(id=1, email="a@example.com", password_hash="placeholder", create_date=5, telegram_id=9)
    assert User.from_dict(user.to_dict()) == user


def test_user_default_telegram_id():
    user = User(id=1, email="a@example.com", password_hash="placeholder", create_date=5)
    assert user.telegram_id == 0


def test_from_dict_missing_telegram_id():
    user = User.from_dict(
        {"id": 2, "email": "b@example.com", "password_hash": "placeholder", "create_date": 3}
    )
    assert user.telegram_id == 0


def test_from_dict_null_telegram_id():
    user = User.from_dict(
        {
            "id": 2,
            "email": "b@example.com",
            "password_hash": "placeholder",
            "create_date": 3,
            "telegram_id": None,
        }
    )
    assert user.telegram_id == 0


def test_from_dict_missing_required_field():
    with pytest.raises(KeyError):
        User.from_dict({"id": 2, "password_hash": "placeholder", "create_date": 3})