from unittest.mock import patch

import pytest

from finapp.app import fill_test_expenses, format_expenses, main
from finapp.db import DBManager
from finapp.expenses_dao import ExpensesDAO
from finapp.textutils import timestamp_to_string


@pytest.fixture
def dao():
    manager = DBManager(":memory:")
    manager.initialize()
    expenses = ExpensesDAO(manager)
    expenses.create_table()
    yield expenses
    manager.close()


def test_fill_adds_three_expenses_for_user(dao):
    fill_test_expenses(dao, 7)
    expenses = dao.get_expenses(7)
    assert len(expenses) == 3
    assert {e.currency for e in expenses} == {"RUB", "USD", "EUR"}
    assert {e.comment for e in expenses} == {"dinner", "taxi", "cinema"}
    assert dao.get_expenses(1) == []


def test_format_is_empty_without_expenses(dao):
    assert format_expenses(dao, 3) == ""


def test_format_lists_each_expense(dao):
    fill_test_expenses(dao, 1)
    text = format_expenses(dao, 1)
    lines = text.splitlines()
    assert len(lines) == 3
    assert text.endswith("\n")
    assert all(line.endswith(", UserID: 1") for line in lines)
    assert any("Amount: 500, Currency: RUB" in line for line in lines)
    stamp = timestamp_to_string(dao.get_expenses(1)[0].timestamp)
    assert all(f"Timestamp: {stamp}" in line for line in lines)


def test_main_seeds_prints_and_serves(tmp_path, capsys):
    db_path = tmp_path / "expenses.db"
    with patch("flask.Flask.run") as run:
        status = main(["--db", str(db_path), "--port", "9090"])
    assert status == 0
    run.assert_called_once()
    assert run.call_args.kwargs["port"] == 9090
    out = capsys.readouterr().out
    assert out.count("UserID: 1") == 3
    assert out.startswith("\n")

    with DBManager(db_path) as db:
        assert len(ExpensesDAO(db).get_expenses(1)) == 3


def test_main_default_port(tmp_path, capsys):
    with patch("flask.Flask.run") as run:
        status = main(["--db", str(tmp_path / "a.db")])
    assert status == 0
    assert run.call_args.kwargs["port"] == 8080
    assert capsys.readouterr().out.count("UserID: 1") == 3


def test_main_fails_when_database_cannot_open(tmp_path, capsys):
    bad_path = tmp_path / "missing" / "expenses.db"
    with patch("flask.Flask.run") as run:
        status = main(["--db", str(bad_path)])
    assert status == 1
    run.assert_not_called()
    assert "Failed to initialize database!" in capsys.readouterr().err