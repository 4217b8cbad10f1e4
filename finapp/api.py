"""HTTP endpoints for managing a user's expenses."""

from __future__ import annotations

import json
import math
import re
import sqlite3
import time
from typing import Any

from flask import Flask, Response, g, request

from finapp.auth import AuthError, user_id_from_header
from finapp.db import DatabaseError
from finapp.expenses_dao import ExpensesDAO
from finapp.models import Expense

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _json_response(payload: Any, status: int) -> Response:
    body = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return Response(body, status=status, mimetype="application/json")


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid literal: {name}")


def _number(value: Any, field: str) -> float | int:
    if isinstance(value, (bool, int, float)):
        return value
    raise TypeError(f"'{field}' must be a number")


def _string(value: Any, field: str) -> str:
    if isinstance(value, str):
        return value
    raise TypeError(f"'{field}' must be a string")


def _timestamp(data: dict[str, Any]) -> int:
    if "timestamp" not in data:
        return int(time.time())
    value = int(_number(data["timestamp"], "timestamp"))
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError("'timestamp' is out of range")
    return value


def _expense_from_body(raw: bytes, user_id: int) -> Expense:
    data = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    if not isinstance(data, dict):
        raise TypeError("request body must be a JSON object")
    return Expense(
        amount=float(_number(data.get("amount"), "amount")),
        currency=_string(data.get("currency"), "currency"),
        category=_string(data.get("category"), "category"),
        comment=_string(data.get("comment", ""), "comment"),
        timestamp=_timestamp(data),
        user_id=user_id,
    )


def _parse_long(text: str) -> int:
    """Read a leading integer the way ``strtoll``-based parsing does."""
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _expense_to_dict(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.id,
        "amount": expense.amount,
        "currency": expense.currency,
        "category": expense.category,
        "comment": expense.comment,
        "timestamp": expense.timestamp,
    }


def create_app(dao: ExpensesDAO, jwt_secret: str) -> Flask:
    """Build the web application serving the expenses endpoints."""
    app = Flask(__name__)

    @app.before_request
    def _authenticate() -> Response | None:
        try:
            g.user_id = user_id_from_header(request.headers.get("Authorization"), jwt_secret)
        except AuthError as exc:
            return Response(str(exc), status=AuthError.status)
        return None

    @app.route("/expenses", methods=["POST"])
    def add_expense() -> Response:
        try:
            expense = _expense_from_body(request.get_data(), g.user_id)
        except (ValueError, TypeError) as exc:
            return _json_response({"error": str(exc)}, 400)
        try:
            new_id = dao.add_expense(expense)
        except DatabaseError:
            return Response("Internal server error", status=500)
        return _json_response({"id": new_id, "status": "success"}, 201)

    @app.route("/expenses", methods=["GET"])
    def get_expenses() -> Response:
        bounds = {"from": 0, "to": 0}
        for name in bounds:
            raw = request.args.get(name)
            if raw is None:
                continue
            try:
                bounds[name] = _parse_long(raw)
            except ValueError:
                return _json_response({"error": f"Invalid '{name}' parameter"}, 400)
        try:
            expenses = dao.get_expenses(g.user_id, bounds["from"], bounds["to"])
        except (DatabaseError, sqlite3.Error):
            return _json_response({"error": "Internal server error GET"}, 500)
        payload = [
            _expense_to_dict(expense)
            for expense in expenses
            if math.isfinite(expense.amount)
        ]
        return _json_response(payload, 200)

    @app.route("/expenses/<int(signed=True):expense_id>", methods=["DELETE"])
    def delete_expense(expense_id: int) -> Response:
        try:
            deleted = dao.delete_expense(expense_id, g.user_id)
        except DatabaseError as exc:
            return _json_response({"error": str(exc)}, 500)
        if not deleted:
            return _json_response({"error": "Expense not found"}, 404)
        return _json_response({"status": "deleted", "id": expense_id}, 200)

    return app