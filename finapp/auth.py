"""Bearer-token authentication of requests."""

from __future__ import annotations

import re

import jwt

ISSUER = "finapp"
_BEARER = "Bearer "
_NUMBER = re.compile(r"\s*([+-]?)(\d+)")
_ULONG_MAX = 2**64 - 1


class AuthError(Exception):
    """Raised when a request carries no valid token."""

    status = 401


def _parse_user_id(claim: object) -> int:
    if not isinstance(claim, str):
        raise ValueError("user_id claim must be a string")
    match = _NUMBER.match(claim)
    if match is None:
        raise ValueError(f"user_id claim is not a number: {claim!r}")
    value = int(match.group(2))
    if value > _ULONG_MAX:
        raise ValueError("user_id claim is out of range")
    if match.group(1) == "-":
        value = -value % (_ULONG_MAX + 1)
    return value & 0xFFFFFFFF


def user_id_from_header(header: str | None, secret: str) -> int:
    """Return the user id carried by an ``Authorization: Bearer`` header value."""
    if not header or not header.startswith(_BEARER):
        raise AuthError("Missing Authorization header")
    token = header[len(_BEARER):]
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            issuer=ISSUER,
            options={"verify_aud": False},
        )
        return _parse_user_id(payload.get("user_id"))
    except (jwt.PyJWTError, ValueError) as exc:
        raise AuthError("Invalid or expired token") from exc