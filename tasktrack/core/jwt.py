# tasktrack/core/jwt.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt, JWTError

from tasktrack.core.config import settings


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def create_access_token(
    user_id: int, role: str, expires_delta: timedelta | None = None
) -> str:
    """
    Issue an access token carrying the caller context (sub = user id, role).
    """
    now = _utcnow()
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "typ": "access",
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Return the payload of a valid access token.
    Raises JWTError on bad signature, expiry, wrong type or missing claims.
    """
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    if payload.get("typ") != "access":
        raise JWTError("Invalid token type")
    for k in ("sub", "role"):
        if k not in payload:
            raise JWTError(f"Missing {k}")
    return payload


def decode_access_token(token: str):
    """Same as verify_access_token but returns None on failure."""
    try:
        return verify_access_token(token)
    except JWTError:
        return None
