from __future__ import annotations

import bcrypt

from tasktrack.core.config import settings


# bcrypt only looks at the first 72 bytes; bcrypt>=5 rejects longer input outright.
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Salted one-way bcrypt hash; the plaintext is never stored."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash (legacy plaintext row): never a match.
        return False


# Checked against when the username is unknown so both failure paths do the same work.
_DUMMY_HASH = hash_password("tasktrack-dummy-password")


def burn_password_check(password: str) -> None:
    verify_password(password, _DUMMY_HASH)
