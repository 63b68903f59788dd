from __future__ import annotations

import logging

from sqlmodel import Session, select

from tasktrack.core.errors import InvalidCredentials
from tasktrack.core.security import burn_password_check, verify_password
from tasktrack.models.user import User
from tasktrack.schemas.auth import AuthContext

log = logging.getLogger(__name__)


def authenticate(db: Session, username: str, password: str) -> AuthContext:
    """
    Resolve a username/password pair to the caller context.
    - exact, case-sensitive username match
    - unknown user and wrong password raise the same InvalidCredentials
    """
    if not username:
        raise InvalidCredentials()

    user = db.exec(select(User).where(User.username == username)).first()
    if user is None:
        burn_password_check(password or "")
        log.warning("login failed for username=%r", username)
        raise InvalidCredentials()

    if not verify_password(password or "", user.password_hash):
        log.warning("login failed for username=%r", username)
        raise InvalidCredentials()

    log.info("login ok user_id=%s role=%s", user.id, user.role.value)
    return AuthContext(user_id=user.id, role=user.role)
