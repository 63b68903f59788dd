from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from tasktrack.core.errors import DuplicateEntity
from tasktrack.core.permissions import Operation, authorize
from tasktrack.core.security import hash_password
from tasktrack.models.user import User, UserRole
from tasktrack.schemas.user import UserCreate

log = logging.getLogger(__name__)


def create_user(db: Session, data: UserCreate, caller_role: UserRole | str) -> User:
    authorize(Operation.CREATE_USER, caller_role)

    user = User(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        log.warning("create_user rejected, duplicate username/email: %s", data.username)
        raise DuplicateEntity("Username or email already exists", entity="User") from exc
    db.refresh(user)

    log.info("user created id=%s role=%s", user.id, user.role.value)
    return user
