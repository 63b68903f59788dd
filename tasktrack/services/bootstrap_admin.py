import logging
from typing import Optional

from sqlmodel import Session, select

from tasktrack.core.config import settings
from tasktrack.core.security import MAX_PASSWORD_BYTES, hash_password, password_too_long
from tasktrack.models.user import User, UserRole

log = logging.getLogger(__name__)


def ensure_bootstrap_admin(db: Session) -> Optional[int]:
    """
    Create the configured first admin if it does not exist yet and return its id.
    Returns None when BOOTSTRAP_ADMIN_USERNAME/PASSWORD are not set.
    """
    username = settings.bootstrap_admin_username
    password = settings.bootstrap_admin_password
    if not username or not password:
        return None
    if password_too_long(password):
        raise RuntimeError(f"BOOTSTRAP_ADMIN_PASSWORD must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")

    existing = db.exec(select(User).where(User.username == username)).first()
    if existing:
        return existing.id

    email = settings.bootstrap_admin_email or f"{username}@localhost"
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=UserRole.ADMIN,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info("bootstrap admin created id=%s username=%s", user.id, username)
    return user.id
