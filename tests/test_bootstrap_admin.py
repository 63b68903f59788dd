import pytest

from sqlmodel import select

from tasktrack.core.config import settings
from tasktrack.core.security import verify_password
from tasktrack.models.user import User, UserRole
from tasktrack.services.bootstrap_admin import ensure_bootstrap_admin


def test_bootstrap_admin_disabled_without_settings(db, monkeypatch):
    monkeypatch.setattr(settings, "bootstrap_admin_username", None)
    monkeypatch.setattr(settings, "bootstrap_admin_password", None)

    assert ensure_bootstrap_admin(db) is None
    assert db.exec(select(User)).all() == []


def test_bootstrap_admin_is_created_once(db, monkeypatch):
    monkeypatch.setattr(settings, "bootstrap_admin_username", "root")
    monkeypatch.setattr(settings, "bootstrap_admin_password", "root-password")
    monkeypatch.setattr(settings, "bootstrap_admin_email", "root@example.com")

    first = ensure_bootstrap_admin(db)
    second = ensure_bootstrap_admin(db)

    assert first == second
    users = db.exec(select(User)).all()
    assert len(users) == 1
    assert users[0].role == UserRole.ADMIN
    assert users[0].email == "root@example.com"
    assert verify_password("root-password", users[0].password_hash)


def test_bootstrap_admin_rejects_password_over_72_bytes(db, monkeypatch):
    monkeypatch.setattr(settings, "bootstrap_admin_username", "root")
    monkeypatch.setattr(settings, "bootstrap_admin_password", "é" * 40)

    with pytest.raises(RuntimeError, match="72 bytes"):
        ensure_bootstrap_admin(db)

    assert db.exec(select(User)).all() == []
