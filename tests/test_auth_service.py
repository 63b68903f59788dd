import pytest

from tasktrack.core.errors import InvalidCredentials
from tasktrack.core.security import hash_password, verify_password
from tasktrack.models.user import User, UserRole
from tasktrack.services.auth_service import authenticate

DEFAULT_PASSWORD = "secret123"


def test_authenticate_returns_caller_context(db, alice):
    ctx = authenticate(db, "alice", DEFAULT_PASSWORD)

    assert ctx.user_id == alice.id
    assert ctx.role == UserRole.USER


def test_authenticate_admin(db, admin):
    ctx = authenticate(db, "admin", DEFAULT_PASSWORD)

    assert ctx.user_id == admin.id
    assert ctx.role == UserRole.ADMIN


@pytest.mark.parametrize(
    ("username", "password"),
    [
        ("nobody", DEFAULT_PASSWORD),
        ("alice", "wrong-password"),
        ("", DEFAULT_PASSWORD),
        ("Alice", DEFAULT_PASSWORD),  # case-sensitive
    ],
)
def test_authenticate_failures_share_one_message(db, alice, username, password):
    with pytest.raises(InvalidCredentials) as excinfo:
        authenticate(db, username, password)

    assert str(excinfo.value) == "Invalid credentials"
    assert excinfo.value.kind == "invalid_credentials"


def test_authenticate_never_accepts_plaintext_stored_password(db):
    db.add(User(username="legacy", email="legacy@example.com", password_hash="plain", role=UserRole.USER))
    db.commit()

    with pytest.raises(InvalidCredentials):
        authenticate(db, "legacy", "plain")


def test_hash_password_is_salted_and_verifiable():
    first = hash_password("hunter22")
    second = hash_password("hunter22")

    assert first != "hunter22"
    assert first != second
    assert first.startswith("$2")
    assert verify_password("hunter22", first)
    assert not verify_password("hunter23", first)
