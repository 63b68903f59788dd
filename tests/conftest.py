import os
import sys
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Must be set before tasktrack modules read the environment.
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("DB_SSLMODE", None)
os.environ.pop("BOOTSTRAP_ADMIN_USERNAME", None)
os.environ.pop("BOOTSTRAP_ADMIN_PASSWORD", None)

import pytest  # noqa: E402
from sqlmodel import Session  # noqa: E402

from tasktrack.core.jwt import create_access_token  # noqa: E402
from tasktrack.core.security import hash_password  # noqa: E402
from tasktrack.db import base as _models  # noqa: E402,F401
from tasktrack.db.session import create_all_tables, drop_all_tables, engine  # noqa: E402
from tasktrack.models.task import Task, TaskStatus  # noqa: E402
from tasktrack.models.user import User, UserRole  # noqa: E402

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def db():
    create_all_tables()
    with Session(engine) as s:
        yield s
    drop_all_tables()


@pytest.fixture
def make_user(db):
    def _make(username: str, role: UserRole = UserRole.USER, password: str = DEFAULT_PASSWORD) -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def admin(make_user) -> User:
    return make_user("admin", UserRole.ADMIN)


@pytest.fixture
def alice(make_user) -> User:
    return make_user("alice")


@pytest.fixture
def bob(make_user) -> User:
    return make_user("bob")


@pytest.fixture
def make_task(db, admin):
    def _make(title: str = "Write report", assigned_user_id=None, status=TaskStatus.PENDING) -> Task:
        now = datetime.utcnow()
        task = Task(
            title=title,
            description=f"{title} description",
            due_date=datetime(2030, 1, 15, 9, 0),
            status=status,
            assigned_user_id=assigned_user_id,
            created_by=admin.id,
            created_at=now,
            updated_at=now,
        )
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make


@pytest.fixture
def client(db):
    from fastapi.testclient import TestClient

    from tasktrack.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    def _headers(user: User) -> dict:
        token = create_access_token(user.id, user.role.value)
        return {"Authorization": f"Bearer {token}"}

    return _headers
