"""Centralized SQLModel imports to ensure metadata is populated."""

from tasktrack.models import user as _user  # noqa: F401
from tasktrack.models import task as _task  # noqa: F401
