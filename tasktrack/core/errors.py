"""
Engine error taxonomy.

    TaskTrackError
    ├── InvalidCredentials  — login failed (unknown user or wrong password)
    ├── PermissionDenied    — caller role/assignment does not allow the operation
    ├── NotFound            — entity-qualified lookup miss (Task, Caller, ...)
    └── DuplicateEntity     — username/email uniqueness violated in storage

Input validation is left to pydantic (FastAPI answers 422 before the engine runs).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TaskTrackError(Exception):
    kind: str = "error"
    status_code: int = 400

    def __init__(self, message: str, *, entity: Optional[str] = None):
        self.message = message
        self.entity = entity
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "kind": self.kind, "entity": self.entity}


class InvalidCredentials(TaskTrackError):
    kind = "invalid_credentials"
    status_code = 401

    def __init__(self) -> None:
        # One message for every cause so callers cannot enumerate usernames.
        super().__init__("Invalid credentials")


class PermissionDenied(TaskTrackError):
    kind = "permission_denied"
    status_code = 403


class NotFound(TaskTrackError):
    kind = "not_found"
    status_code = 404

    def __init__(self, entity: str, message: Optional[str] = None):
        super().__init__(message or f"{entity} not found", entity=entity)


class DuplicateEntity(TaskTrackError):
    kind = "duplicate_entity"
    status_code = 409
