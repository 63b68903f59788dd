from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from tasktrack.models.task import TaskStatus


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Columns are timestamp without time zone, stored as UTC.
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING
    assigned_user_id: Optional[int] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value):
        return _naive_utc(value)


class TaskUpdate(BaseModel):
    """
    Partial edit. A field left out of the payload is not in ``model_fields_set``
    and is left untouched; a field sent as null is present and, for
    ``assigned_user_id``, clears the assignment.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None
    assigned_user_id: Optional[int] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value):
        return _naive_utc(value)

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in ("title", "description", "due_date", "status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but not set to null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True)


class TaskView(BaseModel):
    """Read model for listings; never exposes who created the task."""
    id: int
    title: str
    description: str
    due_date: datetime
    status: TaskStatus
    assigned_user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class TaskOut(TaskView):
    created_by: int


class DeleteResult(BaseModel):
    success: bool
