"""
Task lifecycle operations.

Each function is one unit of work on the given session: role gate first, then
existence checks, then a single commit. Nothing is written before every check
has passed. Task rows being changed are read with SELECT ... FOR UPDATE so the
check and the write see the same row version.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlmodel import Session, select

from tasktrack.core.errors import NotFound, PermissionDenied
from tasktrack.core.permissions import Operation, authorize
from tasktrack.models.task import Task, TaskStatus
from tasktrack.models.user import User, UserRole
from tasktrack.schemas.task import TaskCreate, TaskUpdate, TaskView

log = logging.getLogger(__name__)


def _touch(task: Task) -> None:
    """Set updated_at to now, never at or below the stored value."""
    now = datetime.utcnow()
    previous = task.updated_at
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    task.updated_at = now


def _get_user(db: Session, user_id: Optional[int]) -> Optional[User]:
    if user_id is None:
        return None
    return db.get(User, user_id)


def _get_task_for_update(db: Session, task_id: int) -> Task:
    task = db.exec(select(Task).where(Task.id == task_id).with_for_update()).first()
    if task is None:
        raise NotFound("Task")
    return task


def create_task(
    db: Session, data: TaskCreate, caller_id: int, caller_role: UserRole | str
) -> Task:
    authorize(Operation.CREATE_TASK, caller_role)

    if data.assigned_user_id is not None and _get_user(db, data.assigned_user_id) is None:
        raise NotFound("AssignedUser", "Assigned user does not exist")
    if _get_user(db, caller_id) is None:
        raise NotFound("Creator", "Creator user does not exist")

    now = datetime.utcnow()
    task = Task(
        title=data.title,
        description=data.description,
        due_date=data.due_date,
        status=data.status or TaskStatus.PENDING,
        assigned_user_id=data.assigned_user_id,
        created_by=caller_id,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    db.commit()
    db.refresh(task)

    log.info("task created id=%s by=%s assigned=%s", task.id, caller_id, task.assigned_user_id)
    return task


def list_tasks(db: Session, caller_id: int, caller_role: UserRole | str) -> List[TaskView]:
    """Admins see every task, users only their assignments; ordered by id."""
    authorize(Operation.LIST_TASKS, caller_role)

    stmt = select(Task).order_by(Task.id)
    if UserRole(caller_role) != UserRole.ADMIN:
        stmt = stmt.where(Task.assigned_user_id == caller_id)
    rows = db.exec(stmt).all()
    return [TaskView.model_validate(t, from_attributes=True) for t in rows]


def update_task(
    db: Session,
    task_id: int,
    data: TaskUpdate,
    caller_id: int,
    caller_role: UserRole | str,
) -> Task:
    authorize(Operation.UPDATE_TASK, caller_role)

    task = _get_task_for_update(db, task_id)
    changes = data.changes()

    new_assignee = changes.get("assigned_user_id")
    if new_assignee is not None and _get_user(db, new_assignee) is None:
        raise NotFound("AssignedUser", "Assigned user does not exist")

    for field, value in changes.items():
        setattr(task, field, value)
    _touch(task)

    db.add(task)
    db.commit()
    db.refresh(task)

    log.info("task updated id=%s by=%s fields=%s", task.id, caller_id, sorted(changes))
    return task


def delete_task(
    db: Session, task_id: int, caller_id: int, caller_role: UserRole | str
) -> dict:
    authorize(Operation.DELETE_TASK, caller_role)

    task = _get_task_for_update(db, task_id)
    db.delete(task)
    db.commit()

    log.info("task deleted id=%s by=%s", task_id, caller_id)
    return {"success": True}


def complete_task(db: Session, task_id: int, caller_id: int) -> Task:
    """
    Mark a task completed.
    - role is read from the caller's user row, not trusted from the request
    - admins may complete any task, users only the ones assigned to them
    - assignment and every other field are left as they are
    """
    caller = _get_user(db, caller_id)
    if caller is None:
        raise NotFound("Caller", "User not found")
    authorize(Operation.COMPLETE_TASK, caller.role)

    task = _get_task_for_update(db, task_id)

    if caller.role != UserRole.ADMIN and task.assigned_user_id != caller_id:
        log.warning("complete denied task=%s caller=%s assigned=%s", task_id, caller_id, task.assigned_user_id)
        raise PermissionDenied("Permission denied: You can only complete tasks assigned to you")

    task.status = TaskStatus.COMPLETED
    _touch(task)
    db.add(task)
    db.commit()
    db.refresh(task)

    log.info("task completed id=%s by=%s", task.id, caller_id)
    return task
