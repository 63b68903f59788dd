# tasktrack/routers/task.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from tasktrack.db.session import get_session
from tasktrack.dependencies.auth import get_current_user
from tasktrack.schemas.auth import AuthContext
from tasktrack.schemas.task import DeleteResult, TaskCreate, TaskOut, TaskUpdate, TaskView
from tasktrack.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    task = task_service.create_task(db, body, caller.user_id, caller.role)
    return TaskOut.model_validate(task, from_attributes=True)


@router.get("", response_model=list[TaskView])
def list_tasks(
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    return task_service.list_tasks(db, caller.user_id, caller.role)


@router.patch("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    body: TaskUpdate,
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    task = task_service.update_task(db, task_id, body, caller.user_id, caller.role)
    return TaskOut.model_validate(task, from_attributes=True)


@router.delete("/{task_id}", response_model=DeleteResult)
def delete_task(
    task_id: int,
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    return task_service.delete_task(db, task_id, caller.user_id, caller.role)


@router.patch("/{task_id}/complete", response_model=TaskOut)
def complete_task(
    task_id: int,
    db: Session = Depends(get_session),
    caller: AuthContext = Depends(get_current_user),
):
    task = task_service.complete_task(db, task_id, caller.user_id)
    return TaskOut.model_validate(task, from_attributes=True)
