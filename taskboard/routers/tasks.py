# taskboard/routers/tasks.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from taskboard.database import get_db
from taskboard.schemas import TaskOut, TaskUpdate, UserClaims
from taskboard.services.task_service import TaskPatch, TaskService
from taskboard.utils.auth import get_current_user

router = APIRouter()


@router.get("", response_model=List[TaskOut])
def get_my_tasks(
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(get_current_user)
):
    """Tasks assigned to the caller, newest first"""
    return TaskService(db).list_own_tasks(current_user.id)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(get_current_user)
):
    """Partial update by the assignee or an admin"""
    patch = TaskPatch(**task_update.model_dump(exclude_none=True))
    return TaskService(db).update_task(current_user.id, current_user.role, task_id, patch)


@router.post("/{task_id}/resolve", response_model=TaskOut)
def resolve_issue(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(get_current_user)
):
    return TaskService(db).resolve_issue(current_user.id, current_user.role, task_id)
