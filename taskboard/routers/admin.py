# taskboard/routers/admin.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from taskboard.database import get_db
from taskboard.schemas import EmployeeOut, TaskCreate, TaskOut, TaskWithAssigneeOut, UserClaims
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService
from taskboard.utils.auth import require_admin

router = APIRouter()


@router.get("/employees", response_model=List[EmployeeOut])
def get_employees(
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(require_admin)
):
    """Employees without their credential field"""
    return UserService(db).list_employees(current_user.role)


@router.get("/tasks", response_model=List[TaskWithAssigneeOut])
def get_all_tasks(
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(require_admin)
):
    """All tasks, newest first, assignee resolved to name and avatar"""
    return TaskService(db).list_all_tasks(current_user.role)


@router.post("/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: UserClaims = Depends(require_admin)
):
    return TaskService(db).create_task(
        caller_role=current_user.role,
        title=task.title,
        description=task.description,
        assigned_to=task.assigned_to,
        priority=task.priority,
        due_date=task.due_date,
    )
