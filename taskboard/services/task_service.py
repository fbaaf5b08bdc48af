# taskboard/services/task_service.py
"""
Task lifecycle rules and the admin/assignee authorization checks
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from taskboard.models import Task, TaskPriority, TaskStatus, User, UserRole
from taskboard.utils.errors import ForbiddenError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskPatch:
    """Partial task update; a field left as None is not touched"""

    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    has_issue: Optional[bool] = None

    def is_empty(self) -> bool:
        return self.description is None and self.status is None and self.has_issue is None


class TaskService:
    def __init__(self, db: Session):
        self.db = db

    def list_all_tasks(self, caller_role: UserRole) -> List[Task]:
        """Every task, newest first, with the assignee loaded"""
        if caller_role != UserRole.ADMIN:
            raise ForbiddenError("Admin access required")
        return (
            self.db.query(Task)
            .options(joinedload(Task.assignee))
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )

    def list_own_tasks(self, caller_id: int) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(Task.assigned_to == caller_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )

    def create_task(
        self,
        caller_role: UserRole,
        title: Optional[str],
        description: Optional[str],
        assigned_to: Optional[int],
        priority: Optional[TaskPriority] = None,
        due_date: Optional[datetime] = None,
    ) -> Task:
        if caller_role != UserRole.ADMIN:
            raise ForbiddenError("Admin access required")
        if not title or not title.strip() or assigned_to is None:
            raise ValidationError("Title and assigned employee are required")

        assignee = self.db.query(User).filter(User.id == assigned_to).first()
        if assignee is None:
            raise NotFoundError("Assigned employee not found")

        task = Task(
            title=title,
            description=description,
            assigned_to=assignee.id,
            priority=priority or TaskPriority.MEDIUM,
            due_date=due_date,
            status=TaskStatus.PENDING,
            has_issue=False,
        )
        self._save(task, "creating task")
        logger.info(f"Task {task.id} created and assigned to user {assignee.id}")
        return task

    def update_task(self, caller_id: int, caller_role: UserRole, task_id: int, patch: TaskPatch) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if task is None:
            raise NotFoundError("Task not found")

        if task.assigned_to != caller_id and caller_role != UserRole.ADMIN:
            raise ForbiddenError("Not authorized to update this task.")

        if patch.is_empty():
            return task

        if patch.description is not None:
            task.description = patch.description
        if patch.status is not None:
            task.status = patch.status
        if patch.has_issue is not None:
            task.has_issue = patch.has_issue

        # Completing a task closes any open issue
        if patch.status == TaskStatus.DONE:
            task.has_issue = False

        self._save(task, "updating task")
        logger.info(f"Task {task.id} updated by user {caller_id}")
        return task

    def resolve_issue(self, caller_id: int, caller_role: UserRole, task_id: int) -> Task:
        return self.update_task(caller_id, caller_role, task_id, TaskPatch(has_issue=False))

    def _save(self, task: Task, action: str):
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Database error while {action}")
            raise InternalError(f"Error {action}.")
