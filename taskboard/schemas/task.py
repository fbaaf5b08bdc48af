# taskboard/schemas/task.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Optional

from taskboard.models.task import TaskStatus, TaskPriority
from taskboard.schemas.user import AssigneeOut

camel_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[int] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[datetime] = None

    model_config = camel_config

    @field_validator('assigned_to', 'priority', 'due_date', mode='before')
    @classmethod
    def blank_is_missing(cls, v):
        # Web forms send "" for untouched inputs
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('due_date')
    @classmethod
    def due_date_in_utc(cls, v):
        # Stored naive, in UTC
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class TaskUpdate(BaseModel):
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    has_issue: Optional[bool] = None

    model_config = camel_config


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime] = None
    has_issue: bool
    assigned_to: int
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = camel_config


class TaskWithAssigneeOut(TaskOut):
    # Assignee resolved to its display fields
    assigned_to: Optional[AssigneeOut] = Field(
        None, validation_alias="assignee", serialization_alias="assignedTo"
    )
