from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from taskboard.models.user import UserRole, PresenceStatus


class UserCreate(BaseModel):
    # Presence is checked by the service so a missing field reads as a 400
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserClaims(BaseModel):
    """Identity embedded in a session token"""
    id: int
    role: UserRole
    name: str
    avatar: Optional[str] = None


class EmployeeOut(BaseModel):
    id: int
    name: str
    username: str
    email: str
    role: UserRole
    status: PresenceStatus
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class AssigneeOut(BaseModel):
    id: int
    name: str
    avatar: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str
