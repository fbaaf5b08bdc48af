from .user import User, UserRole, PresenceStatus
from .task import Task, TaskStatus, TaskPriority
