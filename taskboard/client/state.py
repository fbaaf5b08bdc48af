# taskboard/client/state.py
import enum
import json
import os
from typing import Any, Dict, List, Optional


class TaskFilter(str, enum.Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    ALL = "All"


class SessionStore:
    """Token and user claims of the signed-in user, optionally kept in a JSON file"""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None
        if path and os.path.exists(path):
            with open(path, encoding="utf-8") as fh:
                data = json.load(fh)
            self.token = data.get("token")
            self.user = data.get("user")

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    @property
    def role(self) -> Optional[str]:
        return self.user.get("role") if self.user else None

    def save(self, token: str, user: Dict[str, Any]):
        self.token = token
        self.user = user
        if self.path:
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump({"token": token, "user": user}, fh)

    def clear(self):
        self.token = None
        self.user = None
        if self.path and os.path.exists(self.path):
            os.remove(self.path)


class TaskBoardState:
    """Client-side mirror of the task list shown by a dashboard"""

    def __init__(self):
        self.tasks: List[Dict[str, Any]] = []
        self.loading = True
        self.error: Optional[str] = None
        self.filter = TaskFilter.ACTIVE

    def set_tasks(self, tasks: List[Dict[str, Any]]):
        self.tasks = list(tasks)

    def prepend(self, task: Dict[str, Any]):
        self.tasks.insert(0, task)

    def replace(self, updated: Dict[str, Any]):
        self.tasks = [updated if task["id"] == updated["id"] else task for task in self.tasks]

    def find(self, task_id: int) -> Optional[Dict[str, Any]]:
        return next((task for task in self.tasks if task["id"] == task_id), None)

    def filtered(self) -> List[Dict[str, Any]]:
        if self.filter == TaskFilter.ACTIVE:
            return [task for task in self.tasks if task["status"] != "Done"]
        if self.filter == TaskFilter.COMPLETED:
            return [task for task in self.tasks if task["status"] == "Done"]
        return list(self.tasks)
