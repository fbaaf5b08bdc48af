# taskboard/client/api.py
"""
HTTP client for the Taskboard API
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response; ``message`` is what the banner shows"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code in (401, 403)


class ApiClient:
    """Thin wrapper over a requests-compatible session"""

    def __init__(self, base_url: str = "", session=None, token: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.token = token

    def request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.session.request(method, f"{self.base_url}{path}", json=body, headers=headers)
        if response.status_code >= 400:
            try:
                message = response.json().get("message")
            except ValueError:
                message = None
            message = message or f"Request failed with status {response.status_code}"
            logger.debug(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, message)
        return response.json()

    # Auth
    def signup(self, username: str, name: str, email: str, password: str) -> Dict[str, Any]:
        return self.request("POST", "/api/auth/signup", {
            "username": username,
            "name": name,
            "email": email,
            "password": password,
        })

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self.request("POST", "/api/auth/login", {"email": email, "password": password})

    def logout(self) -> Dict[str, Any]:
        return self.request("POST", "/api/auth/logout")

    # Admin
    def list_employees(self) -> List[Dict[str, Any]]:
        return self.request("GET", "/api/admin/employees")

    def list_all_tasks(self) -> List[Dict[str, Any]]:
        return self.request("GET", "/api/admin/tasks")

    def create_task(self, task: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("POST", "/api/admin/tasks", task)

    # Employee
    def list_own_tasks(self) -> List[Dict[str, Any]]:
        return self.request("GET", "/api/tasks")

    def update_task(self, task_id: int, patch: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PUT", f"/api/tasks/{task_id}", patch)
