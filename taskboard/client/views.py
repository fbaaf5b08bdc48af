# taskboard/client/views.py
"""
View-state controllers for the login, admin and employee screens.

Each view owns its state holder and talks to the API through an
``ApiClient``. Navigation is recorded on a ``Navigator`` instead of being
rendered.
"""

import logging
from typing import Any, Dict, List, Optional

from taskboard.client.api import ApiClient, ApiError
from taskboard.client.clock import Clock
from taskboard.client.state import SessionStore, TaskBoardState

logger = logging.getLogger(__name__)

LOGIN_ROUTE = "/login"
ADMIN_ROUTE = "/admindashboard"
EMPLOYEE_ROUTE = "/dashboard"


class Navigator:
    def __init__(self, route: str = LOGIN_ROUTE):
        self.route = route
        self.history: List[str] = [route]

    def navigate(self, route: str):
        self.route = route
        self.history.append(route)


def home_route(role: Optional[str]) -> str:
    return ADMIN_ROUTE if role == "admin" else EMPLOYEE_ROUTE


class LoginView:
    def __init__(self, api: ApiClient, session: SessionStore, navigator: Navigator):
        self.api = api
        self.session = session
        self.navigator = navigator
        self.error = ""
        self.is_loading = False

    def redirect_if_logged_in(self) -> bool:
        if self.session.is_authenticated:
            self.navigator.navigate(home_route(self.session.role))
            return True
        return False

    def submit(self, email: str, password: str) -> bool:
        if self.is_loading:
            return False
        self.error = ""
        self.is_loading = True
        try:
            data = self.api.login(email, password)
        except ApiError as e:
            self.error = e.message or "Login failed. Please try again."
            return False
        finally:
            self.is_loading = False

        self.session.save(data["token"], data["user"])
        self.api.token = data["token"]
        self.navigator.navigate(home_route(data["user"]["role"]))
        return True


class _DashboardView:
    def __init__(self, api: ApiClient, session: SessionStore, navigator: Navigator):
        self.api = api
        self.session = session
        self.navigator = navigator
        self.state = TaskBoardState()
        self.api.token = session.token

    def _go_to_login(self):
        self.navigator.navigate(LOGIN_ROUTE)

    def logout(self):
        """Tell the server, then drop the local session whatever the outcome"""
        try:
            self.api.logout()
        except ApiError as e:
            logger.warning(f"Logout failed: {e.message}")
        finally:
            self.session.clear()
            self.api.token = None
            self._go_to_login()


class AdminView(_DashboardView):
    EMPTY_FORM = {"title": "", "description": "", "assignedTo": "", "priority": "Medium", "dueDate": ""}

    def __init__(self, api: ApiClient, session: SessionStore, navigator: Navigator):
        super().__init__(api, session, navigator)
        self.employees: List[Dict[str, Any]] = []
        self.new_task: Dict[str, Any] = dict(self.EMPTY_FORM)

    def load(self) -> bool:
        if not self.session.is_authenticated or self.session.role != "admin":
            self._go_to_login()
            return False

        self.state.loading = True
        try:
            self.employees = self.api.list_employees()
            self.state.set_tasks(self.api.list_all_tasks())
            return True
        except ApiError as e:
            self.state.error = e.message
            if e.is_auth_failure:
                self._go_to_login()
            return False
        finally:
            self.state.loading = False

    def assign_task(self, **fields) -> Optional[Dict[str, Any]]:
        """Create a task from the form and show it at the top of the list"""
        self.new_task.update(fields)
        if not self.new_task.get("title") or not self.new_task.get("assignedTo"):
            self.state.error = "Please provide a title and assign the task."
            return None

        try:
            created = self.api.create_task(dict(self.new_task))
        except ApiError as e:
            self.state.error = e.message
            return None

        employee = self._find_employee(created["assignedTo"])
        task = dict(created)
        task["assignedTo"] = (
            {"id": employee["id"], "name": employee["name"], "avatar": employee.get("avatar")}
            if employee else {"id": created["assignedTo"], "name": None, "avatar": None}
        )
        self.state.prepend(task)
        self.new_task = dict(self.EMPTY_FORM)
        return task

    def open_task_count(self, employee_id: int) -> int:
        return sum(
            1 for task in self.state.tasks
            if task["assignedTo"] and task["assignedTo"]["id"] == employee_id and task["status"] != "Done"
        )

    def _find_employee(self, employee_id: int) -> Optional[Dict[str, Any]]:
        return next((emp for emp in self.employees if emp["id"] == employee_id), None)


class EmployeeView(_DashboardView):
    def __init__(self, api: ApiClient, session: SessionStore, navigator: Navigator, clock: Clock):
        super().__init__(api, session, navigator)
        self.clock = clock
        self.current_time = clock.now

    def load(self) -> bool:
        if not self.session.is_authenticated:
            self._go_to_login()
            return False

        self.clock.subscribe(self._on_tick)
        self.state.loading = True
        try:
            self.state.set_tasks(self.api.list_own_tasks())
            return True
        except ApiError as e:
            self.state.error = e.message
            if e.is_auth_failure:
                self._go_to_login()
            return False
        finally:
            self.state.loading = False

    def close(self):
        self.clock.unsubscribe(self._on_tick)

    def _on_tick(self, now):
        self.current_time = now

    def _update(self, task_id: int, patch: Dict[str, Any], failure: str) -> Optional[Dict[str, Any]]:
        try:
            updated = self.api.update_task(task_id, patch)
        except ApiError as e:
            logger.error(f"{failure}: {e.message}")
            self.state.error = e.message
            return None
        self.state.replace(updated)
        return updated

    def set_status(self, task_id: int, status: str) -> Optional[Dict[str, Any]]:
        patch: Dict[str, Any] = {"status": status}
        if status == "Done":
            patch["hasIssue"] = False
        return self._update(task_id, patch, "Failed to update status")

    def update_description(self, task_id: int, description: str) -> Optional[Dict[str, Any]]:
        return self._update(task_id, {"description": description}, "Failed to update task")

    def raise_issue(self, task_id: int, note: str = "") -> Optional[Dict[str, Any]]:
        updated = self._update(task_id, {"hasIssue": True}, "Failed to raise issue")
        if updated is not None and note:
            logger.info(f"Issue raised for task {task_id}: {note}")
        return updated

    def resolve_issue(self, task_id: int) -> Optional[Dict[str, Any]]:
        return self._update(task_id, {"hasIssue": False}, "Failed to resolve issue")
