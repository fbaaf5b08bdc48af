from .api import ApiClient, ApiError
from .clock import Clock
from .state import SessionStore, TaskBoardState, TaskFilter
from .views import AdminView, EmployeeView, LoginView, Navigator
