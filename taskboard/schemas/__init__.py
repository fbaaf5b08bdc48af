from .user import UserCreate, UserLogin, UserClaims, EmployeeOut, AssigneeOut, MessageOut
from .tokens import Token
from .task import TaskCreate, TaskUpdate, TaskOut, TaskWithAssigneeOut
