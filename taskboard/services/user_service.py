from typing import List

from sqlalchemy.orm import Session

from taskboard.models import User, UserRole
from taskboard.utils.errors import ForbiddenError


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list_employees(self, caller_role: UserRole) -> List[User]:
        """Employee directory, admins only"""
        if caller_role != UserRole.ADMIN:
            raise ForbiddenError("Admin access required")
        return (
            self.db.query(User)
            .filter(User.role == UserRole.EMPLOYEE)
            .order_by(User.name.asc(), User.id.asc())
            .all()
        )
