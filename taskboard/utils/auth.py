# taskboard/utils/auth.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from taskboard.config.settings import Settings
from taskboard.database import get_db
from taskboard.models import UserRole
from taskboard.schemas import UserClaims
from taskboard.services.auth_service import AuthService
from taskboard.utils.errors import ForbiddenError

# Missing tokens are reported by AuthService.verify, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(db: Session = Depends(get_db), settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(db, settings)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserClaims:
    return auth_service.verify(token)


def require_admin(current_user: UserClaims = Depends(get_current_user)) -> UserClaims:
    if current_user.role != UserRole.ADMIN:
        raise ForbiddenError("Admin access required")
    return current_user
