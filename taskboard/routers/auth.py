from fastapi import APIRouter, Depends, status

from taskboard.schemas import MessageOut, Token, UserClaims, UserCreate, UserLogin
from taskboard.services.auth_service import AuthService
from taskboard.utils.auth import get_auth_service, get_current_user

router = APIRouter()


@router.post("/signup", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, auth_service: AuthService = Depends(get_auth_service)):
    message = auth_service.signup(user.username, user.name, user.email, user.password)
    return {"message": message}


@router.post("/login", response_model=Token)
def login(user: UserLogin, auth_service: AuthService = Depends(get_auth_service)):
    return auth_service.login(user.email, user.password)


@router.post("/logout", response_model=MessageOut)
def logout(
    current_user: UserClaims = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    return {"message": auth_service.logout(current_user.id)}
