# taskboard/schemas/tokens.py
from pydantic import BaseModel
from taskboard.schemas.user import UserClaims


class Token(BaseModel):
    token: str
    user: UserClaims
