# taskboard/utils/security.py
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

# Sessions have a fixed lifetime and are never refreshed
ACCESS_TOKEN_EXPIRE = timedelta(hours=8)


@lru_cache(maxsize=None)
def get_password_context(rounds: int = 12) -> CryptContext:
    """Password hashing context for the given bcrypt cost"""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Generate password hash

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        Hashed password
    """
    return get_password_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password

    Returns:
        Whether the password matches
    """
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(
    data: Dict[str, Any],
    secret_key: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign a token carrying ``data`` that expires after ``expires_delta``"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else ACCESS_TOKEN_EXPIRE)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """Decode and verify a token; raises ``JWTError`` when invalid or expired"""
    return jwt.decode(token, secret_key, algorithms=[algorithm])


__all__ = [
    "ACCESS_TOKEN_EXPIRE",
    "ExpiredSignatureError",
    "JWTError",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
]
