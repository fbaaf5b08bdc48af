# taskboard/services/auth_service.py
"""
Account signup, login/logout presence tracking and session tokens
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.config.settings import AdminSeed, Settings
from taskboard.models import User, UserRole, PresenceStatus
from taskboard.schemas import Token, UserClaims
from taskboard.utils.avatar import generate_avatar
from taskboard.utils.errors import (
    AuthError,
    ConflictError,
    ForbiddenError,
    InternalError,
    ValidationError,
)
from taskboard.utils.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


class AuthService:
    """Authentication operations over the users table"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def signup(self, username: Optional[str], name: Optional[str], email: Optional[str], password: Optional[str]) -> str:
        """Create an employee (or allow-listed admin) account"""
        if not all(value and value.strip() for value in (username, name, email, password)):
            raise ValidationError("All fields are required")

        if self.db.query(User).filter(User.email == email).first():
            raise ConflictError("An account with this email already exists.")
        if self.db.query(User).filter(User.username == username).first():
            raise ConflictError("This username is already taken.")

        # Exact, case-sensitive match against the configured addresses
        role = UserRole.ADMIN if email in self.settings.admin_emails else UserRole.EMPLOYEE

        user = User(
            username=username,
            name=name,
            email=email,
            hashed_password=hash_password(password, self.settings.bcrypt_rounds),
            role=role,
            avatar=generate_avatar(username),
        )
        self._save(user, "signup", conflict_message="An account with this email or username already exists.")
        logger.info(f"User {user.username} signed up with role {role.value}")
        return "Account created successfully!"

    def login(self, email: Optional[str], password: Optional[str]) -> Token:
        """Check credentials, mark the user Online and issue a session token"""
        user = self.db.query(User).filter(User.email == email).first() if email else None
        if not user or not password or not verify_password(password, user.hashed_password):
            logger.info("Rejected login attempt")
            raise AuthError(INVALID_CREDENTIALS)

        user.status = PresenceStatus.ONLINE
        self._save(user, "login")

        claims = UserClaims(id=user.id, role=user.role, name=user.name, avatar=user.avatar)
        token = create_access_token(
            data={"sub": str(user.id), **claims.model_dump(mode="json")},
            secret_key=self.settings.jwt_secret,
            algorithm=self.settings.jwt_algorithm,
        )
        logger.info(f"User {user.id} logged in")
        return Token(token=token, user=claims)

    def logout(self, user_id: int) -> str:
        """Mark the user Offline; safe to repeat"""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            logger.warning(f"Logout for unknown user {user_id}")
            return "Logged out successfully"

        if user.status != PresenceStatus.OFFLINE:
            user.status = PresenceStatus.OFFLINE
            self._save(user, "logout")
        logger.info(f"User {user_id} logged out")
        return "Logged out successfully"

    def verify(self, token: Optional[str]) -> UserClaims:
        """Return the claims carried by a session token"""
        if not token:
            raise AuthError("Authentication required.")
        try:
            payload = decode_access_token(token, self.settings.jwt_secret, self.settings.jwt_algorithm)
            return UserClaims(
                id=payload["id"],
                role=payload["role"],
                name=payload["name"],
                avatar=payload.get("avatar"),
            )
        except (JWTError, KeyError, ValueError):
            raise ForbiddenError("Invalid or expired token.")

    def seed_admins(self) -> int:
        """Create the configured admin accounts that do not exist yet"""
        created = 0
        for seed in self.settings.admin_seeds:
            if self._seed_admin(seed):
                created += 1
        return created

    def _seed_admin(self, seed: AdminSeed) -> bool:
        if self.db.query(User).filter(User.email == seed.email).first():
            return False
        if self.db.query(User).filter(User.username == seed.username).first():
            logger.warning(f"Cannot seed admin {seed.email}: username {seed.username} is taken")
            return False

        admin = User(
            name=seed.name,
            username=seed.username,
            email=seed.email,
            hashed_password=hash_password(seed.password, self.settings.bcrypt_rounds),
            role=UserRole.ADMIN,
            avatar=generate_avatar(seed.username),
        )
        self._save(admin, "admin seeding")
        logger.info(f"Admin user {seed.email} created.")
        return True

    def _save(self, user: User, action: str, conflict_message: Optional[str] = None):
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            self.db.rollback()
            if conflict_message is None:
                logger.exception(f"Database error during {action}")
                raise InternalError(f"Server error during {action}.")
            # A concurrent signup took the email or username after the checks above
            logger.info(f"Unique constraint hit during {action}")
            raise ConflictError(conflict_message)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Database error during {action}")
            raise InternalError(f"Server error during {action}.")
