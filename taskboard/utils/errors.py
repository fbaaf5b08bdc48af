# taskboard/utils/errors.py
"""
Service-level error taxonomy.

Services raise these; the API layer turns them into ``{"message": ...}``
responses with the matching status code.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class TaskboardError(Exception):
    """Base class for errors that map to an HTTP status"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class AuthError(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."


class ForbiddenError(TaskboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden."


class NotFoundError(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class ConflictError(TaskboardError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict."


class InternalError(TaskboardError):
    pass


async def taskboard_exception_handler(request: Request, exc: TaskboardError):
    """Map a service error to its status code and message"""
    headers = None
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request body validation failures are client errors"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request."
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store failures are logged and reported generically"""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": InternalError.default_message},
    )
