from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging

from taskboard.config import SecurityConfig, Settings
from taskboard.database import Database
from taskboard.routers import admin, auth, tasks
from taskboard.bootstrap import seed_database
from taskboard.utils.errors import (
    TaskboardError,
    database_exception_handler,
    taskboard_exception_handler,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Taskboard API...")
    seed_database(app.state.database, app.state.settings)
    yield
    logger.info("Shutting down Taskboard API...")
    app.state.database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application around one explicit settings object"""
    settings = settings or Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    app = FastAPI(title="Taskboard API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database(settings.database_url)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SecurityConfig.get_security_headers().items():
            response.headers.setdefault(header, value)
        return response

    app.add_exception_handler(TaskboardError, taskboard_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    # Route registration
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
