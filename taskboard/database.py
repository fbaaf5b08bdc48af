from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Engine and session factory for one application instance"""

    def __init__(self, database_url: str):
        kwargs = {}
        if "sqlite" in database_url.lower():
            kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory databases live in a single shared connection
            if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(database_url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self):
        # Import models so they are registered on Base
        from taskboard import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


# One session per request, closed when the request finishes
def get_db(request: Request):
    db: Session = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
