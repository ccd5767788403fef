"""
Database setup for the FastAPI backend.
Provides SQLAlchemy engine/session utilities for the catalog store.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from settings import settings


Base = declarative_base()


def make_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Create an engine; SQLite URLs get thread-sharing enabled."""
    connect_args = kwargs.pop("connect_args", {})
    if url.startswith("sqlite"):
        # check_same_thread=False allows usage across FastAPI threads
        connect_args.setdefault("check_same_thread", False)
    return create_engine(url, echo=echo, connect_args=connect_args, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    """Create tables if they don't exist."""
    from repositories import models  # noqa: F401  Ensures models are registered

    Base.metadata.create_all(bind=bind or engine)

