"""
Database configuration and session management for SQLAlchemy.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Declarative Base
Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    """
    Creates an engine for the given URL.

    In-memory SQLite URLs share a single connection so every session sees the
    same database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
    )


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


# Import all models to register them with the Base metadata
import calmmind.auth.models  # noqa: F401,E402
import calmmind.journals.models  # noqa: F401,E402
