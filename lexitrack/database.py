"""SQLite engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lexitrack.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by the lexitrack tables."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Open the store named by DATABASE_URL and build the session factory."""
    global _engine, _session_factory  # noqa: PLW0603

    # One shared connection; request handlers run in FastAPI's threadpool.
    _engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def create_tables() -> None:
    """Create the modules, vocabulary, quiz and progress tables if missing."""
    from lexitrack import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=get_engine())


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Store is not open. Call initialize_database() first.")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Return the session factory, opening the store on first use."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Store could not be opened.")
    return _session_factory


def dispose_engine() -> None:
    """Close the store connection; called from the app lifespan on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


DatabaseSession = Annotated[Session, Depends(get_db)]
