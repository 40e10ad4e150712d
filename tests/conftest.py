"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lexitrack import models  # noqa: E402
from lexitrack.core import container  # noqa: E402
from lexitrack.database import Base, get_db  # noqa: E402
from lexitrack.infrastructure.common.clock import FixedClock  # noqa: E402
from lexitrack.infrastructure.common.random_source import SeededRandomSource  # noqa: E402
from lexitrack.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# Fixed "now" for every API test
TEST_NOW = datetime(2024, 3, 15, 9, 30, tzinfo=UTC)
TEST_SEED = 1234

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session, fixed clock and seeded randomness."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.clock.override(providers.Object(FixedClock(TEST_NOW)))
    container.random_source.override(providers.Factory(SeededRandomSource, seed=TEST_SEED))
    container.quiz_session_registry().clear()

    with TestClient(app) as test_client:
        yield test_client

    container.quiz_session_registry().clear()
    container.random_source.reset_override()
    container.clock.reset_override()
    app.dependency_overrides.clear()


@pytest.fixture
def test_module(db_session: Session) -> models.Module:
    """Create an empty test module."""
    module = models.Module(
        title="Basics",
        description="Everyday words",
        level="A1",
        theme="everyday",
        order=1,
    )
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


@pytest.fixture
def second_module(db_session: Session) -> models.Module:
    """Create a second, later module."""
    module = models.Module(
        title="Travel",
        description="Getting around",
        level="A2",
        theme="travel",
        order=2,
    )
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


BASIC_PAIRS = [
    ("casa", "maison"),
    ("carro", "voiture"),
    ("livro", "livre"),
    ("agua", "eau"),
]


@pytest.fixture
def test_vocabulary(
    db_session: Session, test_module: models.Module
) -> list[models.VocabularyItem]:
    """Create four unlearned vocabulary items in the test module."""
    items = [
        models.VocabularyItem(
            module_id=test_module.id,
            source_text=source,
            target_text=target,
            examples=[],
        )
        for source, target in BASIC_PAIRS
    ]
    db_session.add_all(items)
    test_module.word_count = len(items)
    db_session.commit()
    for item in items:
        db_session.refresh(item)
    return items
