"""FastAPI glue for the dependency injection container."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lexitrack.core import container
from lexitrack.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Build a FastAPI dependency that resolves a container provider.

    The request-scoped session is bound to container.db only while the
    provider builds its object graph.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
