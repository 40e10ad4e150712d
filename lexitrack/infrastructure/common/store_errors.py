"""Translation of storage failures into application errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lexitrack.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


@contextmanager
def store_operation(db: Session, operation: str) -> Iterator[None]:
    """
    Run a block of repository work, rolling back and re-raising as
    StoreUnavailableError when the database fails.

    Args:
        db: The request-scoped session
        operation: Short name of the operation, used in the error message
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("store_operation_failed", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, str(e)) from e
