"""API routes for the review queue."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lexitrack.application.learning.use_cases.review_use_case import ReviewUseCase
from lexitrack.core import container
from lexitrack.domain.common.exceptions import DomainError
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.common.di import inject_use_case
from lexitrack.infrastructure.learning.schemas import ReviewQueueResponse
from lexitrack.infrastructure.learning.schemas.builders import build_vocabulary_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review", tags=["review"])


@router.get("/queue", response_model=ReviewQueueResponse, status_code=status.HTTP_200_OK)
def get_review_queue(
    limit: int | None = Query(None, ge=0, description="Queue length; server default if omitted"),
    full: bool = Query(False, description="Return every learned word"),
    use_case: ReviewUseCase = Depends(inject_use_case(container.review_use_case)),
) -> ReviewQueueResponse:
    """
    Learned words ordered for review: never-reviewed first, then oldest review first.

    Args:
        limit: Maximum number of words
        full: Ignore the limit and return the whole queue
        use_case: ReviewUseCase injected via dependency container
    """
    try:
        items = use_case.review_queue(limit=limit, full=full)
        return ReviewQueueResponse(items=build_vocabulary_list(items), total=len(items))
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build review queue: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
