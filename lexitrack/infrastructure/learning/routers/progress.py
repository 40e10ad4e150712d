"""API routes for learner progress and the dashboard."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from lexitrack.application.learning.use_cases.progress_use_case import ProgressUseCase
from lexitrack.core import container
from lexitrack.domain.common.exceptions import DomainError
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.common.di import inject_use_case
from lexitrack.infrastructure.learning.schemas import (
    CurrentModuleRequest,
    DashboardResponse,
    StudySessionRequest,
    UserProgress,
    UserProgressResponse,
)
from lexitrack.infrastructure.learning.schemas.builders import (
    build_module_schema,
    build_user_progress_schema,
    build_vocabulary_list,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["progress"])


@router.get("/progress", response_model=UserProgress, status_code=status.HTTP_200_OK)
def get_progress(
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> UserProgress:
    """Get the learner's progress record, creating it on first access."""
    try:
        return build_user_progress_schema(use_case.get_progress())
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/progress/study-session", response_model=UserProgressResponse, status_code=status.HTTP_200_OK
)
def record_study_session(
    request: StudySessionRequest,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> UserProgressResponse:
    """
    Record a study session.

    Extends the streak when the previous session was yesterday and adds
    the minutes to the total study time.
    """
    try:
        progress = use_case.record_study_session(minutes=request.minutes)
        return UserProgressResponse(
            success=True,
            message="Study session recorded",
            progress=build_user_progress_schema(progress),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to record study session: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/progress/current-module", response_model=UserProgressResponse, status_code=status.HTTP_200_OK
)
def set_current_module(
    request: CurrentModuleRequest,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> UserProgressResponse:
    """Set or clear the module the learner is working on."""
    try:
        progress = use_case.set_current_module(request.module_id)
        return UserProgressResponse(
            success=True,
            message="Current module updated",
            progress=build_user_progress_schema(progress),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to set current module: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/progress/reconcile", response_model=UserProgressResponse, status_code=status.HTTP_200_OK
)
def reconcile_progress(
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> UserProgressResponse:
    """Recompute the total of learned words from vocabulary state."""
    try:
        progress = use_case.reconcile_totals()
        return UserProgressResponse(
            success=True,
            message="Progress reconciled",
            progress=build_user_progress_schema(progress),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to reconcile progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/dashboard", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> DashboardResponse:
    """
    Learner overview.

    Returns totals and streak, overall and goal percentages, the next
    module to study and the head of the review queue.
    """
    try:
        dashboard = use_case.dashboard()
        return DashboardResponse(
            progress=build_user_progress_schema(dashboard.progress),
            overall_progress=dashboard.overall_progress,
            learning_goal_percentage=dashboard.learning_goal_percentage,
            next_module=(
                build_module_schema(dashboard.next_module) if dashboard.next_module else None
            ),
            review_queue=build_vocabulary_list(dashboard.review_queue),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build dashboard: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
