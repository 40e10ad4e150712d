"""API routes for module quizzes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from lexitrack.application.learning.use_cases.quiz_use_case import QuizUseCase
from lexitrack.core import container
from lexitrack.domain.common.exceptions import DomainError
from lexitrack.exceptions import LexitrackError
from lexitrack.infrastructure.common.di import inject_use_case
from lexitrack.infrastructure.learning.schemas import (
    QuizAdvanceResponse,
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizSession,
    QuizSessionResponse,
)
from lexitrack.infrastructure.learning.schemas.builders import (
    build_module_schema,
    build_quiz_session_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/modules/{module_id}/quiz", tags=["quiz"])


@router.post("", response_model=QuizSessionResponse, status_code=status.HTTP_201_CREATED)
def generate_quiz(
    module_id: int,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """
    Generate a new quiz for a module, replacing the previous one.

    Args:
        module_id: ID of the module
        use_case: QuizUseCase injected via dependency container

    Returns:
        The fresh session positioned on the first question

    Raises:
        HTTPException: 404 if the module does not exist, 422 if it has
            fewer than four vocabulary items
    """
    try:
        use_case.generate_quiz(module_id)
        session = use_case.get_session(module_id)
        return QuizSessionResponse(
            success=True,
            message="Quiz generated successfully",
            session=build_quiz_session_schema(module_id, session, use_case.pass_percentage),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to generate quiz for module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=QuizSession, status_code=status.HTTP_200_OK)
def get_quiz(
    module_id: int,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSession:
    """Get the current quiz session, resumed from saved answers when needed."""
    try:
        session = use_case.get_session(module_id)
        return build_quiz_session_schema(module_id, session, use_case.pass_percentage)
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get quiz for module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/answer", response_model=QuizAnswerResponse, status_code=status.HTTP_200_OK)
def answer_question(
    module_id: int,
    request: QuizAnswerRequest,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizAnswerResponse:
    """
    Answer the current question.

    Raises:
        HTTPException: 409 if the question was already answered or the
            quiz is completed
    """
    try:
        outcome = use_case.answer(
            module_id, answer=request.answer, question_id=request.question_id
        )
        return QuizAnswerResponse(
            correct=outcome.result.correct,
            correct_answer=outcome.result.correct_answer,
            score=outcome.result.score,
            session=build_quiz_session_schema(
                module_id, outcome.session, use_case.pass_percentage
            ),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to answer quiz question in module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/advance", response_model=QuizAdvanceResponse, status_code=status.HTTP_200_OK)
def advance_quiz(
    module_id: int,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizAdvanceResponse:
    """
    Move to the next question, or complete the quiz after the last one.

    A completed quiz at or above the pass mark completes the module.
    """
    try:
        outcome = use_case.advance(module_id)
        return QuizAdvanceResponse(
            session=build_quiz_session_schema(
                module_id, outcome.session, use_case.pass_percentage
            ),
            passed=outcome.passed,
            module=build_module_schema(outcome.module) if outcome.module else None,
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to advance quiz in module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/restart", response_model=QuizSessionResponse, status_code=status.HTTP_200_OK)
def restart_quiz(
    module_id: int,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """Start a new attempt over the same questions."""
    try:
        session = use_case.restart(module_id)
        return QuizSessionResponse(
            success=True,
            message="Quiz restarted",
            session=build_quiz_session_schema(module_id, session, use_case.pass_percentage),
        )
    except (LexitrackError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to restart quiz in module {module_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
