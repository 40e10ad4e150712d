from .progress_projection_service import ProgressProjectionService
from .quiz_session_registry import QuizSessionRegistry
from .user_progress_service import UserProgressService

__all__ = [
    "ProgressProjectionService",
    "QuizSessionRegistry",
    "UserProgressService",
]
