from .clock import ClockProtocol
from .module_repository import ModuleRepositoryProtocol
from .quiz_question_repository import QuizQuestionRepositoryProtocol
from .user_progress_repository import UserProgressRepositoryProtocol
from .vocabulary_repository import VocabularyRepositoryProtocol

__all__ = [
    "ClockProtocol",
    "ModuleRepositoryProtocol",
    "QuizQuestionRepositoryProtocol",
    "UserProgressRepositoryProtocol",
    "VocabularyRepositoryProtocol",
]
