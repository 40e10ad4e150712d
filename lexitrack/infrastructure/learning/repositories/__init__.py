from .module_repository import ModuleRepository
from .quiz_question_repository import QuizQuestionRepository
from .user_progress_repository import UserProgressRepository
from .vocabulary_repository import VocabularyRepository

__all__ = [
    "ModuleRepository",
    "QuizQuestionRepository",
    "UserProgressRepository",
    "VocabularyRepository",
]
