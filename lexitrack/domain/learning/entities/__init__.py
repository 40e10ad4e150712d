from .module import Module
from .quiz_question import (
    AUDIO,
    FILL_IN_BLANK,
    MULTIPLE_CHOICE,
    QuizQuestion,
    QuizQuestionType,
)
from .quiz_session import AnswerResult, QuizSession
from .user_progress import UserProgress
from .vocabulary_item import VocabularyItem

__all__ = [
    "AUDIO",
    "FILL_IN_BLANK",
    "MULTIPLE_CHOICE",
    "AnswerResult",
    "Module",
    "QuizQuestion",
    "QuizQuestionType",
    "QuizSession",
    "UserProgress",
    "VocabularyItem",
]
