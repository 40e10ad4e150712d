from .module_use_case import ModuleUseCase
from .progress_use_case import ProgressUseCase
from .quiz_use_case import QuizUseCase
from .review_use_case import ReviewUseCase
from .vocabulary_use_case import VocabularyUseCase

__all__ = [
    "ModuleUseCase",
    "ProgressUseCase",
    "QuizUseCase",
    "ReviewUseCase",
    "VocabularyUseCase",
]
