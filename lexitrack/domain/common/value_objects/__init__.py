from .ids import ModuleId, QuizQuestionId, UserProgressId, VocabularyItemId

__all__ = [
    "ModuleId",
    "QuizQuestionId",
    "UserProgressId",
    "VocabularyItemId",
]
