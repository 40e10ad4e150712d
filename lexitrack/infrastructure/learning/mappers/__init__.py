from .module_mapper import ModuleMapper
from .quiz_question_mapper import QuizQuestionMapper
from .user_progress_mapper import UserProgressMapper
from .vocabulary_item_mapper import VocabularyItemMapper

__all__ = [
    "ModuleMapper",
    "QuizQuestionMapper",
    "UserProgressMapper",
    "VocabularyItemMapper",
]
