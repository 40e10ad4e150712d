"""Learning context schemas."""

from lexitrack.infrastructure.learning.schemas.module_schemas import (
    Module,
    ModuleBase,
    ModuleCreateRequest,
    ModuleLevelGroup,
    ModuleResponse,
    ModulesByLevelResponse,
    ModulesListResponse,
)
from lexitrack.infrastructure.learning.schemas.progress_schemas import (
    CurrentModuleRequest,
    DashboardResponse,
    FlashcardDeckResponse,
    ReviewQueueResponse,
    StudySessionRequest,
    UserProgress,
    UserProgressResponse,
)
from lexitrack.infrastructure.learning.schemas.quiz_schemas import (
    QuizAdvanceResponse,
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizQuestion,
    QuizSession,
    QuizSessionResponse,
)
from lexitrack.infrastructure.learning.schemas.vocabulary_schemas import (
    VocabularyBulkImportRequest,
    VocabularyBulkImportResponse,
    VocabularyItem,
    VocabularyItemBase,
    VocabularyItemCreateRequest,
    VocabularyItemResponse,
    VocabularyItemUpdateRequest,
    VocabularyListResponse,
    VocabularyReviewRequest,
)

__all__ = [
    "CurrentModuleRequest",
    "DashboardResponse",
    "FlashcardDeckResponse",
    "Module",
    "ModuleBase",
    "ModuleCreateRequest",
    "ModuleLevelGroup",
    "ModuleResponse",
    "ModulesByLevelResponse",
    "ModulesListResponse",
    "QuizAdvanceResponse",
    "QuizAnswerRequest",
    "QuizAnswerResponse",
    "QuizQuestion",
    "QuizSession",
    "QuizSessionResponse",
    "ReviewQueueResponse",
    "StudySessionRequest",
    "UserProgress",
    "UserProgressResponse",
    "VocabularyBulkImportRequest",
    "VocabularyBulkImportResponse",
    "VocabularyItem",
    "VocabularyItemBase",
    "VocabularyItemCreateRequest",
    "VocabularyItemResponse",
    "VocabularyItemUpdateRequest",
    "VocabularyListResponse",
    "VocabularyReviewRequest",
]
