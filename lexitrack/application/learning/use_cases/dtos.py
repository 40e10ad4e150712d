"""DTOs passed between learning routers and use cases."""

from dataclasses import dataclass, field

from lexitrack.domain.learning.entities.module import Module
from lexitrack.domain.learning.entities.quiz_session import AnswerResult, QuizSession
from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem


@dataclass(frozen=True)
class NewVocabularyItem:
    """Input for importing one vocabulary item."""

    module_id: int
    source_text: str
    target_text: str
    difficulty: int | None = None
    examples: list[str] = field(default_factory=list)
    audio_url: str | None = None


@dataclass
class Dashboard:
    """Learner overview shown on the start page."""

    progress: UserProgress
    overall_progress: int
    learning_goal_percentage: int
    next_module: Module | None
    review_queue: list[VocabularyItem]


@dataclass
class QuizAnswerOutcome:
    """Result of answering a question, with the session state after it."""

    result: AnswerResult
    session: QuizSession


@dataclass
class QuizAdvanceOutcome:
    """Session state after advancing; module is set once the quiz completed."""

    session: QuizSession
    passed: bool
    module: Module | None = None
