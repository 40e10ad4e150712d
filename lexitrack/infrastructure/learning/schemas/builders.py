"""Construction of response schemas from learning domain entities."""

from lexitrack.domain.learning.entities.module import Module as ModuleEntity
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion as QuizQuestionEntity
from lexitrack.domain.learning.entities.quiz_session import QuizSession as QuizSessionEntity
from lexitrack.domain.learning.entities.user_progress import UserProgress as UserProgressEntity
from lexitrack.domain.learning.entities.vocabulary_item import (
    VocabularyItem as VocabularyItemEntity,
)
from lexitrack.infrastructure.learning.schemas.module_schemas import Module
from lexitrack.infrastructure.learning.schemas.progress_schemas import UserProgress
from lexitrack.infrastructure.learning.schemas.quiz_schemas import QuizQuestion, QuizSession
from lexitrack.infrastructure.learning.schemas.vocabulary_schemas import VocabularyItem


def build_module_schema(module: ModuleEntity) -> Module:
    return Module(
        id=module.id.value,
        title=module.title,
        description=module.description,
        level=module.level,
        theme=module.theme,
        order=module.order,
        completed=module.completed,
        progress=module.progress,
        word_count=module.word_count,
    )


def build_vocabulary_item_schema(item: VocabularyItemEntity) -> VocabularyItem:
    return VocabularyItem(
        id=item.id.value,
        module_id=item.module_id.value,
        source_text=item.source_text,
        target_text=item.target_text,
        learned=item.learned,
        review_count=item.review_count,
        last_reviewed_at=item.last_reviewed_at,
        difficulty=item.difficulty,
        examples=list(item.examples),
        audio_url=item.audio_url,
        next_review_at=item.next_review_at,
    )


def build_vocabulary_list(items: list[VocabularyItemEntity]) -> list[VocabularyItem]:
    return [build_vocabulary_item_schema(item) for item in items]


def build_user_progress_schema(progress: UserProgressEntity) -> UserProgress:
    return UserProgress(
        id=progress.id.value,
        total_learned=progress.total_learned,
        total_reviewed=progress.total_reviewed,
        last_study_date=progress.last_study_date,
        total_study_time=progress.total_study_time,
        streak_days=progress.streak_days,
        current_module_id=progress.current_module_id.value if progress.current_module_id else None,
    )


def build_quiz_question_schema(question: QuizQuestionEntity) -> QuizQuestion:
    """Build a question schema, hiding the answer until the question is answered."""
    return QuizQuestion(
        id=question.id.value,
        module_id=question.module_id.value,
        type=question.type,
        prompt=question.prompt,
        options=list(question.options) if question.options is not None else None,
        answered=question.answered,
        completed=question.completed,
        given_answer=question.given_answer,
        correct_answer=question.correct_answer if question.answered else None,
    )


def build_quiz_session_schema(
    module_id: int, session: QuizSessionEntity, pass_percentage: int
) -> QuizSession:
    questions = [build_quiz_question_schema(question) for question in session.questions]
    return QuizSession(
        module_id=module_id,
        questions=questions,
        current_index=session.current_index,
        current_question=questions[session.current_index],
        current_answered=session.current_answered,
        score=session.score,
        max_score=session.max_score,
        correct_count=session.correct_count,
        incorrect_count=session.incorrect_count,
        completed=session.completed,
        percentage=session.percentage,
        passed=session.is_passed(pass_percentage),
        pass_percentage=pass_percentage,
    )
