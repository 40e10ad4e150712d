"""Mapper for QuizQuestion ORM ↔ Domain conversion."""

from typing import cast

from lexitrack.domain.common.value_objects import ModuleId, QuizQuestionId
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion, QuizQuestionType
from lexitrack.models import QuizQuestion as QuizQuestionORM


class QuizQuestionMapper:
    """Mapper for QuizQuestion ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuizQuestionORM) -> QuizQuestion:
        """Convert ORM model to domain entity."""
        return QuizQuestion.create_with_id(
            id=QuizQuestionId(orm_model.id),
            module_id=ModuleId(orm_model.module_id),
            type=cast(QuizQuestionType, orm_model.type),
            prompt=orm_model.prompt,
            correct_answer=orm_model.correct_answer,
            options=orm_model.options,
            completed=orm_model.completed,
            given_answer=orm_model.given_answer,
        )

    def to_orm(
        self, domain_entity: QuizQuestion, orm_model: QuizQuestionORM | None = None
    ) -> QuizQuestionORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the answer state changes after generation
            orm_model.completed = domain_entity.completed
            orm_model.given_answer = domain_entity.given_answer
            return orm_model

        # Create new
        return QuizQuestionORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            module_id=domain_entity.module_id.value,
            type=domain_entity.type,
            prompt=domain_entity.prompt,
            options=list(domain_entity.options) if domain_entity.options is not None else None,
            correct_answer=domain_entity.correct_answer,
            completed=domain_entity.completed,
            given_answer=domain_entity.given_answer,
        )
