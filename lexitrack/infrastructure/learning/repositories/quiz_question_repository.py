"""Repository for QuizQuestion domain entities."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion
from lexitrack.exceptions import NotFoundError
from lexitrack.infrastructure.common.store_errors import store_operation
from lexitrack.infrastructure.learning.mappers.quiz_question_mapper import QuizQuestionMapper
from lexitrack.models import QuizQuestion as QuizQuestionORM


class QuizQuestionRepository:
    """Repository for QuizQuestion domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuizQuestionMapper()

    def find_by_module(self, module_id: ModuleId) -> list[QuizQuestion]:
        """
        Get the generated questions of a module.

        Args:
            module_id: The module ID

        Returns:
            List of questions in generation order
        """
        stmt = (
            select(QuizQuestionORM)
            .where(QuizQuestionORM.module_id == module_id.value)
            .order_by(QuizQuestionORM.id)
        )
        with store_operation(self.db, "list_quiz_questions"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, question: QuizQuestion) -> QuizQuestion:
        """
        Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            Saved question with database-generated values
        """
        with store_operation(self.db, "save_quiz_question"):
            if question.id.value == 0:
                orm_model = self.mapper.to_orm(question)
                self.db.add(orm_model)
            else:
                existing = self.db.get(QuizQuestionORM, question.id.value)
                if not existing:
                    raise NotFoundError(f"Quiz question with id {question.id.value} not found")
                orm_model = self.mapper.to_orm(question, existing)
            self.db.commit()
            self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def replace_for_module(
        self, module_id: ModuleId, questions: list[QuizQuestion]
    ) -> list[QuizQuestion]:
        """
        Replace every question of a module with a new set in one transaction.

        If the insert fails the delete is rolled back with it, so the
        previous questions stay in place.

        Args:
            module_id: The module ID
            questions: Unsaved questions of that module

        Returns:
            Saved questions in input order, with their generated IDs
        """
        stmt = delete(QuizQuestionORM).where(QuizQuestionORM.module_id == module_id.value)
        orm_models = [self.mapper.to_orm(question) for question in questions]
        with store_operation(self.db, "replace_quiz"):
            self.db.execute(stmt)
            self.db.add_all(orm_models)
            self.db.commit()
            for orm_model in orm_models:
                self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]
