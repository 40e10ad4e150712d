"""Protocol for QuizQuestion repository in learning context."""

from typing import Protocol

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion


class QuizQuestionRepositoryProtocol(Protocol):
    """Protocol for QuizQuestion repository operations in learning context."""

    def find_by_module(self, module_id: ModuleId) -> list[QuizQuestion]:
        """
        Get the generated questions of a module.

        Args:
            module_id: The module ID

        Returns:
            List of questions in generation order
        """
        ...

    def save(self, question: QuizQuestion) -> QuizQuestion:
        """
        Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            Saved question with store-generated values
        """
        ...

    def replace_for_module(
        self, module_id: ModuleId, questions: list[QuizQuestion]
    ) -> list[QuizQuestion]:
        """
        Replace every question of a module with a new set, atomically.

        Args:
            module_id: The module ID
            questions: Unsaved questions of that module

        Returns:
            Saved questions in input order, with their generated IDs
        """
        ...
