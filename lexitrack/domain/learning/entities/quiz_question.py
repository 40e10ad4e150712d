"""
QuizQuestion entity.
"""

from dataclasses import dataclass
from typing import Literal

from lexitrack.domain.common.entity import Entity
from lexitrack.domain.common.exceptions import ValidationError
from lexitrack.domain.common.value_objects import ModuleId, QuizQuestionId

QuizQuestionType = Literal["multiple-choice", "fill-in-blank", "audio"]

MULTIPLE_CHOICE: QuizQuestionType = "multiple-choice"
FILL_IN_BLANK: QuizQuestionType = "fill-in-blank"
AUDIO: QuizQuestionType = "audio"


@dataclass
class QuizQuestion(Entity[QuizQuestionId]):
    """
    A generated assessment item.

    Business Rules:
    - Prompt and correct answer cannot be empty
    - Only multiple-choice questions carry options, and those options
      contain the correct answer
    - completed is true once the question has been answered correctly
    - given_answer keeps the learner's last answer so an interrupted
      session can be resumed
    """

    id: QuizQuestionId
    module_id: ModuleId
    type: QuizQuestionType
    prompt: str
    correct_answer: str
    options: list[str] | None = None
    completed: bool = False
    given_answer: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.prompt or not self.prompt.strip():
            raise ValidationError("Prompt cannot be empty", field="prompt")
        if not self.correct_answer or not self.correct_answer.strip():
            raise ValidationError("Correct answer cannot be empty", field="correct_answer")
        if self.type == MULTIPLE_CHOICE:
            if not self.options or self.correct_answer not in self.options:
                raise ValidationError(
                    "Multiple-choice options must include the correct answer", field="options"
                )
        elif self.options is not None:
            raise ValidationError(
                f"{self.type} questions do not take options", field="options", value=self.options
            )

    @property
    def answered(self) -> bool:
        return self.given_answer is not None

    def is_correct(self, answer: str) -> bool:
        """
        Check an answer against the correct one.

        Multiple-choice answers are picked from the options and must match
        exactly. Typed answers (fill-in-blank, audio) ignore surrounding
        whitespace and case.
        """
        if self.type == MULTIPLE_CHOICE:
            return answer == self.correct_answer
        return answer.strip().casefold() == self.correct_answer.strip().casefold()

    def record_answer(self, answer: str) -> bool:
        """Store the learner's answer and return whether it was correct."""
        correct = self.is_correct(answer)
        self.given_answer = answer
        self.completed = correct
        return correct

    def clear_answer(self) -> None:
        self.given_answer = None
        self.completed = False

    @classmethod
    def create(
        cls,
        module_id: ModuleId,
        type: QuizQuestionType,
        prompt: str,
        correct_answer: str,
        options: list[str] | None = None,
    ) -> "QuizQuestion":
        """Create a new question (ID will be 0 until persisted)."""
        return cls(
            id=QuizQuestionId.generate(),
            module_id=module_id,
            type=type,
            prompt=prompt,
            correct_answer=correct_answer,
            options=list(options) if options is not None else None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: QuizQuestionId,
        module_id: ModuleId,
        type: QuizQuestionType,
        prompt: str,
        correct_answer: str,
        options: list[str] | None,
        completed: bool,
        given_answer: str | None,
    ) -> "QuizQuestion":
        """Reconstitute a question from persistence."""
        return cls(
            id=id,
            module_id=module_id,
            type=type,
            prompt=prompt,
            correct_answer=correct_answer,
            options=list(options) if options is not None else None,
            completed=completed,
            given_answer=given_answer,
        )
