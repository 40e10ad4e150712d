"""
Quiz session state machine.

A session walks through a module's questions once:

    InProgress(current_index, score, correct_count, incorrect_count)
        --answer()-->  same question, marked answered
        --advance()--> next question, or Completed on the last one
    Completed(score, correct_count, incorrect_count)

restart() returns to InProgress(0, 0, 0, 0) with the same questions.
Sessions are transient; only the answered questions are persisted.
"""

from dataclasses import dataclass, field

from lexitrack.domain.common.exceptions import QuizSessionError, ValidationError
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion

DEFAULT_POINTS_PER_CORRECT = 10
DEFAULT_PASS_PERCENTAGE = 70


@dataclass(frozen=True)
class AnswerResult:
    """Outcome of answering the current question."""

    question: QuizQuestion
    correct: bool
    correct_answer: str
    score: int


@dataclass
class QuizSession:
    """One attempt at a module quiz."""

    questions: list[QuizQuestion]
    points_per_correct: int = DEFAULT_POINTS_PER_CORRECT
    current_index: int = 0
    score: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    completed: bool = False
    current_answered: bool = field(default=False)

    def __post_init__(self) -> None:
        if not self.questions:
            raise ValidationError("A quiz session needs at least one question", field="questions")
        if self.points_per_correct <= 0:
            raise ValidationError(
                "Points per correct answer must be positive",
                field="points_per_correct",
                value=self.points_per_correct,
            )

    @classmethod
    def start(
        cls,
        questions: list[QuizQuestion],
        points_per_correct: int = DEFAULT_POINTS_PER_CORRECT,
    ) -> "QuizSession":
        """Begin a fresh attempt over the given questions."""
        return cls(questions=list(questions), points_per_correct=points_per_correct)

    @classmethod
    def resume(
        cls,
        questions: list[QuizQuestion],
        points_per_correct: int = DEFAULT_POINTS_PER_CORRECT,
    ) -> "QuizSession":
        """
        Rebuild an interrupted attempt from persisted answers.

        Counters are recomputed from the questions' given answers. The
        cursor lands on the question after the last answered one, or stays
        on the last question (already answered) when every question up to
        the end has an answer.
        """
        session = cls.start(questions, points_per_correct)
        answered = [i for i, question in enumerate(session.questions) if question.answered]
        if not answered:
            return session

        for index in answered:
            if session.questions[index].completed:
                session.correct_count += 1
            else:
                session.incorrect_count += 1
        session.score = session.correct_count * points_per_correct

        last = answered[-1]
        if last < len(session.questions) - 1:
            session.current_index = last + 1
        else:
            session.current_index = last
            session.current_answered = True
        return session

    @property
    def current_question(self) -> QuizQuestion:
        return self.questions[self.current_index]

    @property
    def max_score(self) -> int:
        return len(self.questions) * self.points_per_correct

    @property
    def percentage(self) -> int:
        """Share of the maximum score reached, rounded half up."""
        return (200 * self.score + self.max_score) // (2 * self.max_score)

    def is_passed(self, pass_percentage: int = DEFAULT_PASS_PERCENTAGE) -> bool:
        return self.completed and self.percentage >= pass_percentage

    def answer(self, selected: str) -> AnswerResult:
        """
        Answer the current question.

        Args:
            selected: The chosen option or typed answer

        Returns:
            AnswerResult with correctness and the updated score

        Raises:
            QuizSessionError: If the session is completed or the current
                question was already answered
        """
        if self.completed:
            raise QuizSessionError("answer_after_completion", "The quiz is already completed")
        if self.current_answered:
            raise QuizSessionError(
                "answer_once_per_question", "The current question was already answered"
            )

        question = self.current_question
        correct = question.record_answer(selected)
        if correct:
            self.correct_count += 1
            self.score += self.points_per_correct
        else:
            self.incorrect_count += 1
        self.current_answered = True

        return AnswerResult(
            question=question,
            correct=correct,
            correct_answer=question.correct_answer,
            score=self.score,
        )

    def advance(self) -> bool:
        """
        Move to the next question, completing the session after the last one.

        Returns:
            True if a next question is now current, False if the session
            completed

        Raises:
            QuizSessionError: If the session is already completed
        """
        if self.completed:
            raise QuizSessionError("advance_after_completion", "The quiz is already completed")
        if self.current_index < len(self.questions) - 1:
            self.current_index += 1
            self.current_answered = False
            return True
        self.completed = True
        return False

    def restart(self) -> None:
        """Start over with the same questions."""
        for question in self.questions:
            question.clear_answer()
        self.current_index = 0
        self.score = 0
        self.correct_count = 0
        self.incorrect_count = 0
        self.completed = False
        self.current_answered = False
