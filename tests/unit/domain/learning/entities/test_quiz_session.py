"""Tests for the QuizSession state machine."""

import pytest

from lexitrack.domain.common.exceptions import QuizSessionError, ValidationError
from lexitrack.domain.common.value_objects import ModuleId, QuizQuestionId
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion
from lexitrack.domain.learning.entities.quiz_session import QuizSession


def _mc(id: int, correct: str = "maison") -> QuizQuestion:
    return QuizQuestion.create_with_id(
        id=QuizQuestionId(id),
        module_id=ModuleId(1),
        type="multiple-choice",
        prompt="Translate: casa",
        correct_answer=correct,
        options=["eau", correct, "livre", "voiture"],
        completed=False,
        given_answer=None,
    )


def _typed(id: int, correct: str = "casa") -> QuizQuestion:
    return QuizQuestion.create_with_id(
        id=QuizQuestionId(id),
        module_id=ModuleId(1),
        type="fill-in-blank",
        prompt="Complete: ___ (maison)",
        correct_answer=correct,
        options=None,
        completed=False,
        given_answer=None,
    )


def _questions(count: int) -> list[QuizQuestion]:
    return [_mc(i) for i in range(1, count + 1)]


class TestStart:
    def test_empty_question_list_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QuizSession.start([])

    def test_starts_in_progress_at_zero(self) -> None:
        session = QuizSession.start(_questions(3))
        assert session.current_index == 0
        assert session.score == 0
        assert session.completed is False
        assert session.max_score == 30


class TestAnswer:
    def test_correct_answer_scores_ten_points(self) -> None:
        session = QuizSession.start(_questions(2))
        result = session.answer("maison")
        assert result.correct is True
        assert result.score == 10
        assert session.correct_count == 1
        assert session.current_question.completed is True
        assert session.current_question.given_answer == "maison"

    def test_wrong_answer_counts_incorrect(self) -> None:
        session = QuizSession.start(_questions(2))
        result = session.answer("eau")
        assert result.correct is False
        assert result.correct_answer == "maison"
        assert session.incorrect_count == 1
        assert session.score == 0

    def test_multiple_choice_is_case_sensitive(self) -> None:
        session = QuizSession.start(_questions(1))
        assert session.answer("Maison").correct is False

    def test_typed_answer_ignores_case_and_whitespace(self) -> None:
        session = QuizSession.start([_typed(1)])
        assert session.answer("  CASA ").correct is True

    def test_second_answer_to_same_question_is_rejected(self) -> None:
        session = QuizSession.start(_questions(2))
        session.answer("maison")
        with pytest.raises(QuizSessionError):
            session.answer("eau")
        assert session.score == 10

    def test_answer_after_completion_is_rejected(self) -> None:
        session = QuizSession.start(_questions(1))
        session.answer("maison")
        session.advance()
        with pytest.raises(QuizSessionError):
            session.answer("maison")


class TestAdvance:
    def test_moves_to_next_question(self) -> None:
        session = QuizSession.start(_questions(2))
        session.answer("maison")
        assert session.advance() is True
        assert session.current_index == 1
        assert session.current_answered is False

    def test_last_question_completes_session(self) -> None:
        session = QuizSession.start(_questions(2))
        session.advance()
        assert session.advance() is False
        assert session.completed is True

    def test_skipped_question_counts_neither_way(self) -> None:
        session = QuizSession.start(_questions(2))
        session.advance()
        session.answer("maison")
        session.advance()
        assert session.correct_count == 1
        assert session.incorrect_count == 0
        assert session.percentage == 50

    def test_advance_after_completion_is_rejected(self) -> None:
        session = QuizSession.start(_questions(1))
        session.advance()
        with pytest.raises(QuizSessionError):
            session.advance()


class TestPassing:
    def _play(self, correct: int, total: int) -> QuizSession:
        session = QuizSession.start(_questions(total))
        for index in range(total):
            session.answer("maison" if index < correct else "eau")
            session.advance()
        return session

    def test_seven_of_ten_passes(self) -> None:
        session = self._play(7, 10)
        assert session.percentage == 70
        assert session.is_passed() is True

    def test_six_of_ten_fails(self) -> None:
        session = self._play(6, 10)
        assert session.percentage == 60
        assert session.is_passed() is False

    def test_two_of_three_rounds_to_67_and_fails(self) -> None:
        session = self._play(2, 3)
        assert session.percentage == 67
        assert session.is_passed(70) is False

    def test_not_passed_before_completion(self) -> None:
        session = QuizSession.start(_questions(1))
        session.answer("maison")
        assert session.is_passed() is False


class TestRestart:
    def test_restart_resets_counters_and_answers(self) -> None:
        session = QuizSession.start(_questions(2))
        session.answer("maison")
        session.advance()
        session.answer("eau")
        session.advance()

        session.restart()

        assert session.completed is False
        assert session.current_index == 0
        assert session.score == 0
        assert session.correct_count == 0
        assert session.incorrect_count == 0
        assert not any(question.answered for question in session.questions)


class TestResume:
    def test_no_answers_resumes_at_start(self) -> None:
        session = QuizSession.resume(_questions(3))
        assert session.current_index == 0
        assert session.current_answered is False

    def test_resumes_after_last_answered_question(self) -> None:
        questions = _questions(4)
        questions[0].record_answer("maison")
        questions[1].record_answer("eau")
        session = QuizSession.resume(questions)
        assert session.current_index == 2
        assert session.correct_count == 1
        assert session.incorrect_count == 1
        assert session.score == 10

    def test_fully_answered_quiz_waits_on_last_question(self) -> None:
        questions = _questions(2)
        for question in questions:
            question.record_answer("maison")
        session = QuizSession.resume(questions)
        assert session.current_index == 1
        assert session.current_answered is True
        assert session.advance() is False
        assert session.is_passed() is True
