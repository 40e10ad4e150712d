"""Tests for quiz API endpoints."""

from typing import Any

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexitrack import models
from lexitrack.core import container

TARGET_BY_SOURCE = {
    "casa": "maison",
    "carro": "voiture",
    "livro": "livre",
    "agua": "eau",
}
SOURCE_BY_TARGET = {target: source for source, target in TARGET_BY_SOURCE.items()}


def _correct_answer(question: dict[str, Any]) -> str:
    """Work out the expected answer from the prompt of a generated question."""
    prompt = question["prompt"]
    if question["type"] == "multiple-choice":
        return TARGET_BY_SOURCE[prompt.removeprefix("Translate: ")]
    if question["type"] == "fill-in-blank":
        return SOURCE_BY_TARGET[prompt.removeprefix("Complete: ___ (").removesuffix(")")]
    return prompt.removeprefix('Listen and write: (audio: "').removesuffix('")')


WRONG_ANSWER = "definitely wrong"


def _quiz_url(module_id: int, action: str = "") -> str:
    base = f"/api/v1/modules/{module_id}/quiz"
    return f"{base}/{action}" if action else base


def _play(client: TestClient, module_id: int, correct: int) -> dict[str, Any]:
    """Answer the first `correct` questions right and the rest wrong, then finish."""
    session = client.post(_quiz_url(module_id)).json()["session"]
    outcome: dict[str, Any] = {}
    for index in range(len(session["questions"])):
        question = session["current_question"]
        answer = _correct_answer(question) if index < correct else WRONG_ANSWER
        client.post(_quiz_url(module_id, "answer"), json={"answer": answer})
        outcome = client.post(_quiz_url(module_id, "advance")).json()
        session = outcome["session"]
    return outcome


class TestGenerateQuiz:
    """Test suite for POST /modules/:id/quiz."""

    def test_generate_quiz_layout(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a four-word module yields four, three and two questions of each type."""
        response = client.post(_quiz_url(test_module.id))

        assert response.status_code == status.HTTP_201_CREATED
        session = response.json()["session"]
        types = [question["type"] for question in session["questions"]]
        assert types == ["multiple-choice"] * 4 + ["fill-in-blank"] * 3 + ["audio"] * 2
        assert session["current_index"] == 0
        assert session["score"] == 0
        assert session["max_score"] == 90
        assert session["completed"] is False
        assert session["pass_percentage"] == 70

        first = session["current_question"]
        assert first["prompt"] == "Translate: casa"
        assert sorted(first["options"]) == ["eau", "livre", "maison", "voiture"]
        assert first["correct_answer"] is None
        assert session["questions"][4]["prompt"] == "Complete: ___ (maison)"
        assert session["questions"][4]["options"] is None
        assert session["questions"][7]["prompt"] == 'Listen and write: (audio: "casa")'

    def test_generate_quiz_too_few_words(
        self,
        client: TestClient,
        db_session: Session,
        test_module: models.Module,
    ) -> None:
        """Test a module with three words cannot be quizzed."""
        db_session.add_all(
            [
                models.VocabularyItem(
                    module_id=test_module.id, source_text=source, target_text=target, examples=[]
                )
                for source, target in list(TARGET_BY_SOURCE.items())[:3]
            ]
        )
        db_session.commit()

        response = client.post(_quiz_url(test_module.id))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert db_session.query(models.QuizQuestion).count() == 0

    def test_generate_quiz_missing_module(self, client: TestClient) -> None:
        """Test generating a quiz for a missing module."""
        response = client.post(_quiz_url(99999))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_regenerate_replaces_questions(
        self,
        client: TestClient,
        db_session: Session,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test regenerating discards the previous quiz and its answers."""
        first = client.post(_quiz_url(test_module.id)).json()["session"]
        client.post(
            _quiz_url(test_module.id, "answer"),
            json={"answer": _correct_answer(first["current_question"])},
        )

        second = client.post(_quiz_url(test_module.id)).json()["session"]

        first_ids = {question["id"] for question in first["questions"]}
        second_ids = {question["id"] for question in second["questions"]}
        assert first_ids.isdisjoint(second_ids)
        assert second["score"] == 0
        assert not any(question["answered"] for question in second["questions"])
        assert db_session.query(models.QuizQuestion).count() == 9

    def test_stale_question_id_after_regeneration(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a question id from the replaced quiz is rejected by the guard."""
        first = client.post(_quiz_url(test_module.id)).json()["session"]
        client.post(_quiz_url(test_module.id))

        response = client.post(
            _quiz_url(test_module.id, "answer"),
            json={"answer": "maison", "question_id": first["current_question"]["id"]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetQuiz:
    """Test suite for GET /modules/:id/quiz."""

    def test_no_quiz_generated(self, client: TestClient, test_module: models.Module) -> None:
        """Test reading a quiz that was never generated."""
        response = client.get(_quiz_url(test_module.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": f"No quiz has been generated for module {test_module.id}"
        }

    def test_resume_from_saved_answers(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test an interrupted attempt resumes after the last answered question."""
        session = client.post(_quiz_url(test_module.id)).json()["session"]
        client.post(
            _quiz_url(test_module.id, "answer"),
            json={"answer": _correct_answer(session["current_question"])},
        )
        session = client.post(_quiz_url(test_module.id, "advance")).json()["session"]
        client.post(_quiz_url(test_module.id, "answer"), json={"answer": "wrong"})

        container.quiz_session_registry().clear()
        response = client.get(_quiz_url(test_module.id))

        assert response.status_code == status.HTTP_200_OK
        resumed = response.json()
        assert resumed["current_index"] == 2
        assert resumed["score"] == 10
        assert resumed["correct_count"] == 1
        assert resumed["incorrect_count"] == 1
        assert resumed["questions"][1]["given_answer"] == "wrong"
        assert resumed["questions"][1]["correct_answer"] == _correct_answer(
            session["current_question"]
        )


class TestAnswerQuestion:
    """Test suite for POST /modules/:id/quiz/answer."""

    def test_correct_answer(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a correct answer scores ten points and reveals the answer."""
        client.post(_quiz_url(test_module.id))

        response = client.post(_quiz_url(test_module.id, "answer"), json={"answer": "maison"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["correct"] is True
        assert data["correct_answer"] == "maison"
        assert data["score"] == 10
        assert data["session"]["current_answered"] is True
        assert data["session"]["current_question"]["correct_answer"] == "maison"

    def test_wrong_answer(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a wrong answer scores nothing."""
        client.post(_quiz_url(test_module.id))

        response = client.post(_quiz_url(test_module.id, "answer"), json={"answer": "eau"})

        data = response.json()
        assert data["correct"] is False
        assert data["correct_answer"] == "maison"
        assert data["score"] == 0
        assert data["session"]["incorrect_count"] == 1

    def test_answer_twice_is_rejected(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test the current question accepts a single answer."""
        client.post(_quiz_url(test_module.id))
        client.post(_quiz_url(test_module.id, "answer"), json={"answer": "eau"})

        response = client.post(_quiz_url(test_module.id, "answer"), json={"answer": "maison"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert client.get(_quiz_url(test_module.id)).json()["score"] == 0

    def test_answer_wrong_question_id(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test the question guard rejects a question that is not current."""
        session = client.post(_quiz_url(test_module.id)).json()["session"]
        other_id = session["questions"][1]["id"]

        response = client.post(
            _quiz_url(test_module.id, "answer"),
            json={"answer": "maison", "question_id": other_id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_typed_answer_ignores_case(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test fill-in-blank answers are compared case-insensitively."""
        client.post(_quiz_url(test_module.id))
        for _ in range(4):
            client.post(_quiz_url(test_module.id, "advance"))

        response = client.post(_quiz_url(test_module.id, "answer"), json={"answer": " CASA "})

        assert response.json()["correct"] is True


class TestCompleteQuiz:
    """Test suite for finishing a quiz via POST /modules/:id/quiz/advance."""

    def test_passing_quiz_completes_module(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a perfect quiz marks the module completed at 100%."""
        outcome = _play(client, test_module.id, correct=9)

        assert outcome["passed"] is True
        assert outcome["session"]["completed"] is True
        assert outcome["session"]["percentage"] == 100
        assert outcome["module"]["progress"] == 100
        assert outcome["module"]["completed"] is True

        module = client.get(f"/api/v1/modules/{test_module.id}").json()
        assert module["completed"] is True
        assert module["progress"] == 100

    def test_pass_mark_is_seventy_percent(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test 7 of 9 (78%) passes."""
        outcome = _play(client, test_module.id, correct=7)

        assert outcome["session"]["percentage"] == 78
        assert outcome["passed"] is True

    def test_failing_quiz_leaves_module_untouched(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test 6 of 9 (67%) fails and does not change the module."""
        outcome = _play(client, test_module.id, correct=6)

        assert outcome["session"]["percentage"] == 67
        assert outcome["passed"] is False
        assert outcome["module"] is None

        module = client.get(f"/api/v1/modules/{test_module.id}").json()
        assert module["completed"] is False
        assert module["progress"] == 0

    def test_advance_after_completion_is_rejected(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test a completed quiz cannot be advanced further."""
        _play(client, test_module.id, correct=0)

        response = client.post(_quiz_url(test_module.id, "advance"))

        assert response.status_code == status.HTTP_409_CONFLICT


class TestRestartQuiz:
    """Test suite for POST /modules/:id/quiz/restart."""

    def test_restart_clears_answers(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test restarting keeps the questions and resets the attempt."""
        _play(client, test_module.id, correct=9)
        played_questions = client.get(_quiz_url(test_module.id)).json()["questions"]

        response = client.post(_quiz_url(test_module.id, "restart"))

        assert response.status_code == status.HTTP_200_OK
        session = response.json()["session"]
        assert session["completed"] is False
        assert session["current_index"] == 0
        assert session["score"] == 0
        assert not any(question["answered"] for question in session["questions"])
        assert [q["id"] for q in session["questions"]] == [q["id"] for q in played_questions]

        container.quiz_session_registry().clear()
        assert client.get(_quiz_url(test_module.id)).json()["current_index"] == 0
