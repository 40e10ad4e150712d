"""Tests for storage failure handling."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from lexitrack import models
from lexitrack.exceptions import StoreUnavailableError
from lexitrack.infrastructure.common.store_errors import store_operation


def _operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is locked"))


class TestStoreOperation:
    """Test suite for the store_operation context manager."""

    def test_wraps_database_errors(self) -> None:
        """Test SQLAlchemy errors roll back and surface as StoreUnavailableError."""
        db = MagicMock(spec=Session)

        with pytest.raises(StoreUnavailableError) as exc_info:
            with store_operation(db, "save_module"):
                raise _operational_error()

        db.rollback.assert_called_once()
        assert exc_info.value.status_code == 503
        assert exc_info.value.operation == "save_module"

    def test_other_errors_pass_through(self) -> None:
        """Test non-database errors are not translated."""
        db = MagicMock(spec=Session)

        with pytest.raises(KeyError), store_operation(db, "find_module"):
            raise KeyError("missing")

        db.rollback.assert_not_called()


class TestStoreUnavailableResponses:
    """Test suite for API responses when the database fails."""

    def test_read_failure_returns_503(
        self, client: TestClient, db_session: Session, test_module: models.Module
    ) -> None:
        """Test a failing read is reported as service unavailable."""
        with patch.object(db_session, "get", side_effect=_operational_error()):
            response = client.get(f"/api/v1/modules/{test_module.id}")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["detail"].startswith("Storage unavailable during find_module")

    def test_failed_write_leaves_data_unchanged(
        self, client: TestClient, db_session: Session, test_module: models.Module
    ) -> None:
        """Test a failing commit does not persist the change."""
        with patch.object(db_session, "commit", side_effect=_operational_error()):
            response = client.post("/api/v1/modules", json={"title": "Food"})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert db_session.query(models.Module).count() == 1


class TestQuizStoreFailures:
    """Test suite for quiz state when saving fails."""

    def test_failed_answer_can_be_retried(
        self,
        client: TestClient,
        db_session: Session,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test an answer that could not be saved is not counted."""
        quiz_url = f"/api/v1/modules/{test_module.id}/quiz"
        question_id = client.post(quiz_url).json()["session"]["current_question"]["id"]

        with patch.object(db_session, "commit", side_effect=_operational_error()):
            failed = client.post(f"{quiz_url}/answer", json={"answer": "eau"})
        assert failed.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

        session = client.get(quiz_url).json()
        assert session["current_answered"] is False
        assert session["incorrect_count"] == 0

        retried = client.post(f"{quiz_url}/answer", json={"answer": "maison"})

        assert retried.status_code == status.HTTP_200_OK
        assert retried.json()["correct"] is True
        assert retried.json()["session"]["incorrect_count"] == 0
        saved = db_session.get(models.QuizQuestion, question_id)
        assert saved is not None
        assert saved.given_answer == "maison"

    def test_failed_regeneration_keeps_previous_quiz(
        self,
        client: TestClient,
        db_session: Session,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test the old questions and open session survive a failed regeneration."""
        quiz_url = f"/api/v1/modules/{test_module.id}/quiz"
        first = client.post(quiz_url).json()["session"]

        with patch.object(db_session, "commit", side_effect=_operational_error()):
            response = client.post(quiz_url)
        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

        stored_ids = {question.id for question in db_session.query(models.QuizQuestion).all()}
        assert stored_ids == {question["id"] for question in first["questions"]}

        answer = client.post(
            f"{quiz_url}/answer",
            json={"answer": "maison", "question_id": first["current_question"]["id"]},
        )
        assert answer.status_code == status.HTTP_200_OK
        assert answer.json()["correct"] is True
