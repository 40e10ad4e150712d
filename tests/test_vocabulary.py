"""Tests for vocabulary API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexitrack import models


class TestAddVocabularyItem:
    """Test suite for POST /vocabulary."""

    def test_add_item_success(
        self, client: TestClient, db_session: Session, test_module: models.Module
    ) -> None:
        """Test adding an item starts it unlearned and updates the module's word count."""
        response = client.post(
            "/api/v1/vocabulary",
            json={
                "module_id": test_module.id,
                "source_text": " obrigado ",
                "target_text": "merci",
                "examples": ["Muito obrigado!"],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        item = response.json()["item"]
        assert item["source_text"] == "obrigado"
        assert item["learned"] is False
        assert item["review_count"] == 0
        assert item["last_reviewed_at"] is None
        assert item["examples"] == ["Muito obrigado!"]

        module = client.get(f"/api/v1/modules/{test_module.id}").json()
        assert module["word_count"] == 1
        assert module["progress"] == 0

    def test_add_item_missing_module(self, client: TestClient, db_session: Session) -> None:
        """Test adding to a missing module writes nothing."""
        response = client.post(
            "/api/v1/vocabulary",
            json={"module_id": 99999, "source_text": "casa", "target_text": "maison"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.VocabularyItem).count() == 0

    def test_add_item_blank_text(self, client: TestClient, test_module: models.Module) -> None:
        """Test whitespace-only text is rejected."""
        response = client.post(
            "/api/v1/vocabulary",
            json={"module_id": test_module.id, "source_text": "   ", "target_text": "maison"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_add_item_invalid_difficulty(
        self, client: TestClient, test_module: models.Module
    ) -> None:
        """Test difficulty outside 1..3 is rejected by request validation."""
        response = client.post(
            "/api/v1/vocabulary",
            json={
                "module_id": test_module.id,
                "source_text": "casa",
                "target_text": "maison",
                "difficulty": 5,
            },
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestBulkImport:
    """Test suite for POST /vocabulary/bulk."""

    def test_bulk_import_across_modules(
        self,
        client: TestClient,
        test_module: models.Module,
        second_module: models.Module,
    ) -> None:
        """Test items keep input order and each module's word count is refreshed."""
        response = client.post(
            "/api/v1/vocabulary/bulk",
            json={
                "items": [
                    {"module_id": test_module.id, "source_text": "casa", "target_text": "maison"},
                    {"module_id": second_module.id, "source_text": "trem", "target_text": "train"},
                    {"module_id": test_module.id, "source_text": "agua", "target_text": "eau"},
                ]
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        assert [item["source_text"] for item in data["items"]] == ["casa", "trem", "agua"]
        assert all(item["learned"] is False for item in data["items"])

        assert client.get(f"/api/v1/modules/{test_module.id}").json()["word_count"] == 2
        assert client.get(f"/api/v1/modules/{second_module.id}").json()["word_count"] == 1

    def test_bulk_import_with_missing_module_writes_nothing(
        self, client: TestClient, db_session: Session, test_module: models.Module
    ) -> None:
        """Test one unknown module rejects the whole batch."""
        response = client.post(
            "/api/v1/vocabulary/bulk",
            json={
                "items": [
                    {"module_id": test_module.id, "source_text": "casa", "target_text": "maison"},
                    {"module_id": 99999, "source_text": "trem", "target_text": "train"},
                ]
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.VocabularyItem).count() == 0

    def test_bulk_import_empty_batch(self, client: TestClient) -> None:
        """Test an empty batch is rejected by request validation."""
        response = client.post("/api/v1/vocabulary/bulk", json={"items": []})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestListAndSearch:
    """Test suite for the vocabulary listing endpoints."""

    def test_list_filters_by_learned(
        self,
        client: TestClient,
        db_session: Session,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test the learned filter."""
        test_vocabulary[1].learned = True
        db_session.commit()

        response = client.get("/api/v1/vocabulary", params={"learned": True})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["source_text"] == "carro"

    def test_list_missing_module(self, client: TestClient) -> None:
        """Test listing a missing module's vocabulary."""
        response = client.get("/api/v1/vocabulary", params={"module_id": 99999})
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_search_matches_either_side(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test search is case-insensitive on both texts."""
        by_source = client.get("/api/v1/vocabulary/search", params={"q": "CAS"}).json()
        by_target = client.get("/api/v1/vocabulary/search", params={"q": "voit"}).json()

        assert [item["source_text"] for item in by_source["items"]] == ["casa"]
        assert [item["source_text"] for item in by_target["items"]] == ["carro"]

    def test_blank_search_returns_nothing(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test a blank query matches no item."""
        response = client.get("/api/v1/vocabulary/search", params={"q": "  "})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 0

    def test_difficult_words_hardest_first(
        self,
        client: TestClient,
        db_session: Session,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test only hard-rated words are listed."""
        test_vocabulary[0].difficulty = 1
        test_vocabulary[2].difficulty = 3
        test_vocabulary[3].difficulty = 2
        db_session.commit()

        response = client.get("/api/v1/vocabulary/difficult")

        assert response.status_code == status.HTTP_200_OK
        assert [item["source_text"] for item in response.json()["items"]] == ["livro"]


class TestGetAndUpdateItem:
    """Test suite for GET and PATCH /vocabulary/:id."""

    def test_get_item_not_found(self, client: TestClient) -> None:
        """Test reading a missing item."""
        response = client.get("/api/v1/vocabulary/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Vocabulary item with id 99999 not found"}

    def test_update_item(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test updating difficulty and examples."""
        item_id = test_vocabulary[0].id
        response = client.patch(
            f"/api/v1/vocabulary/{item_id}",
            json={"difficulty": 3, "examples": ["A casa é azul.", "  "]},
        )

        assert response.status_code == status.HTTP_200_OK
        item = response.json()["item"]
        assert item["difficulty"] == 3
        assert item["examples"] == ["A casa é azul."]
        assert item["learned"] is False

    def test_update_without_fields(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test an empty update is rejected."""
        response = client.patch(f"/api/v1/vocabulary/{test_vocabulary[0].id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "At least one field must be provided"}


class TestMarkLearned:
    """Test suite for POST /vocabulary/:id/learned."""

    def test_mark_learned_updates_module_and_totals(
        self,
        client: TestClient,
        test_module: models.Module,
        test_vocabulary: list[models.VocabularyItem],
    ) -> None:
        """Test learning one of four words moves the module to 25%."""
        response = client.post(f"/api/v1/vocabulary/{test_vocabulary[0].id}/learned")

        assert response.status_code == status.HTTP_200_OK
        item = response.json()["item"]
        assert item["learned"] is True
        assert item["last_reviewed_at"].startswith("2024-03-15T09:30:00")

        module = client.get(f"/api/v1/modules/{test_module.id}").json()
        assert module["progress"] == 25
        assert module["completed"] is False
        assert client.get("/api/v1/progress").json()["total_learned"] == 1

    def test_mark_learned_twice_counts_once(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test the learned total is reconciled, not incremented."""
        item_id = test_vocabulary[0].id
        client.post(f"/api/v1/vocabulary/{item_id}/learned")
        client.post(f"/api/v1/vocabulary/{item_id}/learned")

        assert client.get("/api/v1/progress").json()["total_learned"] == 1

    def test_mark_learned_not_found(self, client: TestClient) -> None:
        """Test marking a missing item."""
        response = client.post("/api/v1/vocabulary/99999/learned")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRecordReview:
    """Test suite for POST /vocabulary/:id/review."""

    def test_review_counts_and_stamps(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test a review increments both the item and the learner counters."""
        item_id = test_vocabulary[0].id

        first = client.post(f"/api/v1/vocabulary/{item_id}/review")
        second = client.post(f"/api/v1/vocabulary/{item_id}/review", json={"difficulty": 2})

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_200_OK
        item = second.json()["item"]
        assert item["review_count"] == 2
        assert item["difficulty"] == 2
        assert item["last_reviewed_at"].startswith("2024-03-15T09:30:00")
        assert client.get("/api/v1/progress").json()["total_reviewed"] == 2

    def test_review_does_not_mark_learned(
        self, client: TestClient, test_vocabulary: list[models.VocabularyItem]
    ) -> None:
        """Test reviewing leaves the learned flag alone."""
        response = client.post(f"/api/v1/vocabulary/{test_vocabulary[0].id}/review")
        assert response.json()["item"]["learned"] is False

    def test_review_not_found(self, client: TestClient) -> None:
        """Test reviewing a missing item."""
        response = client.post("/api/v1/vocabulary/99999/review")
        assert response.status_code == status.HTTP_404_NOT_FOUND
