"""Use case for vocabulary operations."""

from datetime import datetime

import structlog

from lexitrack.application.learning.protocols.clock import ClockProtocol
from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.protocols.vocabulary_repository import (
    VocabularyRepositoryProtocol,
)
from lexitrack.application.learning.services.progress_projection_service import (
    ProgressProjectionService,
)
from lexitrack.application.learning.services.user_progress_service import UserProgressService
from lexitrack.application.learning.use_cases.dtos import NewVocabularyItem
from lexitrack.domain.common.value_objects import ModuleId, VocabularyItemId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.domain.learning.services.review_scheduler import ReviewScheduler
from lexitrack.exceptions import (
    StudyModuleNotFoundError,
    ValidationError,
    VocabularyItemNotFoundError,
)

logger = structlog.get_logger(__name__)


class VocabularyUseCase:
    """Use case for vocabulary import, listing and learning events."""

    def __init__(
        self,
        vocabulary_repository: VocabularyRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        progress_projection_service: ProgressProjectionService,
        user_progress_service: UserProgressService,
        review_scheduler: ReviewScheduler,
        clock: ClockProtocol,
    ) -> None:
        """Initialize use case with repository protocols and services."""
        self.vocabulary_repository = vocabulary_repository
        self.module_repository = module_repository
        self.progress_projection_service = progress_projection_service
        self.user_progress_service = user_progress_service
        self.review_scheduler = review_scheduler
        self.clock = clock

    def _require_module(self, module_id: int) -> ModuleId:
        module_id_vo = ModuleId(module_id)
        if self.module_repository.find_by_id(module_id_vo) is None:
            raise StudyModuleNotFoundError(module_id)
        return module_id_vo

    def get_item(self, item_id: int) -> VocabularyItem:
        """
        Get a vocabulary item by ID.

        Raises:
            VocabularyItemNotFoundError: If the item is not found
        """
        item = self.vocabulary_repository.find_by_id(VocabularyItemId(item_id))
        if item is None:
            raise VocabularyItemNotFoundError(item_id)
        return item

    def list_vocabulary(
        self, module_id: int | None = None, learned: bool | None = None
    ) -> list[VocabularyItem]:
        """
        List vocabulary, optionally restricted to a module and learned state.

        Raises:
            StudyModuleNotFoundError: If module_id is given and not found
        """
        if module_id is None:
            items = self.vocabulary_repository.find_all()
        else:
            items = self.vocabulary_repository.find_by_module(self._require_module(module_id))
        if learned is None:
            return items
        return [item for item in items if item.learned == learned]

    def words_to_learn(self, module_id: int) -> list[VocabularyItem]:
        module_id_vo = self._require_module(module_id)
        return self.review_scheduler.words_to_learn(
            self.vocabulary_repository.find_by_module(module_id_vo), module_id_vo
        )

    def difficult_words(self) -> list[VocabularyItem]:
        return self.review_scheduler.difficult_words(self.vocabulary_repository.find_all())

    def search(self, query: str) -> list[VocabularyItem]:
        """Case-insensitive search on both sides of each pair; blank queries match nothing."""
        if not query or not query.strip():
            return []
        needle = query.strip()
        return [item for item in self.vocabulary_repository.find_all() if item.matches(needle)]

    def add_item(self, new_item: NewVocabularyItem) -> VocabularyItem:
        """
        Add one vocabulary item to a module.

        The module's word count and progress are recomputed afterwards.

        Raises:
            StudyModuleNotFoundError: If the module is not found
        """
        module_id = self._require_module(new_item.module_id)
        item = self.vocabulary_repository.save(self._build(module_id, new_item))
        self.progress_projection_service.refresh_module(module_id)

        logger.info("added_vocabulary_item", item_id=item.id.value, module_id=module_id.value)
        return item

    def bulk_import(self, new_items: list[NewVocabularyItem]) -> list[VocabularyItem]:
        """
        Import a batch of items; every imported item starts unlearned.

        All target modules are checked before anything is written.

        Raises:
            StudyModuleNotFoundError: If any referenced module is not found
        """
        if not new_items:
            return []

        module_ids = {
            module_id: self._require_module(module_id)
            for module_id in dict.fromkeys(entry.module_id for entry in new_items)
        }
        items = self.vocabulary_repository.save_all(
            [self._build(module_ids[entry.module_id], entry) for entry in new_items]
        )
        self.progress_projection_service.refresh_modules(module_ids.values())

        logger.info(
            "imported_vocabulary",
            item_count=len(items),
            module_ids=list(module_ids),
        )
        return items

    def update_item(
        self,
        item_id: int,
        difficulty: int | None = None,
        examples: list[str] | None = None,
        audio_url: str | None = None,
        next_review_at: datetime | None = None,
    ) -> VocabularyItem:
        """
        Update an item's descriptive fields.

        Raises:
            ValidationError: If no field is provided
            VocabularyItemNotFoundError: If the item is not found
        """
        if difficulty is None and examples is None and audio_url is None and next_review_at is None:
            raise ValidationError("At least one field must be provided")

        item = self.get_item(item_id)
        if difficulty is not None:
            item.rate_difficulty(difficulty)
        if examples is not None:
            item.replace_examples(examples)
        if audio_url is not None:
            item.audio_url = audio_url
        if next_review_at is not None:
            item.schedule_next_review(next_review_at)
        item = self.vocabulary_repository.save(item)

        logger.info("updated_vocabulary_item", item_id=item_id)
        return item

    def mark_learned(self, item_id: int) -> VocabularyItem:
        """
        Mark an item as learned.

        Recomputes the module projection and reconciles the learner's
        total of learned words.

        Raises:
            VocabularyItemNotFoundError: If the item is not found
        """
        item = self.get_item(item_id)
        item.mark_learned(self.clock.now())
        item = self.vocabulary_repository.save(item)

        self.progress_projection_service.refresh_module(item.module_id)
        self.progress_projection_service.reconcile_user_totals()

        logger.info("marked_vocabulary_learned", item_id=item_id, module_id=item.module_id.value)
        return item

    def record_review(self, item_id: int, difficulty: int | None = None) -> VocabularyItem:
        """
        Record that the learner reviewed an item.

        Raises:
            VocabularyItemNotFoundError: If the item is not found
        """
        item = self.get_item(item_id)
        item.record_review(self.clock.now(), difficulty)
        item = self.vocabulary_repository.save(item)

        progress = self.user_progress_service.load()
        progress.record_review()
        self.user_progress_service.save(progress)

        logger.info("recorded_review", item_id=item_id, review_count=item.review_count)
        return item

    @staticmethod
    def _build(module_id: ModuleId, entry: NewVocabularyItem) -> VocabularyItem:
        return VocabularyItem.create(
            module_id=module_id,
            source_text=entry.source_text,
            target_text=entry.target_text,
            difficulty=entry.difficulty,
            examples=entry.examples,
            audio_url=entry.audio_url,
        )
