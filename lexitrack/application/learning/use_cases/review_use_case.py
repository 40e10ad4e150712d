"""Use case for review queues and flashcard decks."""

import structlog

from lexitrack.application.learning.protocols.clock import ClockProtocol
from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.protocols.vocabulary_repository import (
    VocabularyRepositoryProtocol,
)
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.domain.learning.services.randomness import RandomSource
from lexitrack.domain.learning.services.review_scheduler import ReviewScheduler
from lexitrack.exceptions import StudyModuleNotFoundError

logger = structlog.get_logger(__name__)


class ReviewUseCase:
    """Use case selecting what the learner should practice next."""

    def __init__(
        self,
        vocabulary_repository: VocabularyRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        review_scheduler: ReviewScheduler,
        random_source: RandomSource,
        clock: ClockProtocol,
        default_limit: int,
    ) -> None:
        """Initialize use case with repository protocols and collaborators."""
        self.vocabulary_repository = vocabulary_repository
        self.module_repository = module_repository
        self.review_scheduler = review_scheduler
        self.random_source = random_source
        self.clock = clock
        self.default_limit = default_limit

    def review_queue(self, limit: int | None = None, full: bool = False) -> list[VocabularyItem]:
        """
        Learned words, least recently reviewed first.

        Args:
            limit: Queue length; the configured default when omitted
            full: Return every eligible word (full practice session)

        Returns:
            Ordered list, empty when nothing is learned yet
        """
        items = self.vocabulary_repository.find_learned()
        if full:
            return self.review_scheduler.select_review_queue(items, limit=None)
        return self.review_scheduler.select_review_queue(
            items, limit=limit if limit is not None else self.default_limit
        )

    def flashcards(self, module_id: int | None = None) -> list[VocabularyItem]:
        """
        Shuffled flashcard deck, for one module or the whole vocabulary.

        Raises:
            StudyModuleNotFoundError: If module_id is given and not found
        """
        if module_id is None:
            items = self.vocabulary_repository.find_all()
        else:
            module_id_vo = ModuleId(module_id)
            if self.module_repository.find_by_id(module_id_vo) is None:
                raise StudyModuleNotFoundError(module_id)
            items = self.vocabulary_repository.find_by_module(module_id_vo)

        deck = self.review_scheduler.select_flashcards(items, self.clock.now(), self.random_source)
        logger.debug("selected_flashcards", module_id=module_id, card_count=len(deck))
        return deck
