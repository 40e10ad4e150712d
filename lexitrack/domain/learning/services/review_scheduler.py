"""
Domain service selecting vocabulary for review and flashcard practice.

Due-ness is approximated by recency and the learned flag; there is no
interval or ease-factor model.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem
from lexitrack.domain.learning.services.randomness import RandomSource

DEFAULT_REVIEW_LIMIT = 10
DIFFICULT_THRESHOLD = 2

_EARLIEST = datetime.min.replace(tzinfo=UTC)


def _recency_key(item: VocabularyItem) -> tuple[bool, datetime]:
    # never-reviewed items sort first
    if item.last_reviewed_at is None:
        return (False, _EARLIEST)
    return (True, item.last_reviewed_at)


class ReviewScheduler:
    """
    Builds review queues from a vocabulary snapshot.

    The dashboard review queue and the flashcard deck order the same kind
    of snapshot differently: the queue is sorted by recency, the deck is
    shuffled for variety.
    """

    def select_review_queue(
        self,
        items: Iterable[VocabularyItem],
        limit: int | None = DEFAULT_REVIEW_LIMIT,
    ) -> list[VocabularyItem]:
        """
        Learned items, least recently reviewed first.

        Args:
            items: Vocabulary snapshot
            limit: Maximum queue length, None for no limit

        Returns:
            New list, never-reviewed items first, then ascending
            last_reviewed_at; ties keep their input order
        """
        eligible = [item for item in items if item.learned]
        eligible.sort(key=_recency_key)
        if limit is None:
            return eligible
        return eligible[: max(limit, 0)]

    def select_flashcards(
        self,
        items: Iterable[VocabularyItem],
        now: datetime,
        random_source: RandomSource,
    ) -> list[VocabularyItem]:
        """
        Flashcard practice deck in random order.

        Args:
            items: Vocabulary snapshot, usually one module
            now: Current time, compared with tracked next-review times
            random_source: Shuffles the eligible items

        Returns:
            New shuffled list of due items; the input is not modified
        """
        eligible = [item for item in items if item.is_due_for_flashcards(now)]
        return random_source.shuffle(eligible)

    def words_to_learn(
        self, items: Iterable[VocabularyItem], module_id: ModuleId
    ) -> list[VocabularyItem]:
        return [item for item in items if item.module_id == module_id and not item.learned]

    def difficult_words(self, items: Iterable[VocabularyItem]) -> list[VocabularyItem]:
        """Items rated harder than medium, hardest first."""
        difficult = [
            item
            for item in items
            if item.difficulty is not None and item.difficulty > DIFFICULT_THRESHOLD
        ]
        difficult.sort(key=lambda item: item.difficulty or 0, reverse=True)
        return difficult
