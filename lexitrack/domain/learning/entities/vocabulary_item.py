"""
VocabularyItem entity.
"""

from dataclasses import dataclass, field
from datetime import datetime

from lexitrack.domain.common.entity import Entity
from lexitrack.domain.common.exceptions import ValidationError
from lexitrack.domain.common.value_objects import ModuleId, VocabularyItemId

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 3


def _validate_difficulty(difficulty: int | None) -> None:
    if difficulty is not None and not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValidationError(
            f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}",
            field="difficulty",
            value=difficulty,
        )


@dataclass
class VocabularyItem(Entity[VocabularyItemId]):
    """
    A single source/target word pair with its learning state.

    Business Rules:
    - Source and target text cannot be blank
    - Difficulty, when rated, is 1 (easy) to 3 (hard)
    - Review count never goes below zero
    - Items are never deleted by the engine, only mutated on review events
    """

    id: VocabularyItemId
    module_id: ModuleId
    source_text: str
    target_text: str
    learned: bool = False
    review_count: int = 0
    last_reviewed_at: datetime | None = None
    difficulty: int | None = None
    examples: list[str] = field(default_factory=list)
    audio_url: str | None = None
    next_review_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.source_text or not self.source_text.strip():
            raise ValidationError("Source text cannot be empty", field="source_text")
        if not self.target_text or not self.target_text.strip():
            raise ValidationError("Target text cannot be empty", field="target_text")
        if self.review_count < 0:
            raise ValidationError(
                "Review count cannot be negative", field="review_count", value=self.review_count
            )
        _validate_difficulty(self.difficulty)

    @property
    def never_reviewed(self) -> bool:
        return self.last_reviewed_at is None

    def mark_learned(self, now: datetime) -> None:
        """Flag the item as learned; learning counts as a review timestamp."""
        self.learned = True
        self.last_reviewed_at = now

    def record_review(self, now: datetime, difficulty: int | None = None) -> None:
        """
        Record a review event.

        Args:
            now: When the review happened
            difficulty: Optional new difficulty rating from the learner

        Raises:
            ValidationError: If difficulty is outside the allowed range
        """
        _validate_difficulty(difficulty)
        self.review_count += 1
        self.last_reviewed_at = now
        if difficulty is not None:
            self.difficulty = difficulty

    def rate_difficulty(self, difficulty: int | None) -> None:
        _validate_difficulty(difficulty)
        self.difficulty = difficulty

    def replace_examples(self, examples: list[str]) -> None:
        self.examples = [example.strip() for example in examples if example.strip()]

    def schedule_next_review(self, at: datetime | None) -> None:
        self.next_review_at = at

    def is_due_for_flashcards(self, now: datetime) -> bool:
        """
        Whether the item belongs in a flashcard practice deck.

        Unlearned items are always practiced. Learned items are practiced
        unless a next-review time is tracked and still in the future.
        """
        if not self.learned:
            return True
        if self.next_review_at is None:
            return True
        return self.next_review_at <= now

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on either side of the pair."""
        needle = query.casefold()
        return needle in self.source_text.casefold() or needle in self.target_text.casefold()

    @classmethod
    def create(
        cls,
        module_id: ModuleId,
        source_text: str,
        target_text: str,
        difficulty: int | None = None,
        examples: list[str] | None = None,
        audio_url: str | None = None,
    ) -> "VocabularyItem":
        """Create a new, not yet learned item (ID will be 0 until persisted)."""
        return cls(
            id=VocabularyItemId.generate(),
            module_id=module_id,
            source_text=source_text.strip(),
            target_text=target_text.strip(),
            learned=False,
            review_count=0,
            difficulty=difficulty,
            examples=list(examples or []),
            audio_url=audio_url,
        )

    @classmethod
    def create_with_id(
        cls,
        id: VocabularyItemId,
        module_id: ModuleId,
        source_text: str,
        target_text: str,
        learned: bool,
        review_count: int,
        last_reviewed_at: datetime | None = None,
        difficulty: int | None = None,
        examples: list[str] | None = None,
        audio_url: str | None = None,
        next_review_at: datetime | None = None,
    ) -> "VocabularyItem":
        """Reconstitute an item from persistence."""
        return cls(
            id=id,
            module_id=module_id,
            source_text=source_text,
            target_text=target_text,
            learned=learned,
            review_count=review_count,
            last_reviewed_at=last_reviewed_at,
            difficulty=difficulty,
            examples=list(examples or []),
            audio_url=audio_url,
            next_review_at=next_review_at,
        )
