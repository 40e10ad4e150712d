"""
Module aggregate root.
"""

from dataclasses import dataclass

from lexitrack.domain.common.aggregate_root import AggregateRoot
from lexitrack.domain.common.exceptions import ValidationError
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.events import CompletionSource, ModuleCompleted
from lexitrack.domain.learning.value_objects import ModuleProgress


@dataclass
class Module(AggregateRoot[ModuleId]):
    """
    Thematic grouping of vocabulary items.

    Business Rules:
    - Title cannot be empty
    - progress is in [0, 100] and completed == (progress == 100)
    - progress, completed and word_count are a projection of the module's
      vocabulary and are only written through apply_progress() or
      complete_by_quiz()
    """

    id: ModuleId
    title: str
    description: str = ""
    level: str = ""
    theme: str = ""
    order: int = 0
    completed: bool = False
    progress: int = 0
    word_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Title cannot be empty", field="title")
        if not 0 <= self.progress <= 100:
            raise ValidationError(
                "Progress must be between 0 and 100", field="progress", value=self.progress
            )
        if self.word_count < 0:
            raise ValidationError(
                "Word count cannot be negative", field="word_count", value=self.word_count
            )
        if self.completed != (self.progress == 100):
            raise ValidationError("Completed must match a progress of 100", field="completed")

    def apply_progress(self, progress: ModuleProgress) -> None:
        """Overwrite the derived fields with a freshly computed projection."""
        was_completed = self.completed
        self.progress = progress.progress
        self.completed = progress.completed
        self.word_count = progress.total_count
        if self.completed and not was_completed:
            self._record_completion("vocabulary")

    def complete_by_quiz(self) -> None:
        """Mark the module as mastered after a passed quiz."""
        was_completed = self.completed
        self.progress = 100
        self.completed = True
        if not was_completed:
            self._record_completion("quiz")

    def _record_completion(self, source: CompletionSource) -> None:
        self._record_event(ModuleCompleted(module_id=self.id, source=source))

    @classmethod
    def create(
        cls,
        title: str,
        description: str = "",
        level: str = "",
        theme: str = "",
        order: int = 0,
    ) -> "Module":
        """Create a new, empty module (ID will be 0 until persisted)."""
        return cls(
            id=ModuleId.generate(),
            title=title.strip(),
            description=description.strip(),
            level=level.strip(),
            theme=theme.strip(),
            order=order,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ModuleId,
        title: str,
        description: str,
        level: str,
        theme: str,
        order: int,
        completed: bool,
        progress: int,
        word_count: int,
    ) -> "Module":
        """Reconstitute a module from persistence."""
        return cls(
            id=id,
            title=title,
            description=description,
            level=level,
            theme=theme,
            order=order,
            completed=completed,
            progress=progress,
            word_count=word_count,
        )
