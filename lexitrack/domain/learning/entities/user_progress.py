"""
UserProgress entity.

One record per installation. It is loaded explicitly by the application
layer and passed to the engine, never looked up ambiently.
"""

from dataclasses import dataclass
from datetime import date

from lexitrack.domain.common.entity import Entity
from lexitrack.domain.common.exceptions import ValidationError
from lexitrack.domain.common.value_objects import ModuleId, UserProgressId


@dataclass
class UserProgress(Entity[UserProgressId]):
    """
    Learner-wide totals and study streak.

    Business Rules:
    - Counters and study time are never negative
    - total_learned mirrors the number of learned vocabulary items after
      every reconciliation pass
    """

    id: UserProgressId
    total_learned: int = 0
    total_reviewed: int = 0
    last_study_date: date | None = None
    total_study_time: int = 0
    streak_days: int = 0
    current_module_id: ModuleId | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("total_learned", "total_reviewed", "total_study_time", "streak_days"):
            value = getattr(self, name)
            if value < 0:
                raise ValidationError(f"{name} cannot be negative", field=name, value=value)

    def add_study_time(self, minutes: int) -> None:
        """
        Add minutes to the accumulated study time.

        Raises:
            ValidationError: If minutes is negative
        """
        if minutes < 0:
            raise ValidationError("Study time cannot be negative", field="minutes", value=minutes)
        self.total_study_time += minutes

    def record_review(self) -> None:
        self.total_reviewed += 1

    def reconcile_learned(self, total_learned: int) -> None:
        """Overwrite total_learned with the count derived from vocabulary state."""
        if total_learned < 0:
            raise ValidationError(
                "total_learned cannot be negative", field="total_learned", value=total_learned
            )
        self.total_learned = total_learned

    def set_current_module(self, module_id: ModuleId | None) -> None:
        self.current_module_id = module_id

    @classmethod
    def create(cls) -> "UserProgress":
        """Create the initial, empty record (ID will be 0 until persisted)."""
        return cls(id=UserProgressId.generate())
