"""Value objects of the learning context."""

from dataclasses import dataclass

from lexitrack.domain.common.exceptions import ValidationError
from lexitrack.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class ModuleProgress(ValueObject):
    """
    Derived progress figures of one module.

    Produced by the progress aggregator from a vocabulary snapshot and
    written back onto the module as its cached projection.
    """

    progress: int
    completed: bool
    learned_count: int
    total_count: int

    def __post_init__(self) -> None:
        if not 0 <= self.progress <= 100:
            raise ValidationError(
                "Progress must be between 0 and 100", field="progress", value=self.progress
            )
        if self.completed != (self.progress == 100):
            raise ValidationError("Completed must match a progress of 100", field="completed")
