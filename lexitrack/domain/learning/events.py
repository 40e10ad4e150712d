"""Domain events of the learning context."""

from dataclasses import dataclass
from typing import Literal

from lexitrack.domain.common.domain_event import DomainEvent
from lexitrack.domain.common.value_objects import ModuleId

CompletionSource = Literal["vocabulary", "quiz"]


@dataclass(frozen=True, kw_only=True)
class ModuleCompleted(DomainEvent):
    """A module reached 100% progress."""

    module_id: ModuleId
    source: CompletionSource
