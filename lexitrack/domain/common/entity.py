"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal
when their ids are equal, whatever their other attributes hold.

Example:
    @dataclass
    class VocabularyItem(Entity[VocabularyItemId]):
        id: VocabularyItemId
        source_text: str
        target_text: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers wrap the auto-increment integer assigned by the store.
    A value of 0 marks an entity that has not been persisted yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id, replaced by the store on insert."""
        return cls(0)

    @property
    def is_transient(self) -> bool:
        """Whether the id still is the unsaved placeholder."""
        return self.value == 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
