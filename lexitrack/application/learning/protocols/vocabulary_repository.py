"""Protocol for VocabularyItem repository in learning context."""

from typing import Protocol

from lexitrack.domain.common.value_objects import ModuleId, VocabularyItemId
from lexitrack.domain.learning.entities.vocabulary_item import VocabularyItem


class VocabularyRepositoryProtocol(Protocol):
    """Protocol for VocabularyItem repository operations in learning context."""

    def find_by_id(self, item_id: VocabularyItemId) -> VocabularyItem | None:
        """
        Find a vocabulary item by ID.

        Args:
            item_id: The vocabulary item ID

        Returns:
            VocabularyItem entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[VocabularyItem]:
        """
        Get the full vocabulary snapshot.

        Returns:
            List of vocabulary items ordered by ID (import order)
        """
        ...

    def find_by_module(self, module_id: ModuleId) -> list[VocabularyItem]:
        """
        Get all vocabulary items of a module.

        Args:
            module_id: The module ID

        Returns:
            List of vocabulary items ordered by ID (import order)
        """
        ...

    def find_learned(self) -> list[VocabularyItem]:
        """
        Get every learned vocabulary item.

        Returns:
            List of learned items ordered by ID (import order)
        """
        ...

    def save(self, item: VocabularyItem) -> VocabularyItem:
        """
        Save a vocabulary item (create or update).

        Args:
            item: The vocabulary item to save

        Returns:
            Saved vocabulary item with store-generated values
        """
        ...

    def save_all(self, items: list[VocabularyItem]) -> list[VocabularyItem]:
        """
        Insert several new vocabulary items in one batch.

        Args:
            items: Unsaved vocabulary items

        Returns:
            Saved items in input order, with their generated IDs
        """
        ...
