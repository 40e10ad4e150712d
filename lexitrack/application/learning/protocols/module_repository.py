"""Protocol for Module repository in learning context."""

from typing import Protocol

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module


class ModuleRepositoryProtocol(Protocol):
    """Protocol for Module repository operations in learning context."""

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        """
        Find a module by ID.

        Args:
            module_id: The module ID

        Returns:
            Module entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[Module]:
        """
        Get all modules.

        Returns:
            List of module entities ordered by their study order
        """
        ...

    def save(self, module: Module) -> Module:
        """
        Save a module entity (create or update).

        Args:
            module: The module entity to save

        Returns:
            Saved module entity with store-generated values
        """
        ...
