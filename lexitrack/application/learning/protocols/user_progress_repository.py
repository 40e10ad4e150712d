"""Protocol for UserProgress repository in learning context."""

from typing import Protocol

from lexitrack.domain.learning.entities.user_progress import UserProgress


class UserProgressRepositoryProtocol(Protocol):
    """Protocol for the single UserProgress record."""

    def find_current(self) -> UserProgress | None:
        """
        Get the installation's progress record.

        Returns:
            The record with the lowest ID, None if none was created yet
        """
        ...

    def save(self, progress: UserProgress) -> UserProgress:
        """
        Save the progress record (create or update).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with store-generated values
        """
        ...
