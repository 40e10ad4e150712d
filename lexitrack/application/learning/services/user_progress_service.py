"""Application service loading the installation's progress record."""

import structlog

from lexitrack.application.learning.protocols.user_progress_repository import (
    UserProgressRepositoryProtocol,
)
from lexitrack.domain.learning.entities.user_progress import UserProgress

logger = structlog.get_logger(__name__)


class UserProgressService:
    """Loads the single UserProgress record, creating it on first use."""

    def __init__(self, user_progress_repository: UserProgressRepositoryProtocol) -> None:
        self.user_progress_repository = user_progress_repository

    def load(self) -> UserProgress:
        """Return the progress record, creating an empty one if none exists."""
        progress = self.user_progress_repository.find_current()
        if progress is not None:
            return progress

        progress = self.user_progress_repository.save(UserProgress.create())
        logger.info("created_user_progress", user_progress_id=progress.id.value)
        return progress

    def save(self, progress: UserProgress) -> UserProgress:
        return self.user_progress_repository.save(progress)
