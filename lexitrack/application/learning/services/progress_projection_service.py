"""
Application service keeping derived progress fields in sync.

Module progress/completed/word_count and UserProgress.total_learned are
cached projections of vocabulary state. After any batch of vocabulary
mutations the orchestrating use case calls this service, which re-reads
the vocabulary from the store and writes the recomputed figures back.
"""

from collections.abc import Iterable

import structlog

from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.protocols.vocabulary_repository import (
    VocabularyRepositoryProtocol,
)
from lexitrack.application.learning.services.user_progress_service import UserProgressService
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module
from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.domain.learning.services.progress_aggregator import ProgressAggregator
from lexitrack.exceptions import StudyModuleNotFoundError

logger = structlog.get_logger(__name__)


class ProgressProjectionService:
    """Recomputes and persists module and learner progress projections."""

    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        vocabulary_repository: VocabularyRepositoryProtocol,
        user_progress_service: UserProgressService,
        progress_aggregator: ProgressAggregator,
    ) -> None:
        self.module_repository = module_repository
        self.vocabulary_repository = vocabulary_repository
        self.user_progress_service = user_progress_service
        self.progress_aggregator = progress_aggregator

    def refresh_module(self, module_id: ModuleId) -> Module:
        """
        Recompute one module's progress from its current vocabulary.

        Raises:
            StudyModuleNotFoundError: If the module does not exist
        """
        module = self.module_repository.find_by_id(module_id)
        if module is None:
            raise StudyModuleNotFoundError(module_id.value)

        items = self.vocabulary_repository.find_by_module(module_id)
        module.apply_progress(self.progress_aggregator.compute_module_progress(module_id, items))
        return self.save_module(module)

    def refresh_modules(self, module_ids: Iterable[ModuleId]) -> list[Module]:
        return [self.refresh_module(module_id) for module_id in dict.fromkeys(module_ids)]

    def reconcile_user_totals(self, progress: UserProgress | None = None) -> UserProgress:
        """Write the number of learned items back to the progress record."""
        progress = progress or self.user_progress_service.load()
        total_learned = self.progress_aggregator.compute_user_totals(
            self.vocabulary_repository.find_all()
        )
        progress.reconcile_learned(total_learned)
        return self.user_progress_service.save(progress)

    def save_module(self, module: Module) -> Module:
        """Persist a module and log the events it recorded."""
        events = module.collect_events()
        saved = self.module_repository.save(module)
        for event in events:
            logger.info("domain_event", **event.to_dict())
        return saved
