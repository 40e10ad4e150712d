"""Use case for module operations."""

import structlog

from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.services.progress_projection_service import (
    ProgressProjectionService,
)
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.module import Module
from lexitrack.domain.learning.services.progress_aggregator import ProgressAggregator
from lexitrack.exceptions import StudyModuleNotFoundError

logger = structlog.get_logger(__name__)


class ModuleUseCase:
    """Use case for module listing, creation and progress recomputation."""

    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        progress_projection_service: ProgressProjectionService,
        progress_aggregator: ProgressAggregator,
    ) -> None:
        """Initialize use case with repository protocols and services."""
        self.module_repository = module_repository
        self.progress_projection_service = progress_projection_service
        self.progress_aggregator = progress_aggregator

    def list_modules(self, completed: bool | None = None) -> list[Module]:
        """
        List modules in study order.

        Args:
            completed: Only completed (True) or unfinished (False) modules

        Returns:
            List of module entities sorted by order
        """
        modules = sorted(self.module_repository.find_all(), key=lambda m: m.order)
        if completed is None:
            return modules
        return [module for module in modules if module.completed == completed]

    def modules_by_level(self) -> dict[str, list[Module]]:
        return self.progress_aggregator.modules_by_level(self.module_repository.find_all())

    def get_module(self, module_id: int) -> Module:
        """
        Get a module by ID.

        Raises:
            StudyModuleNotFoundError: If module is not found
        """
        module = self.module_repository.find_by_id(ModuleId(module_id))
        if module is None:
            raise StudyModuleNotFoundError(module_id)
        return module

    def create_module(
        self,
        title: str,
        description: str = "",
        level: str = "",
        theme: str = "",
        order: int | None = None,
    ) -> Module:
        """
        Create a new module.

        Args:
            title: Module title
            description: Free-text description
            level: Level tag such as A1 or B2
            theme: Thematic label
            order: Study order; defaults to after the last module

        Returns:
            Created module domain entity
        """
        if order is None:
            existing = self.module_repository.find_all()
            order = max((m.order for m in existing), default=0) + 1

        module = Module.create(
            title=title, description=description, level=level, theme=theme, order=order
        )
        module = self.module_repository.save(module)

        logger.info("created_module", module_id=module.id.value, order=module.order)
        return module

    def recompute_progress(self, module_id: int) -> Module:
        """
        Recompute a module's derived progress from its vocabulary.

        Raises:
            StudyModuleNotFoundError: If module is not found
        """
        module = self.progress_projection_service.refresh_module(ModuleId(module_id))
        logger.info(
            "recomputed_module_progress",
            module_id=module_id,
            progress=module.progress,
            completed=module.completed,
        )
        return module

    def next_module_to_study(self) -> Module | None:
        return self.progress_aggregator.next_module_to_study(self.module_repository.find_all())
