"""Use case for learner progress, study streak and the dashboard."""

import structlog

from lexitrack.application.learning.protocols.clock import ClockProtocol
from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.protocols.vocabulary_repository import (
    VocabularyRepositoryProtocol,
)
from lexitrack.application.learning.services.progress_projection_service import (
    ProgressProjectionService,
)
from lexitrack.application.learning.services.user_progress_service import UserProgressService
from lexitrack.application.learning.use_cases.dtos import Dashboard
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.domain.learning.services.progress_aggregator import ProgressAggregator
from lexitrack.domain.learning.services.review_scheduler import ReviewScheduler
from lexitrack.domain.learning.services.streak_calculator import StreakCalculator
from lexitrack.exceptions import StudyModuleNotFoundError

logger = structlog.get_logger(__name__)


class ProgressUseCase:
    """Use case for the learner-wide progress record."""

    def __init__(
        self,
        user_progress_service: UserProgressService,
        progress_projection_service: ProgressProjectionService,
        module_repository: ModuleRepositoryProtocol,
        vocabulary_repository: VocabularyRepositoryProtocol,
        streak_calculator: StreakCalculator,
        progress_aggregator: ProgressAggregator,
        review_scheduler: ReviewScheduler,
        clock: ClockProtocol,
        learning_goal_words: int,
        review_queue_limit: int,
    ) -> None:
        """Initialize use case with repository protocols, services and settings."""
        self.user_progress_service = user_progress_service
        self.progress_projection_service = progress_projection_service
        self.module_repository = module_repository
        self.vocabulary_repository = vocabulary_repository
        self.streak_calculator = streak_calculator
        self.progress_aggregator = progress_aggregator
        self.review_scheduler = review_scheduler
        self.clock = clock
        self.learning_goal_words = learning_goal_words
        self.review_queue_limit = review_queue_limit

    def get_progress(self) -> UserProgress:
        return self.user_progress_service.load()

    def record_study_session(self, minutes: int = 0) -> UserProgress:
        """
        Record that the learner studied today.

        Stamps today's date on the streak and adds the study minutes.

        Args:
            minutes: Time spent studying in this session

        Returns:
            Updated progress record
        """
        progress = self.user_progress_service.load()
        previous_streak = progress.streak_days

        progress = self.streak_calculator.advance_streak(progress, self.clock.today())
        progress.add_study_time(minutes)
        progress = self.user_progress_service.save(progress)

        logger.info(
            "recorded_study_session",
            minutes=minutes,
            streak_days=progress.streak_days,
            streak_extended=progress.streak_days > previous_streak,
        )
        return progress

    def set_current_module(self, module_id: int | None) -> UserProgress:
        """
        Set or clear the module the learner is working on.

        Raises:
            StudyModuleNotFoundError: If the module is not found
        """
        module_id_vo = None
        if module_id is not None:
            module_id_vo = ModuleId(module_id)
            if self.module_repository.find_by_id(module_id_vo) is None:
                raise StudyModuleNotFoundError(module_id)

        progress = self.user_progress_service.load()
        progress.set_current_module(module_id_vo)
        return self.user_progress_service.save(progress)

    def reconcile_totals(self) -> UserProgress:
        """Recompute total_learned from vocabulary state."""
        progress = self.progress_projection_service.reconcile_user_totals()
        logger.info("reconciled_user_totals", total_learned=progress.total_learned)
        return progress

    def dashboard(self) -> Dashboard:
        """Assemble the learner overview."""
        progress = self.user_progress_service.load()
        modules = self.module_repository.find_all()
        learned_items = self.vocabulary_repository.find_learned()

        return Dashboard(
            progress=progress,
            overall_progress=self.progress_aggregator.overall_progress(modules),
            learning_goal_percentage=self.progress_aggregator.learning_goal_percentage(
                progress.total_learned, self.learning_goal_words
            ),
            next_module=self.progress_aggregator.next_module_to_study(modules),
            review_queue=self.review_scheduler.select_review_queue(
                learned_items, limit=self.review_queue_limit
            ),
        )
