from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lexitrack.application.learning.services.progress_projection_service import (
    ProgressProjectionService,
)
from lexitrack.application.learning.services.quiz_session_registry import QuizSessionRegistry
from lexitrack.application.learning.services.user_progress_service import UserProgressService
from lexitrack.application.learning.use_cases.module_use_case import ModuleUseCase
from lexitrack.application.learning.use_cases.progress_use_case import ProgressUseCase
from lexitrack.application.learning.use_cases.quiz_use_case import QuizUseCase
from lexitrack.application.learning.use_cases.review_use_case import ReviewUseCase
from lexitrack.application.learning.use_cases.vocabulary_use_case import VocabularyUseCase
from lexitrack.config import get_settings
from lexitrack.domain.learning.services.progress_aggregator import ProgressAggregator
from lexitrack.domain.learning.services.quiz_generator import QuizGenerator
from lexitrack.domain.learning.services.review_scheduler import ReviewScheduler
from lexitrack.domain.learning.services.streak_calculator import StreakCalculator
from lexitrack.infrastructure.common.clock import SystemClock
from lexitrack.infrastructure.common.random_source import SeededRandomSource
from lexitrack.infrastructure.learning.repositories import (
    ModuleRepository,
    QuizQuestionRepository,
    UserProgressRepository,
    VocabularyRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    module_repository = providers.Factory(ModuleRepository, db=db)
    vocabulary_repository = providers.Factory(VocabularyRepository, db=db)
    quiz_question_repository = providers.Factory(QuizQuestionRepository, db=db)
    user_progress_repository = providers.Factory(UserProgressRepository, db=db)

    # Time and randomness (overridden in tests)
    clock = providers.Singleton(SystemClock, timezone=settings.provided.STUDY_TIMEZONE)
    random_source = providers.Factory(SeededRandomSource, seed=settings.provided.RANDOM_SEED)

    # Domain services (pure domain logic, no db)
    progress_aggregator = providers.Factory(ProgressAggregator)
    streak_calculator = providers.Factory(StreakCalculator)
    review_scheduler = providers.Factory(ReviewScheduler)
    quiz_generator = providers.Factory(QuizGenerator)

    # Application services
    quiz_session_registry = providers.Singleton(QuizSessionRegistry)
    user_progress_service = providers.Factory(
        UserProgressService,
        user_progress_repository=user_progress_repository,
    )
    progress_projection_service = providers.Factory(
        ProgressProjectionService,
        module_repository=module_repository,
        vocabulary_repository=vocabulary_repository,
        user_progress_service=user_progress_service,
        progress_aggregator=progress_aggregator,
    )

    # Learning module use cases
    module_use_case = providers.Factory(
        ModuleUseCase,
        module_repository=module_repository,
        progress_projection_service=progress_projection_service,
        progress_aggregator=progress_aggregator,
    )

    vocabulary_use_case = providers.Factory(
        VocabularyUseCase,
        vocabulary_repository=vocabulary_repository,
        module_repository=module_repository,
        progress_projection_service=progress_projection_service,
        user_progress_service=user_progress_service,
        review_scheduler=review_scheduler,
        clock=clock,
    )

    review_use_case = providers.Factory(
        ReviewUseCase,
        vocabulary_repository=vocabulary_repository,
        module_repository=module_repository,
        review_scheduler=review_scheduler,
        random_source=random_source,
        clock=clock,
        default_limit=settings.provided.REVIEW_QUEUE_LIMIT,
    )

    progress_use_case = providers.Factory(
        ProgressUseCase,
        user_progress_service=user_progress_service,
        progress_projection_service=progress_projection_service,
        module_repository=module_repository,
        vocabulary_repository=vocabulary_repository,
        streak_calculator=streak_calculator,
        progress_aggregator=progress_aggregator,
        review_scheduler=review_scheduler,
        clock=clock,
        learning_goal_words=settings.provided.LEARNING_GOAL_WORDS,
        review_queue_limit=settings.provided.REVIEW_QUEUE_LIMIT,
    )

    quiz_use_case = providers.Factory(
        QuizUseCase,
        quiz_question_repository=quiz_question_repository,
        vocabulary_repository=vocabulary_repository,
        module_repository=module_repository,
        progress_projection_service=progress_projection_service,
        quiz_generator=quiz_generator,
        random_source=random_source,
        session_registry=quiz_session_registry,
        pass_percentage=settings.provided.QUIZ_PASS_PERCENTAGE,
        points_per_correct=settings.provided.QUIZ_POINTS_PER_CORRECT,
    )


# Initialize container
container = Container()
