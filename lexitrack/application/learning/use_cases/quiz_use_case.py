"""Use case for quiz generation and quiz sessions."""

from copy import deepcopy

import structlog

from lexitrack.application.learning.protocols.module_repository import ModuleRepositoryProtocol
from lexitrack.application.learning.protocols.quiz_question_repository import (
    QuizQuestionRepositoryProtocol,
)
from lexitrack.application.learning.protocols.vocabulary_repository import (
    VocabularyRepositoryProtocol,
)
from lexitrack.application.learning.services.progress_projection_service import (
    ProgressProjectionService,
)
from lexitrack.application.learning.services.quiz_session_registry import QuizSessionRegistry
from lexitrack.application.learning.use_cases.dtos import QuizAdvanceOutcome, QuizAnswerOutcome
from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.quiz_question import QuizQuestion
from lexitrack.domain.learning.entities.quiz_session import QuizSession
from lexitrack.domain.learning.services.quiz_generator import QuizGenerator
from lexitrack.domain.learning.services.randomness import RandomSource
from lexitrack.exceptions import (
    QuizNotGeneratedError,
    StoreUnavailableError,
    StudyModuleNotFoundError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


class QuizUseCase:
    """
    Use case orchestrating module quizzes.

    Generation replaces a module's previous questions. Answers are saved
    as soon as they are given so an interrupted attempt can be resumed.
    A passed quiz is the only quiz outcome that changes module state.
    """

    def __init__(
        self,
        quiz_question_repository: QuizQuestionRepositoryProtocol,
        vocabulary_repository: VocabularyRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        progress_projection_service: ProgressProjectionService,
        quiz_generator: QuizGenerator,
        random_source: RandomSource,
        session_registry: QuizSessionRegistry,
        pass_percentage: int,
        points_per_correct: int,
    ) -> None:
        """Initialize use case with repository protocols, services and settings."""
        self.quiz_question_repository = quiz_question_repository
        self.vocabulary_repository = vocabulary_repository
        self.module_repository = module_repository
        self.progress_projection_service = progress_projection_service
        self.quiz_generator = quiz_generator
        self.random_source = random_source
        self.session_registry = session_registry
        self.pass_percentage = pass_percentage
        self.points_per_correct = points_per_correct

    def _require_module(self, module_id: int) -> ModuleId:
        module_id_vo = ModuleId(module_id)
        if self.module_repository.find_by_id(module_id_vo) is None:
            raise StudyModuleNotFoundError(module_id)
        return module_id_vo

    def generate_quiz(self, module_id: int) -> list[QuizQuestion]:
        """
        Generate a fresh quiz for a module, replacing any previous one.

        The vocabulary pool is checked first and the old questions are
        replaced in a single transaction, so a failed generation leaves
        the previous quiz and its open session intact.

        Args:
            module_id: ID of the module

        Returns:
            Saved questions in presentation order

        Raises:
            StudyModuleNotFoundError: If the module is not found
            InsufficientDataError: If the module has fewer than four items
        """
        module_id_vo = self._require_module(module_id)
        pool = self.vocabulary_repository.find_by_module(module_id_vo)

        questions = self.quiz_generator.generate_quiz(module_id_vo, pool, self.random_source)

        questions = self.quiz_question_repository.replace_for_module(module_id_vo, questions)
        self.session_registry.put(
            module_id_vo, QuizSession.start(questions, self.points_per_correct)
        )

        logger.info(
            "generated_quiz",
            module_id=module_id,
            question_count=len(questions),
        )
        return questions

    def get_session(self, module_id: int) -> QuizSession:
        """
        Return the open session of a module, resuming it from saved answers if needed.

        Raises:
            StudyModuleNotFoundError: If the module is not found
            QuizNotGeneratedError: If the module has no quiz yet
        """
        module_id_vo = ModuleId(module_id)
        session = self.session_registry.get(module_id_vo)
        if session is not None:
            return session

        self._require_module(module_id)
        questions = self.quiz_question_repository.find_by_module(module_id_vo)
        if not questions:
            raise QuizNotGeneratedError(module_id)

        session = QuizSession.resume(questions, self.points_per_correct)
        self.session_registry.put(module_id_vo, session)
        logger.info(
            "resumed_quiz_session",
            module_id=module_id,
            current_index=session.current_index,
            score=session.score,
        )
        return session

    def answer(
        self, module_id: int, answer: str, question_id: int | None = None
    ) -> QuizAnswerOutcome:
        """
        Answer the current question and save the answer right away.

        When the answer cannot be saved the open session is put back as it
        was before the answer, so the learner can answer again.

        Args:
            module_id: ID of the module
            answer: Selected option or typed answer
            question_id: Optional guard; must be the current question's ID

        Raises:
            ValidationError: If question_id is not the current question
            QuizSessionError: If the question was already answered or the
                quiz is completed
            StoreUnavailableError: If the answer could not be saved
        """
        session = self.get_session(module_id)
        current = session.current_question
        if question_id is not None and current.id.value != question_id:
            raise ValidationError(
                f"Question {question_id} is not the current question ({current.id.value})"
            )

        before = deepcopy(session)
        result = session.answer(answer)
        try:
            self.quiz_question_repository.save(result.question)
        except StoreUnavailableError:
            self.session_registry.put(ModuleId(module_id), before)
            raise

        logger.info(
            "answered_quiz_question",
            module_id=module_id,
            question_id=current.id.value,
            correct=result.correct,
            score=session.score,
        )
        return QuizAnswerOutcome(result=result, session=session)

    def advance(self, module_id: int) -> QuizAdvanceOutcome:
        """
        Move to the next question or complete the quiz.

        On completion with a passing percentage the module is marked
        completed at 100% progress.

        Raises:
            QuizSessionError: If the quiz is already completed
        """
        session = self.get_session(module_id)
        if session.advance():
            return QuizAdvanceOutcome(session=session, passed=False)
        return self._complete(ModuleId(module_id), session)

    def restart(self, module_id: int) -> QuizSession:
        """Start a new attempt over the same questions, discarding saved answers."""
        session = self.get_session(module_id)
        session.restart()
        for question in session.questions:
            self.quiz_question_repository.save(question)

        logger.info("restarted_quiz", module_id=module_id)
        return session

    def _complete(self, module_id: ModuleId, session: QuizSession) -> QuizAdvanceOutcome:
        passed = session.is_passed(self.pass_percentage)
        module = None
        if passed:
            module = self.module_repository.find_by_id(module_id)
            if module is None:
                raise StudyModuleNotFoundError(module_id.value)
            module.complete_by_quiz()
            module = self.progress_projection_service.save_module(module)

        logger.info(
            "completed_quiz",
            module_id=module_id.value,
            score=session.score,
            percentage=session.percentage,
            passed=passed,
        )
        return QuizAdvanceOutcome(session=session, passed=passed, module=module)
