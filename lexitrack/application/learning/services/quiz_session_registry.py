"""In-process holder of the open quiz session per module."""

from lexitrack.domain.common.value_objects import ModuleId
from lexitrack.domain.learning.entities.quiz_session import QuizSession


class QuizSessionRegistry:
    """
    Open quiz sessions keyed by module.

    The application serves one learner, so at most one attempt per module
    is open at a time. Sessions live only in memory; after a restart they
    are rebuilt from the persisted answers.
    """

    def __init__(self) -> None:
        self._sessions: dict[int, QuizSession] = {}

    def get(self, module_id: ModuleId) -> QuizSession | None:
        return self._sessions.get(module_id.value)

    def put(self, module_id: ModuleId, session: QuizSession) -> None:
        self._sessions[module_id.value] = session

    def clear(self) -> None:
        self._sessions.clear()
