from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class ModuleId(EntityId):
    """Strongly-typed module identifier."""

    value: int


@dataclass(frozen=True)
class VocabularyItemId(EntityId):
    """Strongly-typed vocabulary item identifier."""

    value: int


@dataclass(frozen=True)
class QuizQuestionId(EntityId):
    """Strongly-typed quiz question identifier."""

    value: int


@dataclass(frozen=True)
class UserProgressId(EntityId):
    """Strongly-typed user progress identifier."""

    value: int
