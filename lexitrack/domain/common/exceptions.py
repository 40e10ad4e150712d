"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when business rules
or entity invariants are broken. The infrastructure layer translates them
into HTTP responses.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be caught
    and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: blank source text, difficulty outside 1..3.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: answering the same quiz question twice.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class QuizSessionError(BusinessRuleViolationError):
    """Raised for a transition the quiz session does not allow in its current state."""


class InsufficientDataError(DomainError):
    """
    Raised when a vocabulary pool is too small to build a quiz.

    A multiple-choice question needs one correct option and three
    distractors, so at least four items are required.
    """

    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            "Not enough vocabulary items to generate a quiz",
            {"available": available, "required": required},
        )
        self.available = available
        self.required = required
