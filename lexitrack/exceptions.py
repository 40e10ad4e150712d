"""Custom exception hierarchy for the lexitrack application."""


class LexitrackError(Exception):
    """Base exception for all lexitrack application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LexitrackError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class StudyModuleNotFoundError(NotFoundError):
    """Module not found error."""

    def __init__(self, module_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with module ID or custom message."""
        self.module_id = module_id
        if message:
            super().__init__(message)
        elif module_id is not None:
            super().__init__(f"Module with id {module_id} not found")
        else:
            super().__init__("Module not found")


class VocabularyItemNotFoundError(NotFoundError):
    """Vocabulary item not found error."""

    def __init__(self, item_id: int) -> None:
        """Initialize with vocabulary item ID."""
        self.item_id = item_id
        super().__init__(f"Vocabulary item with id {item_id} not found")


class QuizNotGeneratedError(NotFoundError):
    """No quiz has been generated for a module yet."""

    def __init__(self, module_id: int) -> None:
        """Initialize with module ID."""
        self.module_id = module_id
        super().__init__(f"No quiz has been generated for module {module_id}")


class ValidationError(LexitrackError):
    """Request validation error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class StoreUnavailableError(LexitrackError):
    """The storage backend failed to serve a read or write."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failed operation and the backend's reason."""
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage unavailable during {operation}: {reason}", status_code=503)
