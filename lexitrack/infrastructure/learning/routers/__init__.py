"""Learning context routers."""

from lexitrack.infrastructure.learning.routers import modules, progress, quiz, review, vocabulary

__all__ = ["modules", "progress", "quiz", "review", "vocabulary"]
