from .progress_aggregator import ProgressAggregator
from .quiz_generator import QuizGenerator
from .randomness import RandomSource
from .review_scheduler import ReviewScheduler
from .streak_calculator import StreakCalculator

__all__ = [
    "ProgressAggregator",
    "QuizGenerator",
    "RandomSource",
    "ReviewScheduler",
    "StreakCalculator",
]
