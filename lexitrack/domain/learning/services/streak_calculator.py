"""
Domain service for the calendar-day study streak.
"""

from dataclasses import replace
from datetime import date, timedelta

from lexitrack.domain.learning.entities.user_progress import UserProgress


class StreakCalculator:
    """
    Decides whether a study streak continues or holds.

    Rules, evaluated on calendar days:
    - first recorded study day: the date is stamped, the streak is not
      incremented
    - last study day was yesterday: the streak grows by one
    - anything else (same day, a gap of two or more days): the date is
      stamped and the streak holds; a gap does not reset it
    """

    def advance_streak(self, progress: UserProgress, today: date) -> UserProgress:
        """
        Return a copy of the progress record stamped with today's study.

        Args:
            progress: Current learner progress (left untouched)
            today: The learner's calendar day

        Returns:
            New UserProgress with last_study_date == today
        """
        last = progress.last_study_date
        if last is not None and last == today - timedelta(days=1):
            return replace(progress, streak_days=progress.streak_days + 1, last_study_date=today)
        return replace(progress, last_study_date=today)
