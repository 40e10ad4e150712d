"""Tests for StreakCalculator domain service."""

from datetime import date

from lexitrack.domain.common.value_objects import UserProgressId
from lexitrack.domain.learning.entities.user_progress import UserProgress
from lexitrack.domain.learning.services.streak_calculator import StreakCalculator

TODAY = date(2024, 3, 15)


def _progress(last_study_date: date | None, streak_days: int = 0) -> UserProgress:
    return UserProgress(
        id=UserProgressId(1),
        last_study_date=last_study_date,
        streak_days=streak_days,
    )


class TestAdvanceStreak:
    def test_first_study_day_stamps_date_without_incrementing(self) -> None:
        result = StreakCalculator().advance_streak(_progress(None, 0), TODAY)
        assert result.last_study_date == TODAY
        assert result.streak_days == 0

    def test_studied_yesterday_extends_streak(self) -> None:
        result = StreakCalculator().advance_streak(_progress(date(2024, 3, 14), 4), TODAY)
        assert result.streak_days == 5
        assert result.last_study_date == TODAY

    def test_same_day_keeps_streak(self) -> None:
        result = StreakCalculator().advance_streak(_progress(TODAY, 4), TODAY)
        assert result.streak_days == 4
        assert result.last_study_date == TODAY

    def test_gap_keeps_streak_and_advances_date(self) -> None:
        result = StreakCalculator().advance_streak(_progress(date(2024, 3, 12), 4), TODAY)
        assert result.streak_days == 4
        assert result.last_study_date == TODAY

    def test_yesterday_across_month_boundary(self) -> None:
        result = StreakCalculator().advance_streak(
            _progress(date(2024, 2, 29), 1), date(2024, 3, 1)
        )
        assert result.streak_days == 2

    def test_input_is_left_untouched(self) -> None:
        progress = _progress(date(2024, 3, 14), 4)
        StreakCalculator().advance_streak(progress, TODAY)
        assert progress.streak_days == 4
        assert progress.last_study_date == date(2024, 3, 14)
