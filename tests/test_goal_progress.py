"""Tests for derived goal progress."""

from datetime import date, datetime, timedelta, timezone

import pytest

from fitcoach.core import goal_progress
from fitcoach.core.errors import InvalidInput
from fitcoach.models.goal import Goal, GoalStatus


def make_goal(start: date, target: date, completed: bool = False) -> Goal:
    return Goal(owner_id="u1", name="Goal", start_date=start, target_date=target, completed=completed)


class TestDaysRemaining:
    """Tests for days_remaining."""

    def test_midway(self, sample_goal):
        """Five days left in the middle of a ten-day goal."""
        assert goal_progress.days_remaining(sample_goal, date(2024, 1, 6)) == 5

    def test_overdue_is_negative(self, sample_goal):
        """Past the target date the count goes negative."""
        assert goal_progress.days_remaining(sample_goal, date(2024, 1, 15)) == -4

    def test_partial_day_rounds_up(self, sample_goal):
        """Any part of a day counts as a full day."""
        assert goal_progress.days_remaining(sample_goal, datetime(2024, 1, 10, 12, 0)) == 1

    def test_target_day_is_zero(self, sample_goal):
        """On the target date at midnight nothing remains."""
        assert goal_progress.days_remaining(sample_goal, date(2024, 1, 11)) == 0


class TestPercentElapsed:
    """Tests for percent_elapsed."""

    def test_midway(self, sample_goal):
        """Half the window has passed."""
        assert goal_progress.percent_elapsed(sample_goal, date(2024, 1, 6)) == pytest.approx(50.0)

    def test_before_start_is_zero(self, sample_goal):
        """Nothing has elapsed before the start date."""
        assert goal_progress.percent_elapsed(sample_goal, date(2023, 12, 20)) == 0.0

    def test_after_target_is_capped(self, sample_goal):
        """Overdue goals report 100, never more."""
        assert goal_progress.percent_elapsed(sample_goal, date(2024, 3, 1)) == 100.0

    def test_zero_length_window_at_start(self):
        """A goal starting and ending on the same day is fully elapsed on that day."""
        goal = make_goal(date(2024, 1, 1), date(2024, 1, 1))

        assert goal_progress.percent_elapsed(goal, date(2024, 1, 1)) == 100.0

    def test_zero_length_window_before_start(self):
        """A zero-length window has not elapsed before it starts."""
        goal = make_goal(date(2024, 1, 1), date(2024, 1, 1))

        assert goal_progress.percent_elapsed(goal, date(2023, 12, 31)) == 0.0
        assert goal_progress.percent_elapsed(goal, datetime(2023, 12, 31, 12, 0)) == 0.0

    def test_inverted_window(self):
        """A target before the start behaves like a zero-length window."""
        goal = make_goal(date(2024, 1, 10), date(2024, 1, 1))

        assert goal_progress.percent_elapsed(goal, date(2024, 1, 5)) == 0.0
        assert goal_progress.percent_elapsed(goal, date(2024, 1, 10)) == 100.0

    def test_monotonic_and_bounded(self, sample_goal):
        """Progress never decreases and stays within 0..100."""
        now = datetime(2023, 12, 25)
        previous = -1.0
        while now < datetime(2024, 1, 20):
            value = goal_progress.percent_elapsed(sample_goal, now)
            assert 0.0 <= value <= 100.0
            assert value >= previous
            previous = value
            now += timedelta(hours=7)

    def test_aware_datetime(self, sample_goal):
        """Timezone-aware moments are compared in their own timezone."""
        now = datetime(2024, 1, 6, tzinfo=timezone.utc)

        assert goal_progress.percent_elapsed(sample_goal, now) == pytest.approx(50.0)


class TestStatus:
    """Tests for status and summarize."""

    def test_on_track(self, sample_goal):
        """Goals with time left are on track."""
        assert goal_progress.status(sample_goal, date(2024, 1, 6)) == GoalStatus.ON_TRACK

    def test_on_track_on_target_date(self, sample_goal):
        """The target date itself is not overdue."""
        assert goal_progress.status(sample_goal, date(2024, 1, 11)) == GoalStatus.ON_TRACK

    def test_overdue(self, sample_goal):
        """Goals past their target are overdue."""
        assert goal_progress.status(sample_goal, date(2024, 1, 15)) == GoalStatus.OVERDUE

    def test_completed_wins(self):
        """Completed goals are completed even when overdue."""
        goal = make_goal(date(2024, 1, 1), date(2024, 1, 11), completed=True)

        assert goal_progress.status(goal, date(2024, 2, 1)) == GoalStatus.COMPLETED

    def test_summarize(self, sample_goal):
        """The summary bundles all three metrics."""
        summary = goal_progress.summarize(sample_goal, date(2024, 1, 15))

        assert summary.days_remaining == -4
        assert summary.percent_elapsed == 100.0
        assert summary.status == GoalStatus.OVERDUE


class TestToggleCompletion:
    """Tests for toggle_completion."""

    def test_toggle_twice(self, sample_goal):
        """Toggling flips the flag and back."""
        done = goal_progress.toggle_completion(sample_goal)
        undone = goal_progress.toggle_completion(done)

        assert done.completed is True
        assert undone.completed is False
        assert sample_goal.completed is False

    def test_dates_untouched(self, sample_goal):
        """Completion does not move the dates."""
        done = goal_progress.toggle_completion(sample_goal)

        assert done.start_date == sample_goal.start_date
        assert done.target_date == sample_goal.target_date


class TestValidateGoalName:
    """Tests for goal name validation."""

    def test_strips(self):
        assert goal_progress.validate_goal_name("  Run 5km ") == "Run 5km"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_rejected(self, name):
        """Blank names are rejected."""
        with pytest.raises(InvalidInput):
            goal_progress.validate_goal_name(name)
