"""Derived goal metrics.

Everything here is a pure function of ``(goal, now)``. ``now`` may be a
``date`` or a ``datetime``; plain dates are read as midnight, in the
timezone of ``now`` when it carries one.
"""

import math
from dataclasses import dataclass, replace
from datetime import date, datetime, time

from ..models.goal import Goal, GoalStatus
from .errors import InvalidInput

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class GoalSummary:
    """Display bundle for a goal at a given moment."""

    days_remaining: int
    percent_elapsed: float
    status: GoalStatus


def validate_goal_name(name: str | None) -> str:
    """Return the stripped goal name, rejecting blank ones."""
    if name is None or not name.strip():
        raise InvalidInput("Goal name must not be empty")
    return name.strip()


def days_remaining(goal: Goal, now: date | datetime) -> int:
    """Whole days until the target date, rounded up.

    Negative for overdue goals.
    """
    return _ceil_days(now, goal.target_date)


def percent_elapsed(goal: Goal, now: date | datetime) -> float:
    """Share of the start..target window already elapsed, in [0, 100].

    A window of zero (or negative) length counts as fully elapsed from
    the start date on.
    """
    total = _ceil_days(goal.start_date, goal.target_date)
    elapsed = _ceil_days(goal.start_date, now)

    if total <= 0:
        return 100.0 if _seconds_between(goal.start_date, now) >= 0 else 0.0

    return min(max(elapsed / total * 100, 0.0), 100.0)


def status(goal: Goal, now: date | datetime) -> GoalStatus:
    if goal.completed:
        return GoalStatus.COMPLETED
    if days_remaining(goal, now) < 0:
        return GoalStatus.OVERDUE
    return GoalStatus.ON_TRACK


def summarize(goal: Goal, now: date | datetime) -> GoalSummary:
    return GoalSummary(
        days_remaining=days_remaining(goal, now),
        percent_elapsed=percent_elapsed(goal, now),
        status=status(goal, now),
    )


def toggle_completion(goal: Goal) -> Goal:
    """Flip the completed flag; dates are left alone."""
    return replace(goal, completed=not goal.completed)


def _ceil_days(start: date | datetime, end: date | datetime) -> int:
    """Ceiling of ``end - start`` in days."""
    if not isinstance(start, datetime) and not isinstance(end, datetime):
        return (end - start).days
    return math.ceil(_seconds_between(start, end) / SECONDS_PER_DAY)


def _seconds_between(start: date | datetime, end: date | datetime) -> float:
    tzinfo = _tzinfo_of(start) or _tzinfo_of(end)
    delta = _as_datetime(end, tzinfo) - _as_datetime(start, tzinfo)
    return delta.total_seconds()


def _tzinfo_of(value: date | datetime):
    return value.tzinfo if isinstance(value, datetime) else None


def _as_datetime(value: date | datetime, tzinfo) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=tzinfo)
