"""Data models for fitcoach."""

from .account import AccountState, CoachClientLink, Role, UserAccount
from .exercise import COMMON_EXERCISES, Exercise, MuscleGroup
from .goal import Goal, GoalStatus
from .progress import ProgressEntry
from .workout import Difficulty, Workout, WorkoutCategory, WorkoutSession

__all__ = [
    "AccountState",
    "CoachClientLink",
    "COMMON_EXERCISES",
    "Difficulty",
    "Exercise",
    "Goal",
    "GoalStatus",
    "MuscleGroup",
    "ProgressEntry",
    "Role",
    "UserAccount",
    "Workout",
    "WorkoutCategory",
    "WorkoutSession",
]
