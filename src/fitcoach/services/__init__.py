"""Application services: access check, core computation, then storage."""

from .accounts import AccountService
from .exercises import ExerciseService
from .goals import GoalService
from .progress import ProgressService
from .workouts import WorkoutService

__all__ = [
    "AccountService",
    "ExerciseService",
    "GoalService",
    "ProgressService",
    "WorkoutService",
]
