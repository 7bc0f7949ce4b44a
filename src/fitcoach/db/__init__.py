"""Database layer for fitcoach."""

from .engine import get_data_dir, get_db_path, init_db, seed_exercises
from .repositories import (
    AccountRepository,
    CoachClientRepository,
    ExerciseRepository,
    GoalRepository,
    ProgressEntryRepository,
    WorkoutRepository,
)

__all__ = [
    "AccountRepository",
    "CoachClientRepository",
    "ExerciseRepository",
    "get_data_dir",
    "get_db_path",
    "GoalRepository",
    "init_db",
    "ProgressEntryRepository",
    "seed_exercises",
    "WorkoutRepository",
]
