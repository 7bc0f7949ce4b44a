"""CLI commands for fitcoach."""

from .exercises import exercises
from .goals import goals
from .init import init
from .progress import progress
from .serve import serve
from .users import users
from .workouts import workouts

__all__ = [
    "exercises",
    "goals",
    "init",
    "progress",
    "serve",
    "users",
    "workouts",
]
