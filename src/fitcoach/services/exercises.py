"""Exercise library service."""

from pathlib import Path

from ..core.errors import NotFound
from ..db.repositories import ExerciseRepository
from ..models.exercise import Exercise, MuscleGroup


class ExerciseService:
    """Read-only access to the built-in exercise library."""

    def __init__(self, db_path: Path | None = None):
        self.exercises = ExerciseRepository(db_path)

    async def list_all(self, muscle_group: MuscleGroup | None = None) -> list[Exercise]:
        return await self.exercises.list_all(muscle_group)

    async def get(self, exercise_id: int) -> Exercise:
        exercise = await self.exercises.get(exercise_id)
        if exercise is None:
            raise NotFound("Exercise", exercise_id)
        return exercise
