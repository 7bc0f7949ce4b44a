"""Exercise library routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from ...models.exercise import Exercise, MuscleGroup
from ...models.workout import Difficulty
from ..dependencies import CallerDep, ExerciseServiceDep

router = APIRouter(prefix="/exercises", tags=["exercises"])


class ExerciseResponse(BaseModel):
    id: int
    name: str
    muscle_group: MuscleGroup
    description: str
    duration_seconds: int
    difficulty: Difficulty

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseResponse":
        return cls(
            id=exercise.id,
            name=exercise.name,
            muscle_group=exercise.muscle_group,
            description=exercise.description,
            duration_seconds=exercise.duration_seconds,
            difficulty=exercise.difficulty,
        )


@router.get("")
async def list_exercises(
    caller: CallerDep,
    service: ExerciseServiceDep,
    category: MuscleGroup | None = None,
) -> list[ExerciseResponse]:
    """The exercise library, optionally for one muscle group."""
    return [ExerciseResponse.from_exercise(e) for e in await service.list_all(category)]


@router.get("/{exercise_id}")
async def get_exercise(
    exercise_id: int, caller: CallerDep, service: ExerciseServiceDep
) -> ExerciseResponse:
    return ExerciseResponse.from_exercise(await service.get(exercise_id))
