"""Workout routes."""

from datetime import datetime

from fastapi import APIRouter, status
from pydantic import BaseModel

from ...models.workout import Difficulty, Workout, WorkoutCategory, WorkoutSession
from ..dependencies import CallerDep, WorkoutServiceDep

router = APIRouter(prefix="/workouts", tags=["workouts"])


class WorkoutResponse(BaseModel):
    id: int
    name: str
    description: str
    duration_minutes: int
    difficulty: Difficulty
    category: WorkoutCategory
    coach_id: str
    is_public: bool

    @classmethod
    def from_workout(cls, workout: Workout) -> "WorkoutResponse":
        return cls(
            id=workout.id,
            name=workout.name,
            description=workout.description,
            duration_minutes=workout.duration_minutes,
            difficulty=workout.difficulty,
            category=workout.category,
            coach_id=workout.coach_id,
            is_public=workout.is_public,
        )


class NewWorkoutRequest(BaseModel):
    name: str
    description: str = ""
    duration_minutes: int | None = None
    difficulty: Difficulty = Difficulty.BEGINNER
    category: WorkoutCategory = WorkoutCategory.CARDIO
    is_public: bool = True


class SessionResponse(BaseModel):
    id: int
    workout_id: int
    started_at: datetime
    completed: bool

    @classmethod
    def from_session(cls, session: WorkoutSession) -> "SessionResponse":
        return cls(
            id=session.id,
            workout_id=session.workout_id,
            started_at=session.started_at,
            completed=session.completed,
        )


@router.get("")
async def list_workouts(
    caller: CallerDep,
    service: WorkoutServiceDep,
    category: WorkoutCategory | None = None,
    search: str | None = None,
    mine: bool = False,
) -> list[WorkoutResponse]:
    """Public workouts, optionally filtered.

    With ``?mine=true`` the caller's own workouts are listed instead,
    private ones included; the other filters are ignored.
    """
    if mine:
        workouts = await service.list_authored(caller)
    else:
        workouts = await service.list_public(category=category, search=search)
    return [WorkoutResponse.from_workout(w) for w in workouts]


@router.get("/sessions")
async def list_sessions(caller: CallerDep, service: WorkoutServiceDep) -> list[SessionResponse]:
    """Workouts the caller started, most recent first."""
    return [SessionResponse.from_session(s) for s in await service.sessions_for(caller)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_workout(
    body: NewWorkoutRequest, caller: CallerDep, service: WorkoutServiceDep
) -> WorkoutResponse:
    """Create a workout (coaches only)."""
    workout = await service.create(
        caller,
        body.name,
        description=body.description,
        duration_minutes=body.duration_minutes,
        difficulty=body.difficulty,
        category=body.category,
        is_public=body.is_public,
    )
    return WorkoutResponse.from_workout(workout)


@router.post("/{workout_id}/start", status_code=status.HTTP_201_CREATED)
async def start_workout(
    workout_id: int, caller: CallerDep, service: WorkoutServiceDep
) -> SessionResponse:
    session = await service.start(caller, workout_id, datetime.now())
    return SessionResponse.from_session(session)
