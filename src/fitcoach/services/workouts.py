"""Workout catalogue service."""

import logging
from datetime import datetime
from pathlib import Path

from ..core import policy
from ..core.errors import InvalidInput, NotFound
from ..db.repositories import WorkoutRepository
from ..models.account import UserAccount
from ..models.workout import (
    DEFAULT_DURATION_MINUTES,
    Difficulty,
    Workout,
    WorkoutCategory,
    WorkoutSession,
)
from .base import require

logger = logging.getLogger(__name__)


def parse_duration(value: int | str | None) -> int:
    """Duration in minutes, falling back to the default for blank or bad input."""
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        return DEFAULT_DURATION_MINUTES
    return minutes if minutes > 0 else DEFAULT_DURATION_MINUTES


class WorkoutService:
    """Coaches author workouts; every account browses and starts public ones."""

    def __init__(self, db_path: Path | None = None):
        self.workouts = WorkoutRepository(db_path)

    async def create(
        self,
        caller: UserAccount,
        name: str,
        description: str = "",
        duration_minutes: int | str | None = None,
        difficulty: Difficulty = Difficulty.BEGINNER,
        category: WorkoutCategory = WorkoutCategory.CARDIO,
        is_public: bool = True,
    ) -> Workout:
        require(policy.can_create_workout(caller), "create workouts", caller)

        if not name or not name.strip():
            raise InvalidInput("Workout name must not be empty")

        workout = Workout(
            name=name.strip(),
            coach_id=caller.id,
            description=(description or "").strip(),
            duration_minutes=parse_duration(duration_minutes),
            difficulty=difficulty,
            category=category,
            is_public=is_public,
        )
        workout.id = await self.workouts.create(workout)
        logger.info(
            "Workout created",
            extra={"workout_id": workout.id, "coach_id": caller.id, "is_public": is_public},
        )
        return workout

    async def list_public(
        self,
        category: WorkoutCategory | None = None,
        search: str | None = None,
    ) -> list[Workout]:
        return await self.workouts.list_public(category=category, search=search)

    async def list_authored(self, caller: UserAccount) -> list[Workout]:
        """Workouts the caller wrote, including private ones."""
        return await self.workouts.list_by_coach(caller.id)

    async def start(
        self, caller: UserAccount, workout_id: int, now: datetime
    ) -> WorkoutSession:
        """Record that the caller started a workout."""
        workout = await self.workouts.get(workout_id)
        if workout is None:
            raise NotFound("Workout", workout_id)
        require(policy.can_view_workout(caller, workout), "start this workout", caller)

        session = WorkoutSession(user_id=caller.id, workout_id=workout_id, started_at=now)
        session.id = await self.workouts.create_session(session)
        logger.info("Workout started", extra={"workout_id": workout_id, "user_id": caller.id})
        return session

    async def sessions_for(self, caller: UserAccount) -> list[WorkoutSession]:
        return await self.workouts.list_sessions(caller.id)
