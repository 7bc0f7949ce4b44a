"""Workout catalogue models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DEFAULT_DURATION_MINUTES = 30


class Difficulty(str, Enum):
    """Workout difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WorkoutCategory(str, Enum):
    """Workout category used for catalogue filtering."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    YOGA = "yoga"
    BOXING = "boxing"
    STRETCHING = "stretching"


@dataclass
class Workout:
    """A coach-authored workout."""

    name: str
    coach_id: str
    description: str = ""
    duration_minutes: int = DEFAULT_DURATION_MINUTES
    difficulty: Difficulty = Difficulty.BEGINNER
    category: WorkoutCategory = WorkoutCategory.CARDIO
    is_public: bool = True
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "description": self.description,
            "duration_minutes": self.duration_minutes,
            "difficulty": self.difficulty.value,
            "category": self.category.value,
            "coach_id": self.coach_id,
            "is_public": self.is_public,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
    ) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            coach_id=data["coach_id"],
            description=data.get("description") or "",
            duration_minutes=data.get("duration_minutes") or DEFAULT_DURATION_MINUTES,
            difficulty=Difficulty(data.get("difficulty", "beginner")),
            category=WorkoutCategory(data.get("category", "cardio")),
            is_public=bool(data.get("is_public", True)),
            created_at=created_at,
        )


@dataclass
class WorkoutSession:
    """An account's run through a workout."""

    user_id: str
    workout_id: int
    started_at: datetime
    completed: bool = False
    id: int | None = None
