"""Exercise library definitions."""

from dataclasses import dataclass
from enum import Enum

from .workout import Difficulty


class MuscleGroup(str, Enum):
    """Muscle groups the library is browsed by."""

    GLUTES = "glutes"
    BACK = "back"
    BICEPS = "biceps"
    CORE = "core"
    QUADS = "quads"
    CHEST = "chest"


@dataclass
class Exercise:
    """A single movement from the built-in library."""

    name: str
    muscle_group: MuscleGroup
    description: str = ""
    duration_seconds: int = 45
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "muscle_group": self.muscle_group.value,
            "description": self.description,
            "duration_seconds": self.duration_seconds,
            "difficulty": self.difficulty.value,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            muscle_group=MuscleGroup(data["muscle_group"]),
            description=data.get("description") or "",
            duration_seconds=data.get("duration_seconds") or 45,
            difficulty=Difficulty(data.get("difficulty", "intermediate")),
        )


# Built-in library, seeded by ``fitcoach init``
COMMON_EXERCISES: list[Exercise] = [
    # Glutes
    Exercise(
        name="Dumbbell Kickback",
        muscle_group=MuscleGroup.GLUTES,
        description="Strengthens and tones the glutes",
        duration_seconds=45,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    Exercise(
        name="Single-Leg Hip Thrust",
        muscle_group=MuscleGroup.GLUTES,
        description="One-legged hip thrust for maximum activation",
        duration_seconds=30,
        difficulty=Difficulty.ADVANCED,
    ),
    # Back
    Exercise(
        name="Back Extension",
        muscle_group=MuscleGroup.BACK,
        description="Strengthens the posterior chain",
        duration_seconds=60,
        difficulty=Difficulty.BEGINNER,
    ),
    Exercise(
        name="Single-Arm Dumbbell Row",
        muscle_group=MuscleGroup.BACK,
        description="Builds the lats and rhomboids",
        duration_seconds=45,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    # Biceps
    Exercise(
        name="Dumbbell Spider Curl",
        muscle_group=MuscleGroup.BICEPS,
        description="Strict biceps isolation",
        duration_seconds=45,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    Exercise(
        name="Supinating Dumbbell Curl",
        muscle_group=MuscleGroup.BICEPS,
        description="Curl with a wrist rotation for a full contraction",
        duration_seconds=45,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    # Core
    Exercise(
        name="Side Plank Hand to Toe",
        muscle_group=MuscleGroup.CORE,
        description="Dynamic side plank for core stability",
        duration_seconds=30,
        difficulty=Difficulty.ADVANCED,
    ),
    Exercise(
        name="LLPPT Plank",
        muscle_group=MuscleGroup.CORE,
        description="Long lever posterior pelvic tilt plank",
        duration_seconds=60,
        difficulty=Difficulty.ADVANCED,
    ),
    # Quads
    Exercise(
        name="Leg Extension",
        muscle_group=MuscleGroup.QUADS,
        description="Quadriceps isolation",
        duration_seconds=45,
        difficulty=Difficulty.INTERMEDIATE,
    ),
    # Chest
    Exercise(
        name="Chest Press",
        muscle_group=MuscleGroup.CHEST,
        description="Basic chest press",
        duration_seconds=45,
        difficulty=Difficulty.BEGINNER,
    ),
]
