"""User account data models."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class Role(str, Enum):
    """Account role."""

    CLIENT = "client"  # Trainee, owns goals and progress entries
    COACH = "coach"  # Manages users and authors workouts


class AccountState(str, Enum):
    """Lifecycle state derived from the active/disabled fields."""

    ACTIVE = "active"
    TEMPORARILY_DISABLED = "temporarily_disabled"
    PERMANENTLY_DISABLED = "permanently_disabled"


@dataclass
class UserAccount:
    """A coach or client account and its profile details.

    The lifecycle fields (``active``, ``disabled_at``,
    ``disabled_duration_days``) are only changed through
    ``fitcoach.core.lifecycle``. ``disabled_at`` and
    ``disabled_duration_days`` are either both set (temporary
    disablement) or both unset.
    """

    id: str
    email: str
    first_name: str
    last_name: str
    role: Role = Role.CLIENT
    active: bool = True
    disabled_at: date | None = None
    disabled_duration_days: int | None = None
    created_by: str | None = None
    birth_date: date | None = None
    height: float | None = None  # in cm
    body_weight: float | None = None  # in kg
    objectives: str = ""
    created_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_coach(self) -> bool:
        return self.role == Role.COACH

    @property
    def state(self) -> AccountState:
        """Current lifecycle state."""
        if self.active:
            return AccountState.ACTIVE
        if self.disabled_at is not None and self.disabled_duration_days is not None:
            return AccountState.TEMPORARILY_DISABLED
        return AccountState.PERMANENTLY_DISABLED

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "active": self.active,
            "disabled_at": self.disabled_at.isoformat() if self.disabled_at else None,
            "disabled_duration_days": self.disabled_duration_days,
            "created_by": self.created_by,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "height": self.height,
            "body_weight": self.body_weight,
            "objectives": self.objectives,
        }

    @classmethod
    def from_dict(cls, data: dict, created_at: datetime | None = None) -> "UserAccount":
        """Create from dictionary."""
        disabled_at = None
        if data.get("disabled_at"):
            disabled_at = date.fromisoformat(data["disabled_at"][:10])

        birth_date = None
        if data.get("birth_date"):
            birth_date = date.fromisoformat(data["birth_date"][:10])

        return cls(
            id=data["id"],
            email=data["email"],
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            role=Role(data.get("role", "client")),
            active=bool(data.get("active", True)),
            disabled_at=disabled_at,
            disabled_duration_days=data.get("disabled_duration_days"),
            created_by=data.get("created_by"),
            birth_date=birth_date,
            height=data.get("height"),
            body_weight=data.get("body_weight"),
            objectives=data.get("objectives") or "",
            created_at=created_at,
        )


@dataclass
class CoachClientLink:
    """Association between a coach and a client they provisioned."""

    coach_id: str
    client_id: str
    id: int | None = None
