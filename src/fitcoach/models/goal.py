"""Goal data models."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class GoalStatus(str, Enum):
    """Display status of a goal."""

    ON_TRACK = "on_track"
    OVERDUE = "overdue"
    COMPLETED = "completed"


@dataclass
class Goal:
    """A dated goal owned by one account.

    Progress and overdue status are computed by
    ``fitcoach.core.goal_progress`` and never stored.
    """

    owner_id: str
    name: str
    start_date: date
    target_date: date
    notes: str | None = None
    completed: bool = False
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "owner_id": self.owner_id,
            "name": self.name,
            "notes": self.notes,
            "start_date": self.start_date.isoformat(),
            "target_date": self.target_date.isoformat(),
            "completed": self.completed,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
    ) -> "Goal":
        """Create from dictionary."""
        return cls(
            id=id,
            owner_id=data["owner_id"],
            name=data["name"],
            notes=data.get("notes"),
            start_date=_parse_date(data["start_date"]),
            target_date=_parse_date(data["target_date"]),
            completed=bool(data.get("completed", False)),
            created_at=created_at,
        )


def _parse_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])
