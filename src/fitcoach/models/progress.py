"""Body measurement tracking model."""

from dataclasses import dataclass, fields
from datetime import date

MEASUREMENT_FIELDS = ("weight", "muscle_mass", "body_fat", "waist", "chest", "arms")


@dataclass
class ProgressEntry:
    """A dated set of body measurements.

    Every measurement is optional; only the ones provided are stored.
    Weight and muscle mass are in kg, body fat in percent, and the
    circumferences (waist, chest, arms) in whole centimetres.
    """

    user_id: str
    recorded_on: date
    weight: float | None = None
    muscle_mass: float | None = None
    body_fat: float | None = None
    waist: int | None = None
    chest: int | None = None
    arms: int | None = None
    notes: str | None = None
    id: int | None = None

    def measurements(self) -> dict[str, float]:
        """Return only the measurements that were recorded."""
        return {
            name: getattr(self, name)
            for name in MEASUREMENT_FIELDS
            if getattr(self, name) is not None
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "user_id": self.user_id,
            "recorded_on": self.recorded_on.isoformat(),
        }
        data.update(self.measurements())
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "ProgressEntry":
        """Create from dictionary."""
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known and k != "recorded_on"}
        kwargs["recorded_on"] = date.fromisoformat(str(data["recorded_on"])[:10])
        kwargs["id"] = id
        return cls(**kwargs)
