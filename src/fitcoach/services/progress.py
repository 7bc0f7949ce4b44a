"""Body measurement tracking service."""

import logging
from datetime import date
from pathlib import Path

from ..core import policy
from ..core.errors import InvalidInput
from ..db.repositories import ProgressEntryRepository
from ..models.account import UserAccount
from ..models.progress import MEASUREMENT_FIELDS, ProgressEntry
from .base import require

logger = logging.getLogger(__name__)

# Circumferences are stored in whole centimetres
INTEGER_FIELDS = ("waist", "chest", "arms")


class ProgressService:
    """Record and list the caller's body measurements."""

    def __init__(self, db_path: Path | None = None):
        self.entries = ProgressEntryRepository(db_path)

    async def record(
        self,
        caller: UserAccount,
        today: date,
        notes: str | None = None,
        **measurements,
    ) -> ProgressEntry:
        """Store today's measurements; unset ones are skipped."""
        unknown = set(measurements) - set(MEASUREMENT_FIELDS)
        if unknown:
            raise InvalidInput(f"Unknown measurements: {', '.join(sorted(unknown))}")

        values = {}
        for name, value in measurements.items():
            if value is None or value == "":
                continue
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise InvalidInput(f"{name} must be a number, got {value!r}") from None
            if number < 0:
                raise InvalidInput(f"{name} must not be negative")
            values[name] = int(number) if name in INTEGER_FIELDS else number

        entry = ProgressEntry(
            user_id=caller.id,
            recorded_on=today,
            notes=notes.strip() if notes and notes.strip() else None,
            **values,
        )
        entry.id = await self.entries.create(entry)
        logger.info(
            "Progress recorded",
            extra={"user_id": caller.id, "measurements": sorted(values)},
        )
        return entry

    async def list_for(
        self, caller: UserAccount, owner_id: str | None = None
    ) -> list[ProgressEntry]:
        owner_id = owner_id or caller.id
        require(policy.can_view_progress(caller, owner_id), "view these progress entries", caller)
        return await self.entries.list_by_user(owner_id)
