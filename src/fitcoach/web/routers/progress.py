"""Body measurement routes."""

from datetime import date

from fastapi import APIRouter, status
from pydantic import BaseModel

from ...models.progress import ProgressEntry
from ..dependencies import CallerDep, ProgressServiceDep

router = APIRouter(prefix="/progress", tags=["progress"])


class ProgressEntryModel(BaseModel):
    """Measurements; every field is optional."""
    weight: float | None = None
    muscle_mass: float | None = None
    body_fat: float | None = None
    waist: int | None = None
    chest: int | None = None
    arms: int | None = None
    notes: str | None = None


class ProgressEntryResponse(ProgressEntryModel):
    id: int
    recorded_on: date

    @classmethod
    def from_entry(cls, entry: ProgressEntry) -> "ProgressEntryResponse":
        return cls(id=entry.id, recorded_on=entry.recorded_on, notes=entry.notes, **entry.measurements())


@router.get("")
async def list_entries(caller: CallerDep, service: ProgressServiceDep) -> list[ProgressEntryResponse]:
    """The caller's measurement history, most recent first."""
    return [ProgressEntryResponse.from_entry(e) for e in await service.list_for(caller)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_entry(
    body: ProgressEntryModel, caller: CallerDep, service: ProgressServiceDep
) -> ProgressEntryResponse:
    measurements = body.model_dump(exclude={"notes"})
    entry = await service.record(caller, date.today(), notes=body.notes, **measurements)
    return ProgressEntryResponse.from_entry(entry)
