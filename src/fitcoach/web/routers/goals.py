"""Goal routes."""

from datetime import date

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from ...core import goal_progress
from ...models.goal import Goal, GoalStatus
from ..dependencies import CallerDep, GoalServiceDep

router = APIRouter(prefix="/goals", tags=["goals"])


class GoalResponse(BaseModel):
    """Goal with progress computed for today."""
    id: int
    name: str
    notes: str | None = None
    start_date: date
    target_date: date
    completed: bool
    days_remaining: int
    percent_elapsed: float = Field(description="Share of the goal window elapsed (0-100)")
    status: GoalStatus

    @classmethod
    def from_goal(cls, goal: Goal, today: date) -> "GoalResponse":
        summary = goal_progress.summarize(goal, today)
        return cls(
            id=goal.id,
            name=goal.name,
            notes=goal.notes,
            start_date=goal.start_date,
            target_date=goal.target_date,
            completed=goal.completed,
            days_remaining=summary.days_remaining,
            percent_elapsed=summary.percent_elapsed,
            status=summary.status,
        )


class NewGoalRequest(BaseModel):
    name: str
    target_date: date
    start_date: date | None = None
    notes: str | None = None


@router.get("")
async def list_goals(caller: CallerDep, service: GoalServiceDep) -> list[GoalResponse]:
    """The caller's goals, newest first."""
    today = date.today()
    return [GoalResponse.from_goal(goal, today) for goal in await service.list_for(caller)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: NewGoalRequest, caller: CallerDep, service: GoalServiceDep
) -> GoalResponse:
    today = date.today()
    goal = await service.create(
        caller,
        body.name,
        body.target_date,
        today,
        notes=body.notes,
        start_date=body.start_date,
    )
    return GoalResponse.from_goal(goal, today)


@router.get("/{goal_id}")
async def get_goal(goal_id: int, caller: CallerDep, service: GoalServiceDep) -> GoalResponse:
    return GoalResponse.from_goal(await service.get(caller, goal_id), date.today())


@router.post("/{goal_id}/toggle")
async def toggle_goal(goal_id: int, caller: CallerDep, service: GoalServiceDep) -> GoalResponse:
    """Flip the goal's completed flag."""
    goal = await service.toggle_completion(caller, goal_id)
    return GoalResponse.from_goal(goal, date.today())


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: int, caller: CallerDep, service: GoalServiceDep) -> None:
    await service.delete(caller, goal_id)
