"""Goal service: owner-only goal management plus derived progress."""

import logging
from datetime import date, datetime
from pathlib import Path

from ..core import goal_progress, policy
from ..core.errors import InvalidInput, NotFound
from ..db.repositories import GoalRepository
from ..models.account import UserAccount
from ..models.goal import Goal
from .base import require

logger = logging.getLogger(__name__)


class GoalService:
    """Create, list and complete goals for the calling account."""

    def __init__(self, db_path: Path | None = None):
        self.goals = GoalRepository(db_path)

    async def create(
        self,
        caller: UserAccount,
        name: str,
        target_date: date,
        today: date,
        notes: str | None = None,
        start_date: date | None = None,
    ) -> Goal:
        """Create a goal owned by the caller, starting ``today`` by default.

        The target date may already be in the past.
        """
        if target_date is None:
            raise InvalidInput("Target date is required")
        goal = Goal(
            owner_id=caller.id,
            name=goal_progress.validate_goal_name(name),
            notes=notes.strip() if notes and notes.strip() else None,
            start_date=start_date or today,
            target_date=target_date,
        )
        goal.id = await self.goals.create(goal)
        logger.info("Goal created", extra={"goal_id": goal.id, "owner_id": caller.id})
        return goal

    async def get(self, caller: UserAccount, goal_id: int) -> Goal:
        goal = await self._load(goal_id)
        require(policy.can_view_goal(caller, goal), "view this goal", caller)
        return goal

    async def list_for(self, caller: UserAccount) -> list[Goal]:
        """The caller's own goals, newest first."""
        return await self.goals.list_by_owner(caller.id)

    async def summaries(
        self, caller: UserAccount, now: date | datetime
    ) -> list[tuple[Goal, goal_progress.GoalSummary]]:
        """The caller's goals paired with their progress at ``now``."""
        return [(goal, goal_progress.summarize(goal, now)) for goal in await self.list_for(caller)]

    async def toggle_completion(self, caller: UserAccount, goal_id: int) -> Goal:
        goal = await self._load(goal_id)
        require(policy.can_edit_goal(caller, goal), "edit this goal", caller)

        updated = goal_progress.toggle_completion(goal)
        await self.goals.update(updated)
        logger.info(
            "Goal completion toggled",
            extra={"goal_id": goal_id, "completed": updated.completed},
        )
        return updated

    async def delete(self, caller: UserAccount, goal_id: int) -> None:
        goal = await self._load(goal_id)
        require(policy.can_edit_goal(caller, goal), "delete this goal", caller)
        await self.goals.delete(goal_id)

    async def _load(self, goal_id: int) -> Goal:
        goal = await self.goals.get(goal_id)
        if goal is None:
            raise NotFound("Goal", goal_id)
        return goal
