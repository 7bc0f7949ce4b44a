"""Role and ownership rules for account, goal and workout actions.

Each ``can_*`` predicate is side-effect free. Services call
``authorize`` with the predicate's result before touching storage, so a
refused action never leaves a partial write behind.
"""

from ..models.account import UserAccount
from ..models.goal import Goal
from ..models.workout import Workout
from .errors import Unauthorized


def can_manage_users(caller: UserAccount) -> bool:
    return caller.is_coach


def can_disable(caller: UserAccount, target: UserAccount) -> bool:
    """Any coach may disable any account, not only its own clients."""
    return caller.is_coach


def can_reactivate(caller: UserAccount, target: UserAccount) -> bool:
    return can_disable(caller, target)


def can_delete(caller: UserAccount, target: UserAccount) -> bool:
    return can_disable(caller, target)


def can_edit_profile(caller: UserAccount, target: UserAccount) -> bool:
    return caller.id == target.id


def can_view_goal(caller: UserAccount, goal: Goal) -> bool:
    return caller.id == goal.owner_id


def can_edit_goal(caller: UserAccount, goal: Goal) -> bool:
    return caller.id == goal.owner_id


def can_create_workout(caller: UserAccount) -> bool:
    return caller.is_coach


def can_view_workout(caller: UserAccount, workout: Workout) -> bool:
    """Public workouts are visible to everyone, private ones to their author."""
    return workout.is_public or workout.coach_id == caller.id


def can_view_progress(caller: UserAccount, owner_id: str) -> bool:
    return caller.id == owner_id


def authorize(allowed: bool, action: str, caller: UserAccount | None = None) -> None:
    """Raise ``Unauthorized`` unless ``allowed``."""
    if not allowed:
        raise Unauthorized(action, caller.id if caller else None)
