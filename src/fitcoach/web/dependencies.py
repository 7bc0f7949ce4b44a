"""FastAPI dependency injection.

The identity service authenticates the user upstream and forwards its
user id in the ``X-User-Id`` header; every route that acts on behalf of
someone resolves that id to an active account here.
"""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from ..core.errors import NotFound
from ..models.account import UserAccount
from ..services import (
    AccountService,
    ExerciseService,
    GoalService,
    ProgressService,
    WorkoutService,
)

logger = logging.getLogger(__name__)


def get_db_path(request: Request) -> Path:
    return request.app.state.db_path


DbPathDep = Annotated[Path, Depends(get_db_path)]


def get_account_service(db_path: DbPathDep) -> AccountService:
    return AccountService(db_path)


def get_goal_service(db_path: DbPathDep) -> GoalService:
    return GoalService(db_path)


def get_workout_service(db_path: DbPathDep) -> WorkoutService:
    return WorkoutService(db_path)


def get_progress_service(db_path: DbPathDep) -> ProgressService:
    return ProgressService(db_path)


def get_exercise_service(db_path: DbPathDep) -> ExerciseService:
    return ExerciseService(db_path)


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
GoalServiceDep = Annotated[GoalService, Depends(get_goal_service)]
WorkoutServiceDep = Annotated[WorkoutService, Depends(get_workout_service)]
ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]
ExerciseServiceDep = Annotated[ExerciseService, Depends(get_exercise_service)]


async def get_caller(
    service: AccountServiceDep,
    x_user_id: Annotated[str | None, Header()] = None,
) -> UserAccount:
    """Resolve the calling account.

    Raises 401 without a user id; disabled accounts are refused with the
    ``AccountDisabled`` handler (403).
    """
    if not x_user_id:
        logger.warning("Request missing user id")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header required",
        )
    try:
        return await service.login(x_user_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown user",
        ) from None


CallerDep = Annotated[UserAccount, Depends(get_caller)]
