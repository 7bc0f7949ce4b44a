"""Account routes."""

import uuid
from datetime import date

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from ...core import lifecycle
from ...core.errors import NotFound
from ...models.account import Role, UserAccount
from ..dependencies import AccountServiceDep, CallerDep

router = APIRouter(prefix="/accounts", tags=["accounts"])


# ---------------------------------------------------------------------------
# Request / Response Models
# ---------------------------------------------------------------------------

class AccountResponse(BaseModel):
    """Account with its derived lifecycle state."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    active: bool
    state: str
    disabled_at: date | None = None
    disabled_duration_days: int | None = None
    reactivation_date: date | None = None
    birth_date: date | None = None
    height: float | None = None
    body_weight: float | None = None
    objectives: str = ""

    @classmethod
    def from_account(cls, account: UserAccount) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=account.role,
            active=account.active,
            state=account.state.value,
            disabled_at=account.disabled_at,
            disabled_duration_days=account.disabled_duration_days,
            reactivation_date=lifecycle.reactivation_date(account),
            birth_date=account.birth_date,
            height=account.height,
            body_weight=account.body_weight,
            objectives=account.objectives,
        )


class NewAccountRequest(BaseModel):
    id: str | None = Field(None, description="Identity service user id (generated if omitted)")
    email: str
    first_name: str
    last_name: str
    role: Role = Role.CLIENT


class DisableRequest(BaseModel):
    duration_days: int | None = Field(
        None, description="Days until automatic reactivation; omit for a permanent disable"
    )


class LoginRequest(BaseModel):
    account_id: str


class ProfileUpdateRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    height: float | None = None
    body_weight: float | None = None
    objectives: str | None = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/register-coach", status_code=status.HTTP_201_CREATED)
async def register_coach(body: NewAccountRequest, service: AccountServiceDep) -> AccountResponse:
    """Coach self-registration. The role in the body is ignored."""
    account = await service.register_coach(
        body.id or str(uuid.uuid4()), body.email, body.first_name, body.last_name
    )
    return AccountResponse.from_account(account)


@router.post("/login")
async def login(body: LoginRequest, service: AccountServiceDep) -> AccountResponse:
    """Check an identity-service user id against the account state."""
    return AccountResponse.from_account(await service.login(body.account_id))


@router.get("/me")
async def me(caller: CallerDep) -> AccountResponse:
    return AccountResponse.from_account(caller)


@router.get("/me/coach")
async def my_coach(caller: CallerDep, service: AccountServiceDep) -> AccountResponse:
    """The coach who provisioned the caller; 404 for unlinked accounts."""
    coach = await service.coach_of(caller)
    if coach is None:
        raise NotFound("Coach for account", caller.id)
    return AccountResponse.from_account(coach)


@router.patch("/me")
async def update_me(
    body: ProfileUpdateRequest, caller: CallerDep, service: AccountServiceDep
) -> AccountResponse:
    changes = body.model_dump(exclude_unset=True)
    account = await service.update_profile(caller, caller.id, **changes)
    return AccountResponse.from_account(account)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_account(
    body: NewAccountRequest, caller: CallerDep, service: AccountServiceDep
) -> AccountResponse:
    """Coach creates a client or coach account."""
    account = await service.provision(
        caller,
        body.id or str(uuid.uuid4()),
        body.email,
        body.first_name,
        body.last_name,
        role=body.role,
    )
    return AccountResponse.from_account(account)


@router.get("")
async def list_accounts(
    caller: CallerDep, service: AccountServiceDep, mine: bool = False
) -> list[AccountResponse]:
    """All accounts, or only the caller's linked clients with ``?mine=true``."""
    accounts = await (service.list_clients(caller) if mine else service.list_accounts(caller))
    return [AccountResponse.from_account(a) for a in accounts]


@router.post("/{account_id}/disable")
async def disable_account(
    account_id: str,
    body: DisableRequest,
    caller: CallerDep,
    service: AccountServiceDep,
) -> AccountResponse:
    account = await service.disable(caller, account_id, date.today(), body.duration_days)
    return AccountResponse.from_account(account)


@router.post("/{account_id}/reactivate")
async def reactivate_account(
    account_id: str, caller: CallerDep, service: AccountServiceDep
) -> AccountResponse:
    account = await service.reactivate(caller, account_id)
    return AccountResponse.from_account(account)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(account_id: str, caller: CallerDep, service: AccountServiceDep) -> None:
    await service.delete(caller, account_id)
