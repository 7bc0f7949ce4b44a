"""Account management service.

Wires the access rules and the lifecycle computations to storage:
every method authorizes first, computes the new record, and only then
writes it.
"""

import logging
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

from ..core import lifecycle, policy
from ..core.errors import AccountDisabled, InvalidInput, NotFound
from ..db.repositories import AccountRepository, CoachClientRepository
from ..models.account import CoachClientLink, Role, UserAccount
from .base import require

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "birth_date", "height", "body_weight", "objectives")


class AccountService:
    """Provisioning, lifecycle transitions and login checks for accounts."""

    def __init__(self, db_path: Path | None = None):
        self.accounts = AccountRepository(db_path)
        self.links = CoachClientRepository(db_path)

    async def get(self, account_id: str) -> UserAccount:
        """Load an account or raise ``NotFound``."""
        account = await self.accounts.get(account_id)
        if account is None:
            raise NotFound("Account", account_id)
        return account

    async def register_coach(
        self, account_id: str, email: str, first_name: str, last_name: str
    ) -> UserAccount:
        """Self-registration. Always creates an active coach."""
        account = UserAccount(
            id=account_id,
            email=email.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            role=Role.COACH,
        )
        await self._create(account)
        logger.info("Coach registered", extra={"account_id": account_id})
        return account

    async def provision(
        self,
        caller: UserAccount,
        account_id: str,
        email: str,
        first_name: str,
        last_name: str,
        role: Role = Role.CLIENT,
    ) -> UserAccount:
        """A coach creates an account; clients are linked to that coach."""
        require(policy.can_manage_users(caller), "create accounts", caller)

        account = UserAccount(
            id=account_id,
            email=email.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            role=role,
            created_by=caller.id,
        )
        await self._create(account)

        if role == Role.CLIENT:
            await self.links.create(CoachClientLink(coach_id=caller.id, client_id=account.id))

        logger.info(
            "Account provisioned",
            extra={"account_id": account.id, "role": role.value, "coach_id": caller.id},
        )
        return account

    async def list_accounts(self, caller: UserAccount) -> list[UserAccount]:
        require(policy.can_manage_users(caller), "list accounts", caller)
        return await self.accounts.list_all()

    async def coach_of(self, account: UserAccount) -> UserAccount | None:
        """The coach who provisioned a client, if still present."""
        link = await self.links.get_coach(account.id)
        if link is None:
            return None
        return await self.accounts.get(link.coach_id)

    async def list_clients(self, caller: UserAccount) -> list[UserAccount]:
        """Accounts linked to the calling coach."""
        require(policy.can_manage_users(caller), "list clients", caller)
        clients = []
        for link in await self.links.list_clients(caller.id):
            account = await self.accounts.get(link.client_id)
            if account is not None:
                clients.append(account)
        return clients

    async def disable(
        self,
        caller: UserAccount,
        target_id: str,
        today: date,
        duration_days: int | None = None,
    ) -> UserAccount:
        """Disable an account, for ``duration_days`` or permanently.

        An already disabled account is returned as stored.
        """
        target = await self.get(target_id)
        require(policy.can_disable(caller, target), "disable accounts", caller)

        updated = lifecycle.disable(target, today, duration_days)
        if updated is target:
            logger.info("Account already disabled", extra={"account_id": target_id})
            return target

        await self.accounts.update(updated)
        logger.info(
            "Account disabled",
            extra={
                "account_id": target_id,
                "by": caller.id,
                "duration_days": duration_days,
                "reactivation_date": lifecycle.reactivation_date(updated),
            },
        )
        return updated

    async def reactivate(self, caller: UserAccount, target_id: str) -> UserAccount:
        target = await self.get(target_id)
        require(policy.can_reactivate(caller, target), "reactivate accounts", caller)

        if target.active:
            return target

        updated = lifecycle.reactivate(target)
        await self.accounts.update(updated)
        logger.info("Account reactivated", extra={"account_id": target_id, "by": caller.id})
        return updated

    async def delete(self, caller: UserAccount, target_id: str) -> None:
        """Remove an account and all of its data."""
        target = await self.get(target_id)
        require(policy.can_delete(caller, target), "delete accounts", caller)

        await self.accounts.delete(target_id)
        logger.info("Account deleted", extra={"account_id": target_id, "by": caller.id})

    async def login(self, account_id: str) -> UserAccount:
        """Gate a successful credential exchange on the account state.

        ``account_id`` is the identifier returned by the identity service.
        Raises ``AccountDisabled`` for inactive accounts.
        """
        account = await self.get(account_id)
        try:
            return lifecycle.check_login(account)
        except AccountDisabled:
            logger.warning("Login refused for disabled account", extra={"account_id": account_id})
            raise

    async def update_profile(
        self, caller: UserAccount, target_id: str, **changes
    ) -> UserAccount:
        """Update profile details. Only the account owner may do this."""
        target = await self.get(target_id)
        require(policy.can_edit_profile(caller, target), "edit this profile", caller)

        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise InvalidInput(f"Unknown profile fields: {', '.join(sorted(unknown))}")
        for name in ("first_name", "last_name"):
            if name in changes and not (changes[name] or "").strip():
                raise InvalidInput(f"{name.replace('_', ' ').capitalize()} must not be empty")

        updated = replace(target, **changes)
        await self.accounts.update(updated)
        return updated

    async def reactivate_due(self, now: date | datetime) -> list[UserAccount]:
        """Reactivate every temporarily disabled account whose period is over.

        Meant to be run periodically; running it twice is harmless.
        """
        reactivated = []
        for account in await self.accounts.list_disabled():
            if not lifecycle.is_eligible_for_auto_reactivation(account, now):
                continue
            updated = lifecycle.reactivate(account)
            await self.accounts.update(updated)
            reactivated.append(updated)
            logger.info("Account auto-reactivated", extra={"account_id": account.id})
        return reactivated

    async def _create(self, account: UserAccount) -> None:
        if not account.id:
            raise InvalidInput("Account id is required")
        if not account.email or not account.first_name or not account.last_name:
            raise InvalidInput("Email, first name and last name are required")
        if await self.accounts.get(account.id) is not None:
            raise InvalidInput(f"Account {account.id} already exists")
        if await self.accounts.get_by_email(account.email) is not None:
            raise InvalidInput(f"Email {account.email} is already registered")
        await self.accounts.create(account)

