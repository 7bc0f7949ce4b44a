"""Account lifecycle: disablement, reactivation and the login gate.

An account is in one of three states (see ``AccountState``)::

    ACTIVE --disable(days)--> TEMPORARILY_DISABLED --reactivate--> ACTIVE
    ACTIVE --disable()------> PERMANENTLY_DISABLED --reactivate--> ACTIVE

All functions are pure: they take an account and return a new one, and
every date-dependent function receives the current date explicitly.
Nothing here schedules the automatic reactivation; a periodic job is
expected to call ``is_eligible_for_auto_reactivation`` and then
``reactivate``.
"""

from dataclasses import replace
from datetime import date, datetime, timedelta

from ..models.account import AccountState, UserAccount
from .errors import AccountDisabled, InvalidInput


def validate_duration(duration_days: int | None) -> None:
    """Reject anything but a positive integer number of days (or ``None``)."""
    if duration_days is None:
        return
    if isinstance(duration_days, bool) or not isinstance(duration_days, int):
        raise InvalidInput(f"Disable duration must be a whole number of days, got {duration_days!r}")
    if duration_days <= 0:
        raise InvalidInput(f"Disable duration must be positive, got {duration_days}")


def disable(
    account: UserAccount, today: date, duration_days: int | None = None
) -> UserAccount:
    """Disable an account, temporarily when ``duration_days`` is given.

    Disabling an account that is already disabled returns it unchanged;
    the original ``disabled_at`` is never refreshed.
    """
    validate_duration(duration_days)

    if not account.active:
        return account

    if duration_days is None:
        return replace(account, active=False, disabled_at=None, disabled_duration_days=None)

    return replace(
        account,
        active=False,
        disabled_at=_as_date(today),
        disabled_duration_days=duration_days,
    )


def reactivate(account: UserAccount) -> UserAccount:
    """Return the account active with all disablement data cleared."""
    return replace(account, active=True, disabled_at=None, disabled_duration_days=None)


def reactivation_date(account: UserAccount) -> date | None:
    """Date a temporarily disabled account becomes usable again.

    Returns ``None`` for active and permanently disabled accounts.
    """
    if account.state != AccountState.TEMPORARILY_DISABLED:
        return None
    return account.disabled_at + timedelta(days=account.disabled_duration_days)


def is_eligible_for_auto_reactivation(account: UserAccount, now: date | datetime) -> bool:
    """True once a temporary disablement has run its course."""
    due = reactivation_date(account)
    if due is None:
        return False
    return _as_date(now) >= due


def can_login(account: UserAccount) -> bool:
    return account.active


def check_login(account: UserAccount) -> UserAccount:
    """Return the account if it may log in, else raise ``AccountDisabled``."""
    if can_login(account):
        return account
    raise AccountDisabled(account.id, reactivation_date(account))


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date
    if isinstance(value, datetime):
        return value.date()
    return value
