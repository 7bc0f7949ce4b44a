"""Error conditions raised by the core and the services."""

from datetime import date


class FitcoachError(Exception):
    """Base class for recoverable business errors."""


class Unauthorized(FitcoachError):
    """The caller's role or ownership does not allow the action."""

    def __init__(self, action: str, caller_id: str | None = None):
        self.action = action
        self.caller_id = caller_id
        super().__init__(f"Not allowed to {action}")


class AccountDisabled(FitcoachError):
    """Login refused because the account is disabled.

    ``reactivation_date`` is set for a temporary disablement and ``None``
    for a permanent one.
    """

    def __init__(self, account_id: str, reactivation_date: date | None = None):
        self.account_id = account_id
        self.reactivation_date = reactivation_date
        if reactivation_date is not None:
            message = f"Account is temporarily disabled until {reactivation_date.isoformat()}"
        else:
            message = "Account has been disabled. Contact your coach."
        super().__init__(message)

    @property
    def is_permanent(self) -> bool:
        return self.reactivation_date is None


class InvalidInput(FitcoachError):
    """A value was rejected before any computation or write."""


class NotFound(FitcoachError):
    """A referenced record does not exist."""

    def __init__(self, kind: str, record_id):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")
