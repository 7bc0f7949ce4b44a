"""Shared helpers for the application services."""

import logging

from ..core import policy
from ..core.errors import Unauthorized
from ..models.account import UserAccount

logger = logging.getLogger(__name__)


def require(allowed: bool, action: str, caller: UserAccount) -> None:
    """Authorize an action, logging refusals before re-raising."""
    try:
        policy.authorize(allowed, action, caller)
    except Unauthorized:
        logger.warning("Unauthorized action", extra={"action": action, "caller_id": caller.id})
        raise
