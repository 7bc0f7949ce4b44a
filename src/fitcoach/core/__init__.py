"""Account lifecycle, goal progress and access rules.

Pure computations over the models; no storage access.
"""

from .errors import AccountDisabled, FitcoachError, InvalidInput, NotFound, Unauthorized

__all__ = [
    "AccountDisabled",
    "FitcoachError",
    "InvalidInput",
    "NotFound",
    "Unauthorized",
]
