"""fitcoach: coach-managed fitness tracking."""

__version__ = "0.1.0"
