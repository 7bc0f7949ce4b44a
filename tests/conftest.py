"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date
from pathlib import Path

import pytest

from fitcoach.db import init_db
from fitcoach.models.account import Role, UserAccount
from fitcoach.models.goal import Goal


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """A temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def coach():
    """An active coach account."""
    return UserAccount(
        id="coach-1",
        email="coach@example.com",
        first_name="Sam",
        last_name="Reed",
        role=Role.COACH,
    )


@pytest.fixture
def client_account():
    """An active client account."""
    return UserAccount(
        id="client-1",
        email="client@example.com",
        first_name="Alex",
        last_name="Moreau",
        role=Role.CLIENT,
        created_by="coach-1",
    )


@pytest.fixture
def sample_goal():
    """A ten-day goal owned by the client."""
    return Goal(
        id=1,
        owner_id="client-1",
        name="Run 10km",
        start_date=date(2024, 1, 1),
        target_date=date(2024, 1, 11),
    )
