"""Pytest configuration for end-to-end tests.

These tests drive the CLI and the API against one shared data
directory, the way a deployment runs the daily reactivation job next
to the web server.
"""

import pytest
from click.testing import CliRunner

from fitcoach.cli import main


def pytest_collection_modifyitems(items):
    """Mark every test collected from this directory as an integration test."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path):
    """An initialized fitcoach data directory."""
    result = CliRunner(env={"FITCOACH_DATA_DIR": str(tmp_path)}).invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return tmp_path


@pytest.fixture
def cli(data_dir):
    """Invoke the CLI against the shared data directory."""
    runner = CliRunner(env={"FITCOACH_DATA_DIR": str(data_dir)})

    def invoke(*args):
        return runner.invoke(main, list(args))

    return invoke
