"""Tests for the command line interface."""

from datetime import date

import pytest
from click.testing import CliRunner

from fitcoach.cli import main
from fitcoach.commands.goals import describe_progress
from fitcoach.commands.users import describe_state
from fitcoach.core import lifecycle


@pytest.fixture
def runner(tmp_path):
    """A CLI runner pointed at an initialized data directory."""
    runner = CliRunner(env={"FITCOACH_DATA_DIR": str(tmp_path)})
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return runner


@pytest.fixture
def coach_runner(runner):
    """Runner with a registered coach and a provisioned client."""
    result = runner.invoke(
        main,
        ["users", "register-coach", "--id", "coach-1", "--email", "coach@example.com",
         "--first-name", "Sam", "--last-name", "Reed"],
    )
    assert result.exit_code == 0, result.output
    result = runner.invoke(
        main,
        ["users", "create", "--as", "coach-1", "--id", "client-1", "--email", "client@example.com",
         "--first-name", "Alex", "--last-name", "Moreau"],
    )
    assert result.exit_code == 0, result.output
    return runner


class TestInit:
    """Tests for the init command."""

    def test_requires_init(self, tmp_path):
        """Commands refuse to run before init."""
        result = CliRunner(env={"FITCOACH_DATA_DIR": str(tmp_path)}).invoke(main, ["users", "login", "x"])

        assert result.exit_code == 1
        assert "not initialized" in result.output

    def test_init(self, runner):
        """Running init twice is harmless."""
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert "Database initialized" in result.output


class TestUsersCommands:
    """Tests for the users command group."""

    def test_list(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "list", "--as", "coach-1"])

        assert result.exit_code == 0
        assert "client-1" in result.output
        assert "Total: 2 account(s)" in result.output

    def test_client_cannot_list(self, coach_runner):
        """Refusals are reported and exit with status 1."""
        result = coach_runner.invoke(main, ["users", "list", "--as", "client-1"])

        assert result.exit_code == 1
        assert "Not allowed to list accounts" in result.output

    def test_caller_from_environment(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "list", "--mine"], env={"FITCOACH_ACCOUNT": "coach-1"})

        assert result.exit_code == 0
        assert "Total: 1 account(s)" in result.output

    def test_disable_and_login(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "disable", "--as", "coach-1", "client-1", "--days", "14"])
        assert result.exit_code == 0
        assert "disabled for 14 days" in result.output

        result = coach_runner.invoke(main, ["users", "login", "client-1"])
        assert result.exit_code == 1
        assert "temporarily disabled until" in result.output

    def test_disable_twice(self, coach_runner):
        coach_runner.invoke(main, ["users", "disable", "--as", "coach-1", "client-1"])

        result = coach_runner.invoke(main, ["users", "disable", "--as", "coach-1", "client-1", "--days", "3"])

        assert result.exit_code == 0
        assert "already disabled" in result.output

    def test_disable_zero_days(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "disable", "--as", "coach-1", "client-1", "--days", "0"])

        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_reactivate_due(self, coach_runner):
        coach_runner.invoke(main, ["users", "disable", "--as", "coach-1", "client-1", "--days", "1"])

        result = coach_runner.invoke(main, ["users", "reactivate-due", "--date", "2999-01-01"])

        assert result.exit_code == 0
        assert "Reactivated: Alex Moreau" in result.output

    def test_delete(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "delete", "--as", "coach-1", "client-1", "--yes"])

        assert result.exit_code == 0
        result = coach_runner.invoke(main, ["users", "login", "client-1"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestGoalsCommands:
    """Tests for the goals command group."""

    def test_create_and_list(self, coach_runner):
        result = coach_runner.invoke(
            main,
            ["goals", "create", "--as", "client-1", "Run 10km",
             "--start", "2020-01-01", "--target", "2020-01-11"],
        )
        assert result.exit_code == 0
        assert "Goal created: Run 10km" in result.output

        result = coach_runner.invoke(main, ["goals", "list", "--as", "client-1"])
        assert result.exit_code == 0
        assert "100%" in result.output
        assert "days overdue" in result.output

    def test_toggle(self, coach_runner):
        coach_runner.invoke(main, ["goals", "create", "--as", "client-1", "Goal", "--target", "2999-01-01"])

        result = coach_runner.invoke(main, ["goals", "toggle", "--as", "client-1", "1"])

        assert "Goal completed: Goal" in result.output

    def test_other_account_cannot_show(self, coach_runner):
        coach_runner.invoke(main, ["goals", "create", "--as", "client-1", "Goal", "--target", "2999-01-01"])

        result = coach_runner.invoke(main, ["goals", "show", "--as", "coach-1", "1"])

        assert result.exit_code == 1


class TestDescriptions:
    """Tests for the status line helpers."""

    def test_describe_progress(self, sample_goal):
        assert describe_progress(sample_goal, date(2024, 1, 6)) == "5 days remaining"
        assert describe_progress(sample_goal, date(2024, 1, 15)) == "4 days overdue"

    def test_describe_state(self, client_account):
        assert describe_state(client_account) == "Active"
        disabled = lifecycle.disable(client_account, date(2024, 1, 1), 10)
        assert describe_state(disabled) == "Disabled until 2024-01-11"
        assert describe_state(lifecycle.disable(client_account, date(2024, 1, 1))) == "Disabled"


class TestWorkoutAndProgressCommands:
    """Tests for the workouts and progress command groups."""

    def test_workout_catalogue(self, coach_runner):
        result = coach_runner.invoke(
            main, ["workouts", "create", "--as", "coach-1", "Morning yoga", "--category", "yoga"]
        )
        assert result.exit_code == 0
        coach_runner.invoke(main, ["workouts", "create", "--as", "coach-1", "Secret", "--private"])

        result = coach_runner.invoke(main, ["workouts", "list"])

        assert "Morning yoga" in result.output
        assert "30 min" in result.output
        assert "Secret" not in result.output

    def test_client_cannot_author(self, coach_runner):
        result = coach_runner.invoke(main, ["workouts", "create", "--as", "client-1", "HIIT"])

        assert result.exit_code == 1

    def test_start(self, coach_runner):
        coach_runner.invoke(main, ["workouts", "create", "--as", "coach-1", "HIIT"])

        result = coach_runner.invoke(main, ["workouts", "start", "--as", "client-1", "1"])

        assert result.exit_code == 0
        assert "Workout started: HIIT" in result.output

    def test_progress(self, coach_runner):
        result = coach_runner.invoke(main, ["progress", "add", "--as", "client-1", "--weight", "71.5", "--waist", "80"])
        assert result.exit_code == 0
        assert "Progress saved" in result.output

        result = coach_runner.invoke(main, ["progress", "list", "--as", "client-1"])

        assert "71.5 kg" in result.output
        assert "80 cm" in result.output


class TestLibraryAndHistoryCommands:
    """Tests for exercises, authored workouts, history and the coach line."""

    def test_init_seeds_exercises(self, tmp_path):
        result = CliRunner(env={"FITCOACH_DATA_DIR": str(tmp_path)}).invoke(main, ["init"])

        assert "Seeded 10 exercises" in result.output

    def test_exercises_list(self, runner):
        result = runner.invoke(main, ["exercises", "list", "--category", "chest"])

        assert result.exit_code == 0
        assert "Chest Press" in result.output
        assert "Leg Extension" not in result.output

    def test_exercises_show(self, runner):
        result = runner.invoke(main, ["exercises", "show", "1"])

        assert "Dumbbell Kickback" in result.output
        assert "Duration: 45 seconds" in result.output

    def test_workouts_mine(self, coach_runner):
        coach_runner.invoke(main, ["workouts", "create", "--as", "coach-1", "Secret", "--private"])

        result = coach_runner.invoke(main, ["workouts", "mine", "--as", "coach-1"])

        assert "Secret" in result.output
        assert "private" in result.output

    def test_workouts_history(self, coach_runner):
        coach_runner.invoke(main, ["workouts", "create", "--as", "coach-1", "HIIT"])
        coach_runner.invoke(main, ["workouts", "start", "--as", "client-1", "1"])

        result = coach_runner.invoke(main, ["workouts", "history", "--as", "client-1"])

        assert result.exit_code == 0
        assert "HIIT" in result.output

    def test_profile_shows_coach(self, coach_runner):
        result = coach_runner.invoke(main, ["users", "profile", "--as", "client-1"])

        assert "Coach: Sam Reed" in result.output
