"""Goal commands."""

from datetime import date

import click

from ..core import goal_progress
from ..models.goal import Goal, GoalStatus
from ..services import GoalService
from .base import (
    async_command,
    caller_option,
    date_type,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    load_caller,
    to_date,
)


def describe_progress(goal: Goal, today: date) -> str:
    """Status line shown under each goal."""
    summary = goal_progress.summarize(goal, today)
    if summary.status == GoalStatus.COMPLETED:
        return "Completed!"
    if summary.status == GoalStatus.OVERDUE:
        return f"{abs(summary.days_remaining)} days overdue"
    return f"{summary.days_remaining} days remaining"


@click.group()
@click.pass_context
def goals(ctx):
    """Track personal goals.

    Progress is computed from each goal's start and target dates.
    """
    ensure_initialized(ctx)


@goals.command("create")
@caller_option
@click.argument("name")
@click.option("--target", "target_date", type=date_type, required=True, help="Target date (YYYY-MM-DD)")
@click.option("--start", "start_date", type=date_type, help="Start date (default: today)")
@click.option("--notes", help="Details about the goal")
@async_command
async def create(caller_id: str, name: str, target_date, start_date, notes: str | None):
    """Create a new goal."""
    caller = await load_caller(caller_id)
    today = date.today()
    goal = await GoalService().create(
        caller,
        name,
        to_date(target_date),
        today,
        notes=notes,
        start_date=to_date(start_date),
    )
    echo_success(f"Goal created: {goal.name} (#{goal.id})")
    days = goal_progress.days_remaining(goal, today)
    if days > 0:
        click.echo(f"{days} days remaining")


@goals.command(name="list")
@caller_option
@async_command
async def list_goals(caller_id: str):
    """List your goals with their progress."""
    caller = await load_caller(caller_id)
    today = date.today()
    summaries = await GoalService().summaries(caller, today)

    if not summaries:
        echo_info("No goals yet. Create your first one with 'fitcoach goals create'.")
        return

    rows = []
    for goal, summary in summaries:
        rows.append([
            str(goal.id),
            goal.name[:30],
            goal.start_date.isoformat(),
            goal.target_date.isoformat(),
            f"{summary.percent_elapsed:.0f}%",
            describe_progress(goal, today),
        ])

    click.echo()
    click.echo(format_table(["ID", "Goal", "Start", "Target", "Elapsed", "Status"], rows))


@goals.command()
@caller_option
@click.argument("goal_id", type=int)
@async_command
async def show(caller_id: str, goal_id: int):
    """Show one goal."""
    caller = await load_caller(caller_id)
    goal = await GoalService().get(caller, goal_id)
    today = date.today()

    click.echo()
    click.echo(click.style(goal.name, bold=True))
    if goal.notes:
        click.echo(goal.notes)
    click.echo(f"Start: {goal.start_date.isoformat()}")
    click.echo(f"Target: {goal.target_date.isoformat()}")
    click.echo(f"Elapsed: {goal_progress.percent_elapsed(goal, today):.0f}%")
    click.echo(describe_progress(goal, today))


@goals.command()
@caller_option
@click.argument("goal_id", type=int)
@async_command
async def toggle(caller_id: str, goal_id: int):
    """Mark a goal completed, or not completed again."""
    caller = await load_caller(caller_id)
    goal = await GoalService().toggle_completion(caller, goal_id)
    if goal.completed:
        echo_success(f"Goal completed: {goal.name}")
    else:
        echo_info(f"Goal reopened: {goal.name}")


@goals.command()
@caller_option
@click.argument("goal_id", type=int)
@async_command
async def delete(caller_id: str, goal_id: int):
    """Delete a goal."""
    caller = await load_caller(caller_id)
    await GoalService().delete(caller, goal_id)
    echo_success(f"Goal {goal_id} deleted")
