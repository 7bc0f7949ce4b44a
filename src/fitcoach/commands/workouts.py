"""Workout catalogue commands."""

from datetime import datetime

import click

from ..models.workout import Difficulty, WorkoutCategory
from ..services import WorkoutService
from .base import (
    async_command,
    caller_option,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    load_caller,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """Browse, author and start workouts."""
    ensure_initialized(ctx)


@workouts.command("create")
@caller_option
@click.argument("name")
@click.option("--description", default="")
@click.option("--duration", type=int, help="Duration in minutes (default: 30)")
@click.option(
    "--difficulty",
    type=click.Choice([d.value for d in Difficulty]),
    default=Difficulty.BEGINNER.value,
    show_default=True,
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in WorkoutCategory]),
    default=WorkoutCategory.CARDIO.value,
    show_default=True,
)
@click.option("--private", is_flag=True, help="Hide from the public catalogue")
@async_command
async def create(
    caller_id: str,
    name: str,
    description: str,
    duration: int | None,
    difficulty: str,
    category: str,
    private: bool,
):
    """Create a workout (coaches only)."""
    caller = await load_caller(caller_id)
    workout = await WorkoutService().create(
        caller,
        name,
        description=description,
        duration_minutes=duration,
        difficulty=Difficulty(difficulty),
        category=WorkoutCategory(category),
        is_public=not private,
    )
    echo_success(f"Workout created: {workout.name} (#{workout.id})")


@workouts.command(name="list")
@click.option("--category", type=click.Choice([c.value for c in WorkoutCategory]))
@click.option("--search", "-s", help="Filter by name")
@async_command
async def list_workouts(category: str | None, search: str | None):
    """List public workouts."""
    found = await WorkoutService().list_public(
        category=WorkoutCategory(category) if category else None,
        search=search,
    )

    if not found:
        echo_info("No workouts found.")
        return

    rows = [
        [
            str(w.id),
            w.name[:30],
            w.category.value,
            w.difficulty.value,
            f"{w.duration_minutes} min",
        ]
        for w in found
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "Category", "Difficulty", "Duration"], rows))


@workouts.command()
@caller_option
@click.argument("workout_id", type=int)
@async_command
async def start(caller_id: str, workout_id: int):
    """Start a workout."""
    caller = await load_caller(caller_id)
    service = WorkoutService()
    session = await service.start(caller, workout_id, datetime.now())
    workout = await service.workouts.get(session.workout_id)
    echo_success(f"Workout started: {workout.name}")


@workouts.command()
@caller_option
@async_command
async def mine(caller_id: str):
    """List the workouts you authored, private ones included."""
    caller = await load_caller(caller_id)
    authored = await WorkoutService().list_authored(caller)

    if not authored:
        echo_info("You have not created any workouts.")
        return

    rows = [
        [str(w.id), w.name[:30], w.category.value, "public" if w.is_public else "private"]
        for w in authored
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "Category", "Visibility"], rows))


@workouts.command()
@caller_option
@async_command
async def history(caller_id: str):
    """Show the workouts you started, most recent first."""
    caller = await load_caller(caller_id)
    service = WorkoutService()
    sessions = await service.sessions_for(caller)

    if not sessions:
        echo_info("No workouts started yet.")
        return

    rows = []
    for session in sessions:
        workout = await service.workouts.get(session.workout_id)
        rows.append([
            session.started_at.strftime("%Y-%m-%d %H:%M"),
            workout.name[:30] if workout else f"#{session.workout_id}",
            "yes" if session.completed else "no",
        ])
    click.echo()
    click.echo(format_table(["Started", "Workout", "Completed"], rows))
