"""Exercise library commands."""

import click

from ..models.exercise import MuscleGroup
from ..services import ExerciseService
from .base import async_command, echo_info, ensure_initialized, format_table


@click.group()
@click.pass_context
def exercises(ctx):
    """Browse the exercise library."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option(
    "--category",
    type=click.Choice([m.value for m in MuscleGroup]),
    help="Only exercises for this muscle group",
)
@async_command
async def list_exercises(category: str | None):
    """List exercises, optionally by muscle group."""
    found = await ExerciseService().list_all(MuscleGroup(category) if category else None)

    if not found:
        echo_info("No exercises found.")
        return

    rows = [
        [
            str(e.id),
            e.name,
            e.muscle_group.value,
            e.difficulty.value,
            f"{e.duration_seconds} s",
        ]
        for e in found
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "Muscle group", "Difficulty", "Duration"], rows))


@exercises.command()
@click.argument("exercise_id", type=int)
@async_command
async def show(exercise_id: int):
    """Show one exercise."""
    exercise = await ExerciseService().get(exercise_id)

    click.echo()
    click.echo(click.style(exercise.name, bold=True))
    if exercise.description:
        click.echo(exercise.description)
    click.echo(f"Muscle group: {exercise.muscle_group.value}")
    click.echo(f"Difficulty: {exercise.difficulty.value}")
    click.echo(f"Duration: {exercise.duration_seconds} seconds")
