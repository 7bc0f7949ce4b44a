"""Body measurement commands."""

from datetime import date

import click

from ..services import ProgressService
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
def progress(ctx):
    """Record and review body measurements."""
    ensure_initialized(ctx)


@progress.command("add")
@caller_option
@click.option("--weight", type=float, help="Body weight (kg)")
@click.option("--muscle-mass", type=float, help="Muscle mass (kg)")
@click.option("--body-fat", type=float, help="Body fat (%)")
@click.option("--waist", type=int, help="Waist circumference (cm)")
@click.option("--chest", type=int, help="Chest circumference (cm)")
@click.option("--arms", type=int, help="Arm circumference (cm)")
@click.option("--notes")
@async_command
async def add(caller_id: str, notes: str | None, **measurements):
    """Record today's measurements. Only the values given are stored."""
    caller = await load_caller(caller_id)
    entry = await ProgressService().record(caller, date.today(), notes=notes, **measurements)

    if not entry.measurements() and not entry.notes:
        echo_info("Empty entry saved.")
        return
    echo_success("Progress saved")


@progress.command(name="list")
@caller_option
@async_command
async def list_entries(caller_id: str):
    """Show your measurement history."""
    caller = await load_caller(caller_id)
    entries = await ProgressService().list_for(caller)

    if not entries:
        echo_info("No measurements recorded yet.")
        return

    def fmt(value, unit=""):
        return f"{value}{unit}" if value is not None else "-"

    rows = [
        [
            e.recorded_on.isoformat(),
            fmt(e.weight, " kg"),
            fmt(e.muscle_mass, " kg"),
            fmt(e.body_fat, "%"),
            fmt(e.waist, " cm"),
            fmt(e.chest, " cm"),
            fmt(e.arms, " cm"),
        ]
        for e in entries
    ]
    click.echo()
    click.echo(format_table(["Date", "Weight", "Muscle", "Fat", "Waist", "Chest", "Arms"], rows))
