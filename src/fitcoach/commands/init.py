"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db, seed_exercises
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the fitcoach database.

    Creates the data directory and the SQLite schema, then seeds the
    exercise library. Safe to run again.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing fitcoach in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    added = await seed_exercises(db_path)
    if added:
        echo_success(f"Seeded {added} exercises")

    click.echo()
    click.echo("fitcoach is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Register as a coach:")
    click.echo("     fitcoach users register-coach --email you@example.com --first-name Ada --last-name Lovelace")
    click.echo()
    click.echo("  2. Create client accounts:")
    click.echo("     fitcoach users create --as <coach-id> --interactive")
