"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps

import click

from ..core.errors import FitcoachError
from ..db import get_db_path
from ..models.account import UserAccount
from ..services import AccountService

# Identifier of the logged-in account, as returned by the identity service
caller_option = click.option(
    "--as",
    "caller_id",
    envvar="FITCOACH_ACCOUNT",
    required=True,
    help="Account to act as (or set FITCOACH_ACCOUNT)",
)

date_type = click.DateTime(formats=["%Y-%m-%d"])


def async_command(f):
    """Decorator to run async Click commands.

    Business errors are reported and turned into exit status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except FitcoachError as e:
            echo_error(str(e))
            click.get_current_context().exit(1)

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'fitcoach init' first."
        )
        ctx.exit(1)


async def load_caller(caller_id: str) -> UserAccount:
    """Resolve the acting account; disabled accounts cannot act."""
    return await AccountService().login(caller_id)


def to_date(value) -> date | None:
    """Convert a click.DateTime value to a date."""
    return value.date() if value is not None else None


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)),
        "".join("-" * w + " " * padding for w in widths),
    ]
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(lines)
