"""Account management commands."""

import uuid
from datetime import date

import click

from ..core import lifecycle
from ..models.account import AccountState, Role, UserAccount
from ..services import AccountService
from .base import (
    async_command,
    caller_option,
    date_type,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    load_caller,
    to_date,
)


def describe_state(account: UserAccount) -> str:
    """Human-readable lifecycle state."""
    state = account.state
    if state == AccountState.ACTIVE:
        return "Active"
    if state == AccountState.TEMPORARILY_DISABLED:
        return f"Disabled until {lifecycle.reactivation_date(account).isoformat()}"
    return "Disabled"


@click.group()
@click.pass_context
def users(ctx):
    """Manage coach and client accounts.

    Creating, listing, disabling, reactivating and deleting accounts is
    reserved to coaches.
    """
    ensure_initialized(ctx)


@users.command("register-coach")
@click.option("--email", required=True)
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--id", "account_id", help="Identity service user id (generated if omitted)")
@async_command
async def register_coach(email: str, first_name: str, last_name: str, account_id: str | None):
    """Register a new coach account."""
    service = AccountService()
    account = await service.register_coach(
        account_id or str(uuid.uuid4()), email, first_name, last_name
    )
    echo_success(f"Coach registered: {account.full_name} ({account.id})")


@users.command("create")
@caller_option
@click.option("--email")
@click.option("--first-name")
@click.option("--last-name")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    default=Role.CLIENT.value,
    show_default=True,
)
@click.option("--id", "account_id", help="Identity service user id (generated if omitted)")
@click.option("-i", "--interactive", is_flag=True, help="Prompt for the account details")
@click.pass_context
@async_command
async def create(
    ctx: click.Context,
    caller_id: str,
    email: str | None,
    first_name: str | None,
    last_name: str | None,
    role: str,
    account_id: str | None,
    interactive: bool,
):
    """Create a client or coach account.

    Clients are linked to the coach who creates them.
    """
    caller = await load_caller(caller_id)

    if interactive:
        from ..clients import AccountQuestionnaire

        answers = await AccountQuestionnaire().collect_new_account()
        if answers is None:
            echo_warning("Cancelled.")
            return
        email, first_name, last_name = answers.email, answers.first_name, answers.last_name
        role = answers.role.value
    elif not (email and first_name and last_name):
        echo_error("--email, --first-name and --last-name are required (or use --interactive).")
        ctx.exit(1)

    service = AccountService()
    account = await service.provision(
        caller,
        account_id or str(uuid.uuid4()),
        email,
        first_name,
        last_name,
        role=Role(role),
    )
    echo_success(f"Account created: {account.full_name} ({account.id}, {account.role.value})")


@users.command(name="list")
@caller_option
@click.option("--mine", is_flag=True, help="Only clients linked to you")
@async_command
async def list_users(caller_id: str, mine: bool):
    """List accounts."""
    caller = await load_caller(caller_id)
    service = AccountService()
    accounts = await (service.list_clients(caller) if mine else service.list_accounts(caller))

    if not accounts:
        echo_info("No accounts found.")
        return

    rows = [
        [account.id, account.full_name[:30], account.email, account.role.value, describe_state(account)]
        for account in accounts
    ]
    click.echo()
    click.echo(format_table(["ID", "Name", "Email", "Role", "Status"], rows))
    click.echo()
    click.echo(f"Total: {len(accounts)} account(s)")


@users.command()
@caller_option
@click.argument("account_id")
@click.option("--days", type=int, help="Disable for this many days (permanent if omitted)")
@async_command
async def disable(caller_id: str, account_id: str, days: int | None):
    """Disable an account, temporarily or permanently."""
    caller = await load_caller(caller_id)
    service = AccountService()

    before = await service.get(account_id)
    account = await service.disable(caller, account_id, date.today(), days)

    if not before.active:
        echo_info(f"Account already disabled ({describe_state(account)}).")
    elif days:
        echo_success(
            f"Account disabled for {days} days "
            f"(reactivation on {lifecycle.reactivation_date(account).isoformat()})"
        )
    else:
        echo_success("Account disabled permanently")


@users.command()
@caller_option
@click.argument("account_id")
@async_command
async def reactivate(caller_id: str, account_id: str):
    """Reactivate a disabled account."""
    caller = await load_caller(caller_id)
    account = await AccountService().reactivate(caller, account_id)
    echo_success(f"Account reactivated: {account.full_name}")


@users.command()
@caller_option
@click.argument("account_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@async_command
async def delete(caller_id: str, account_id: str, yes: bool):
    """Delete an account permanently."""
    caller = await load_caller(caller_id)
    service = AccountService()
    target = await service.get(account_id)

    if not yes and not click.confirm(f"Delete {target.full_name} permanently?"):
        return

    await service.delete(caller, account_id)
    echo_success(f"Account deleted: {target.full_name}")


@users.command()
@click.argument("account_id")
@async_command
async def login(account_id: str):
    """Check whether an account is allowed to log in."""
    account = await AccountService().login(account_id)
    echo_success(f"Welcome, {account.full_name}")


@users.command("reactivate-due")
@click.option("--date", "on_date", type=date_type, help="Reference date (default: today)")
@async_command
async def reactivate_due(on_date):
    """Reactivate accounts whose disable period has ended.

    Intended to be run daily from cron.
    """
    today = to_date(on_date) or date.today()
    reactivated = await AccountService().reactivate_due(today)

    if not reactivated:
        echo_info("No accounts due for reactivation.")
        return

    for account in reactivated:
        echo_success(f"Reactivated: {account.full_name} ({account.id})")


@users.command()
@caller_option
@click.option("--first-name")
@click.option("--last-name")
@click.option("--birth-date", type=date_type)
@click.option("--height", type=float, help="Height in cm")
@click.option("--weight", "body_weight", type=float, help="Body weight in kg")
@click.option("--objectives")
@async_command
async def profile(caller_id: str, **options):
    """Show or update your own profile."""
    caller = await load_caller(caller_id)
    service = AccountService()
    changes = {k: v for k, v in options.items() if v is not None}
    if "birth_date" in changes:
        changes["birth_date"] = to_date(changes["birth_date"])

    if changes:
        caller = await service.update_profile(caller, caller.id, **changes)
        echo_success("Profile updated")

    coach = await service.coach_of(caller)

    click.echo()
    click.echo(click.style(caller.full_name, bold=True))
    click.echo(f"Email: {caller.email}")
    click.echo(f"Role: {caller.role.value}")
    if coach is not None:
        click.echo(f"Coach: {coach.full_name}")
    if caller.birth_date:
        click.echo(f"Birth date: {caller.birth_date.isoformat()}")
    if caller.height:
        click.echo(f"Height: {caller.height} cm")
    if caller.body_weight:
        click.echo(f"Weight: {caller.body_weight} kg")
    if caller.objectives:
        click.echo(f"Objectives: {caller.objectives}")
