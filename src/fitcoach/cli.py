"""CLI entry point for fitcoach."""

import logging

import click

from .commands import exercises, goals, init, progress, serve, users, workouts


@click.group()
@click.version_option(version="0.1.0", prog_name="fitcoach")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool):
    """fitcoach: coach-managed fitness tracking.

    Coaches provision and manage client accounts and author workouts;
    every account tracks its own goals and body measurements.

    Example usage:

        # Initialize the database
        fitcoach init

        # Register, then create a client
        fitcoach users register-coach --email coach@example.com --first-name Sam --last-name Reed
        fitcoach users create --as <coach-id> --interactive

        # Disable a client for two weeks
        fitcoach users disable --as <coach-id> <client-id> --days 14

        # Daily cron job
        fitcoach users reactivate-due
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(users)
main.add_command(goals)
main.add_command(workouts)
main.add_command(exercises)
main.add_command(progress)
main.add_command(serve)


if __name__ == "__main__":
    main()
