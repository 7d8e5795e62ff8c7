"""Shared helpers for CLI commands."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import typer

from ..bootstrap import create_facade
from ..commands import CommandFacade, CommandResult
from ..utils import confirm, print_cancelled, print_error


def env_file_from(ctx: typer.Context) -> Path | None:
    """Return the ``--env-file`` given to the root command, if any."""
    root = ctx.find_root()
    return (root.obj or {}).get("env_file")


@asynccontextmanager
async def open_facade(ctx: typer.Context) -> AsyncIterator[CommandFacade]:
    """Build a façade for one command and close its client afterwards."""
    facade = create_facade(env_file=env_file_from(ctx))
    try:
        yield facade
    finally:
        await facade.close()


def unwrap(result: CommandResult):
    """Return the result data, or print the error and exit with status 1."""
    if not result.ok:
        print_error(result.error or "Unknown error")
        raise typer.Exit(1)
    return result.data


def confirm_action(vmid: int, action: str, yes: bool, warning: str = "") -> bool:
    """Ask before a destructive action on a container.

    Args:
        vmid: Container ID.
        action: Action text (e.g. "Stop", "Delete").
        yes: Skip confirmation if True.
        warning: Extra text appended to the question.

    Returns:
        True if confirmed, False otherwise.
    """
    if yes:
        return True
    msg = f"{action} container {vmid}?"
    if warning:
        msg = f"{msg} {warning}"
    if not confirm(msg, default=False):
        print_cancelled()
        return False
    return True
