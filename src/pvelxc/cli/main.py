"""Main CLI application."""

from pathlib import Path

import typer

from .. import __version__
from ..utils import console
from ..utils.helpers import setup_logging
from . import ct, node

app = typer.Typer(
    name="pvelxc",
    help="Manage LXC containers on a Proxmox VE node",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(ct.app, name="ct")
app.add_typer(node.app, name="node")


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: Whether version flag was set
    """
    if value:
        console.print(f"pvelxc version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    env_file: Path = typer.Option(
        None, "--env-file", "-e", help="Load settings from this .env file", exists=True, dir_okay=False
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """pvelxc - manage LXC containers on a Proxmox VE node.

    Settings come from PROXMOX_HOST, PROXMOX_NODE, PROXMOX_TOKEN_ID and
    PROXMOX_TOKEN_SECRET, read from the environment or a .env file.

    Get started:
        pvelxc node config    # Check the connection settings
        pvelxc ct list        # List containers
    """
    setup_logging(verbose)
    ctx.obj = {"env_file": env_file}


if __name__ == "__main__":
    app()
