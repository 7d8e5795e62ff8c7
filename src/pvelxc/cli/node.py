"""Node information commands."""

import typer
from rich.table import Table

from ..api.exceptions import PVELxcError
from ..models.node import HostStatus
from ..utils import console, format_bytes, format_uptime, print_error, usage_bar
from ..utils.helpers import async_to_sync
from ._shared import open_facade, unwrap

app = typer.Typer(help="Show node information", no_args_is_help=True)


@app.command("config")
@async_to_sync
async def show_config(ctx: typer.Context) -> None:
    """Show the configured host and node."""
    try:
        async with open_facade(ctx) as facade:
            config = facade.get_config()
            initialized = facade.initialized
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold]Host:[/bold] {config.host}")
    console.print(f"[bold]Node:[/bold] {config.node}")
    if initialized:
        console.print("[bold]Client:[/bold] [green]initialized[/green]")
    else:
        console.print("[bold]Client:[/bold] [red]not initialized[/red]")


@app.command("status")
@async_to_sync
async def show_status(ctx: typer.Context) -> None:
    """Show CPU, memory and disk usage of the node."""
    try:
        async with open_facade(ctx) as facade:
            node = facade.get_config().node
            result = await facade.get_host_status()
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    status: HostStatus = unwrap(result)

    table = Table(title=f"Node {node}", show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")

    table.add_row("PVE version", status.pve_version)
    table.add_row("Kernel", status.kernel)
    table.add_row("CPU", f"{status.cpu_model} ({status.cpu_sockets} socket(s), {status.cpu_cores} cores)")
    table.add_row("CPU usage", usage_bar(status.cpu * 100))
    table.add_row("IO delay", f"{status.io_delay * 100:.2f}%")
    table.add_row("Load average", " ".join(f"{v:.2f}" for v in status.load_average))
    for label, usage in (("Memory", status.memory), ("Swap", status.swap), ("Root disk", status.disk)):
        table.add_row(
            label,
            usage_bar(usage.percent, label=f"{format_bytes(usage.used)} / {format_bytes(usage.total)}"),
        )
    table.add_row("Uptime", format_uptime(status.uptime))

    console.print(table)
