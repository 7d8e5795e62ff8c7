"""Container (LXC) management commands."""

import typer
from rich.table import Table

from ..api.exceptions import PVELxcError
from ..models.container import Container
from ..utils import (
    console,
    format_bytes,
    format_uptime,
    get_status_color,
    print_error,
    print_info,
    print_success,
    usage_bar,
)
from ..utils.helpers import async_to_sync
from ._shared import confirm_action, open_facade, unwrap

app = typer.Typer(help="Manage containers (LXC)", no_args_is_help=True)


def _container_row(ct: Container) -> list[str]:
    status_color = get_status_color(ct.status)

    if ct.is_running:
        cpu_str = usage_bar(ct.cpu * 100, label=f"({ct.cpus}c)")
        mem_percent = (ct.memory / ct.max_memory * 100) if ct.max_memory else 0
        mem_str = usage_bar(mem_percent, label=format_bytes(ct.max_memory))
        uptime_str = format_uptime(ct.uptime) if ct.uptime else "-"
    else:
        cpu_str = f"[dim]- ({ct.cpus}c)[/dim]"
        mem_str = f"[dim]- {format_bytes(ct.max_memory)}[/dim]" if ct.max_memory else "-"
        uptime_str = "-"

    return [
        str(ct.vmid),
        ct.name,
        f"[{status_color}]{ct.status}[/{status_color}]",
        cpu_str,
        mem_str,
        uptime_str,
        ct.ip_address or "-",
    ]


@app.command("list")
@async_to_sync
async def list_containers(
    ctx: typer.Context,
    status: str = typer.Option(None, "--status", "-s", help="Filter by status (running, stopped)"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """List containers on the configured node."""
    try:
        async with open_facade(ctx) as facade:
            result = await facade.get_containers()
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    containers: list[Container] = unwrap(result)
    if status:
        containers = [ct for ct in containers if ct.status.lower() == status.lower()]

    if json_output:
        console.print_json(data=[ct.model_dump(mode="json") for ct in containers])
        return

    if not containers:
        print_info(f"No containers found with status '{status}'" if status else "No containers found")
        return

    table = Table(title="Containers (LXC)", show_header=True, header_style="bold cyan")
    table.add_column("CTID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("CPU")
    table.add_column("Memory")
    table.add_column("Uptime")
    table.add_column("IP")

    for ct in containers:
        table.add_row(*_container_row(ct))

    console.print(table)


@app.command("start")
@async_to_sync
async def start_container(
    ctx: typer.Context,
    vmid: int = typer.Argument(..., help="Container ID"),
) -> None:
    """Start a container."""
    try:
        async with open_facade(ctx) as facade:
            result = await facade.start_container(vmid)
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(unwrap(result))


@app.command("stop")
@async_to_sync
async def stop_container(
    ctx: typer.Context,
    vmid: int = typer.Argument(..., help="Container ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Stop a container (hard stop)."""
    if not confirm_action(vmid, "Hard stop", yes):
        return

    try:
        async with open_facade(ctx) as facade:
            result = await facade.stop_container(vmid)
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(unwrap(result))


@app.command("delete")
@async_to_sync
async def delete_container(
    ctx: typer.Context,
    vmid: int = typer.Argument(..., help="Container ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a container."""
    if not confirm_action(vmid, "Delete", yes, warning="This cannot be undone!"):
        return

    try:
        async with open_facade(ctx) as facade:
            result = await facade.delete_container(vmid)
    except PVELxcError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(unwrap(result))
