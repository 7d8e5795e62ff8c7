"""Output formatting utilities using Rich."""

from rich.console import Console
from rich.prompt import Confirm

console = Console()
err_console = Console(stderr=True)


def print_error(msg: str) -> None:
    """Print an error message to stderr.

    Args:
        msg: The error message to display.
    """
    err_console.print(f"[bold red]Error:[/bold red] {msg}")


def print_success(msg: str) -> None:
    """Print a success message to the console.

    Args:
        msg: The success message to display.
    """
    console.print(f"[bold green]✓[/bold green] {msg}")


def print_info(msg: str) -> None:
    console.print(f"[cyan]{msg}[/cyan]")


def print_cancelled(msg: str = "Cancelled") -> None:
    console.print(f"[yellow]{msg}[/yellow]")


def confirm(message: str, default: bool = False) -> bool:
    """Prompt user for confirmation.

    Args:
        message: The confirmation message to display.
        default: Default choice if user just presses enter.

    Returns:
        True if user confirmed, False otherwise.
    """
    return Confirm.ask(message, default=default)


def format_bytes(bytes_value: float) -> str:
    """Format bytes to human-readable string (e.g. '1.5 GB')."""
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if bytes_value < 1024.0:
            return f"{bytes_value:.1f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.1f} PB"


def format_uptime(seconds: int) -> str:
    """Format uptime in seconds to human-readable string.

    Args:
        seconds: Uptime in seconds.

    Returns:
        Formatted string (e.g., '15d 3h 22m').
    """
    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, _ = divmod(remainder, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes or not parts:
        parts.append(f"{minutes}m")
    return " ".join(parts)


def usage_bar(percent: float, width: int = 10, label: str = "") -> str:
    """Format a usage bar with color coding.

    Args:
        percent: Usage percentage (0-100)
        width: Bar width in characters
        label: Extra label after the bar
    """
    percent = max(0.0, min(100.0, percent))
    filled = round(percent / 100 * width)
    color = "green" if percent < 60 else "yellow" if percent < 85 else "red"
    bar = f"[{color}]{'━' * filled}[/{color}][dim]{'━' * (width - filled)}[/dim]"
    text = f"{bar} {percent:.0f}%"
    return f"{text} {label}" if label else text


def get_status_color(status: str) -> str:
    """Get the Rich color name for a container status."""
    return {
        "running": "green",
        "stopped": "red",
        "paused": "yellow",
        "suspended": "yellow",
    }.get(status.lower(), "white")
