"""Shared console helpers for CLI commands."""
from rich.console import Console
from rich.markup import escape

from apphosting_common import AppHostingError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✅ {message}[/bold green]")


def error(message: str) -> None:
    console.print(f"[bold red]❌ {message}[/bold red]")


def warning(message: str) -> None:
    console.print(f"[bold yellow]⚠️  {message}[/bold yellow]")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ️  {message}[/cyan]")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print an error, with the traceback when verbose."""
    if isinstance(e, AppHostingError):
        error(f"{escape(e.message)} [dim]({e.code})[/dim]")
    else:
        error(f"Unexpected error: {escape(str(e))}")
    if verbose:
        console.print_exception()
