"""Info command - Version information."""
import sys

import typer
from rich.table import Table

import apphosting_sdk

from .utils import console

app = typer.Typer()


@app.command(name="version")
def version():
    """
    Show apphosting version information.

    Examples:
        apphosting version
    """
    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    table = Table(title="apphosting Version Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")
    table.add_row("SDK", apphosting_sdk.__version__)
    table.add_row("Python", python_version)

    console.print(table)
