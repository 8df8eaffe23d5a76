"""Validate command - Check apphosting.yaml against the schema."""
import typer
from rich.markup import escape
from rich.table import Table

from apphosting_common import DEFAULT_CONFIG_FILENAME, ENV_CONFIG_PATH
from apphosting_schema import AppHostingSchema, validate_apphosting_config

from .utils import console, error, info, success, warning

app = typer.Typer()


def _print_config(config: AppHostingSchema) -> None:
    run_config = config.run_config
    table = Table(title="runConfig", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for label, value in [
        ("cpu", run_config.cpu),
        ("memoryMiB", run_config.memory_mib),
        ("concurrency", run_config.concurrency),
        ("maxInstances", run_config.max_instances),
        ("minInstances", run_config.min_instances),
    ]:
        table.add_row(label, "[dim]default[/dim]" if value is None else str(value))
    console.print(table)

    if not config.env:
        info("No environment variables declared")
        return

    env_table = Table(title="env", show_header=True, header_style="bold cyan")
    env_table.add_column("Variable", style="cyan", no_wrap=True)
    env_table.add_column("Source")
    env_table.add_column("Availability")
    for entry in config.env:
        source = f"secret: {entry.secret}" if entry.secret else "value"
        availability = ", ".join(entry.availability) or "BUILD, RUNTIME"
        env_table.add_row(entry.variable, source, availability)
    console.print(env_table)


@app.command(name="validate")
def validate(
    path: str = typer.Argument(
        DEFAULT_CONFIG_FILENAME,
        envvar=ENV_CONFIG_PATH,
        help="Path to apphosting.yaml",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show the parsed configuration",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Only report errors",
    ),
):
    """
    Validate an apphosting.yaml file.

    A missing file is valid: platform defaults apply.

    Examples:
        apphosting validate
        apphosting validate config/apphosting.yaml --verbose
    """
    result = validate_apphosting_config(path)

    if not result["valid"]:
        for message in result["errors"]:
            error(escape(message))
        raise typer.Exit(1)

    if quiet:
        return

    for message in result["warnings"]:
        warning(escape(message))
    success(escape(result["message"]))

    if verbose:
        console.print()
        _print_config(result["config"])
