"""apphosting CLI - Main entry point."""
from typing import Optional

import typer

from apphosting_common import configure_logging

from . import info_cmd, resolve_cmd, validate_cmd

app = typer.Typer(
    name="apphosting",
    help="apphosting CLI - Validate build config and resolve framework versions",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (debug, info, warning, error). Defaults to $APPHOSTING_LOG_LEVEL",
    ),
):
    """Configure logging before any command runs."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


# Register all commands
app.command()(validate_cmd.validate)
app.command(name="adaptor-version")(resolve_cmd.adaptor_version)
app.command()(resolve_cmd.resolve)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
