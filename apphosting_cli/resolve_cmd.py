"""Resolve commands - Installed framework version and adaptor selection."""
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from apphosting_common import DEFAULT_DEPENDENCY, ManifestError
from apphosting_sdk import (
    adaptor_package_spec,
    normalize_adaptor_version,
    read_package_json,
    resolve_installed_version,
)

from .utils import console, error, handle_error, info, success

app = typer.Typer()


@app.command(name="adaptor-version")
def adaptor_version(
    specifier: str = typer.Argument(..., help="Declared framework version or range"),
):
    """
    Show the adaptor version requested for a framework specifier.

    Examples:
        apphosting adaptor-version 14.2.3
        apphosting adaptor-version ">13.0.2 <14.0.15"
    """
    version = normalize_adaptor_version(specifier)
    console.print(f"[bold]{escape(version)}[/bold]")
    info(f"Package: {escape(adaptor_package_spec(version))}")


@app.command(name="resolve")
def resolve(
    app_root: Path = typer.Option(
        Path("."),
        "--app-root", "-a",
        help="Application directory containing package.json and lockfiles",
    ),
    dependency: str = typer.Option(
        DEFAULT_DEPENDENCY,
        "--dependency", "-d",
        help="Dependency to resolve",
    ),
    specifier: Optional[str] = typer.Option(
        None,
        "--specifier", "-s",
        help="Declared specifier (default: read from package.json)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output",
    ),
):
    """
    Resolve the installed version of a dependency from lockfiles.

    Lockfiles are consulted in order: pnpm-lock.yaml, yarn.lock,
    npm-shrinkwrap.json, package-lock.json. Without a match the declared
    specifier is reported.

    Examples:
        apphosting resolve
        apphosting resolve --app-root ./web --dependency next
    """
    try:
        if specifier is None:
            specifier = read_package_json(app_root).declared(dependency)
            if not specifier:
                error(f"'{escape(dependency)}' is not declared in {escape(str(app_root / 'package.json'))}")
                raise typer.Exit(1)

        version = resolve_installed_version(dependency, specifier, app_root)
    except typer.Exit:
        raise
    except ManifestError as e:
        handle_error(e, verbose)
        raise typer.Exit(1)

    success(f"{escape(dependency)}: [bold cyan]{escape(version)}[/bold cyan]")
    if verbose:
        info(f"Declared: {escape(specifier)}")
        adaptor = normalize_adaptor_version(version)
        info(f"Adaptor: {escape(adaptor_package_spec(adaptor))}")
