"""
Installed Version Resolution
============================

Determines which version of a dependency is actually installed in an
application by consulting its lockfiles.

Resolution Order:
1. pnpm-lock.yaml
2. yarn.lock
3. npm-shrinkwrap.json
4. package-lock.json
5. The specifier declared in package.json

The first lockfile that exists and yields a non-empty version wins.
Missing, unreadable or malformed lockfiles never fail a build: they are
logged and skipped.
"""

from pathlib import Path
from typing import Union

import yaml

from apphosting_common import get_logger

from .lockfile import LOCKFILE_READERS
from .manifest import PackageJSON

logger = get_logger(__name__)


def resolve_installed_version(
    name: str,
    declared: str,
    app_root: Union[str, Path],
) -> str:
    """
    Find the concrete installed version of a dependency.

    Args:
        name: Dependency name, e.g. "next"
        declared: Specifier from package.json, e.g. "^14.0.0". Used to pick
            the right yarn.lock block and as the final fallback.
        app_root: Application directory holding the lockfiles

    Returns:
        The locked version, or `declared` when no lockfile has a match

    Example:
        >>> resolve_installed_version("next", "^14.0.0", "/workspace")
        '14.2.3'
    """
    root = Path(app_root)

    for filename, reader in LOCKFILE_READERS:
        lockfile_path = root / filename
        if not lockfile_path.is_file():
            continue

        try:
            version = reader(lockfile_path, name, declared)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.debug(
                "Skipping unparseable lockfile",
                lockfile=filename,
                error=str(e),
            )
            continue

        if version:
            logger.debug("Resolved version from lockfile", dependency=name, lockfile=filename, version=version)
            return version

        logger.debug("No lockfile entry", dependency=name, lockfile=filename)

    logger.info(
        "No lockfile match, falling back to declared version",
        dependency=name,
        declared=declared,
    )
    return declared


def installed_version(package_json: PackageJSON, name: str, app_root: Union[str, Path]) -> str:
    """Resolve `name` using the specifier declared in `package_json`."""
    return resolve_installed_version(name, package_json.declared(name), app_root)
