"""
apphosting Dependency Resolution
================================

Provides utilities for:
- Parsing npm semantic versions and range specifiers
- Mapping a framework specifier onto an adaptor specifier
- Reading installed versions from pnpm, yarn and npm lockfiles
- Falling back to the package.json declaration
"""

from .adaptor import adaptor_package_spec, detect_adaptor_package, normalize_adaptor_version
from .lockfile import (
    LOCKFILE_READERS,
    read_npm_lockfile,
    read_pnpm_lockfile,
    read_yarn_lockfile,
)
from .manifest import PackageJSON, read_package_json
from .resolver import installed_version, resolve_installed_version
from .version import (
    Comparator,
    Version,
    VersionOperator,
    VersionRange,
    parse_comparator,
    parse_range,
    parse_version,
)

__all__ = [
    # Version utilities
    "Comparator",
    "Version",
    "VersionOperator",
    "VersionRange",
    "parse_comparator",
    "parse_range",
    "parse_version",
    # Adaptor selection
    "adaptor_package_spec",
    "detect_adaptor_package",
    "normalize_adaptor_version",
    # Lockfiles
    "LOCKFILE_READERS",
    "read_npm_lockfile",
    "read_pnpm_lockfile",
    "read_yarn_lockfile",
    # Manifest
    "PackageJSON",
    "read_package_json",
    # Resolution
    "installed_version",
    "resolve_installed_version",
]
