"""
Lockfile Readers
================

Extracts the installed version of a single dependency from the lockfiles
written by pnpm, yarn (classic and berry) and npm.

Each reader takes ``(path, name, declared)`` and returns the concrete
version, or ``""`` when the lockfile has no entry for the dependency.
Readers raise on unreadable or malformed files; the resolver decides
what to do about that.
"""

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import yaml

from apphosting_common.constants import (
    NPM_LOCKFILE,
    NPM_SHRINKWRAP,
    PNPM_LOCKFILE,
    YARN_LOCKFILE,
)

LockfileReader = Callable[[Path, str, str], str]

_BLANK_LINE = re.compile(r"\r?\n[ \t]*\r?\n")


def _as_mapping(value: Any, what: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected '{what}' to be a mapping, got {type(value).__name__}")
    return value


def _pnpm_entry_version(entry: Any) -> str:
    # pnpm v5 stores a plain string, v6+ a mapping with specifier/version
    if isinstance(entry, dict):
        version = entry.get("version") or ""
    else:
        version = entry or ""
    # "14.2.3(react-dom@18.2.0)(react@18.2.0)" -> "14.2.3"
    return str(version).split("(")[0]


def read_pnpm_lockfile(path: Path, name: str, declared: str = "") -> str:
    """
    Read a dependency version from pnpm-lock.yaml.

    Looks in the top-level ``dependencies`` map first, then in the root
    importer (``importers["."].dependencies``) used by lockfile v9.
    Peer-dependency qualifiers in parentheses are stripped.
    """
    lockfile = _as_mapping(yaml.safe_load(path.read_text(encoding="utf-8")), "lockfile")

    dependencies = _as_mapping(lockfile.get("dependencies"), "dependencies")
    if name in dependencies:
        return _pnpm_entry_version(dependencies[name])

    importers = _as_mapping(lockfile.get("importers"), "importers")
    root = _as_mapping(importers.get("."), "importers.'.'")
    root_dependencies = _as_mapping(root.get("dependencies"), "importers.'.'.dependencies")
    return _pnpm_entry_version(root_dependencies.get(name))


def read_yarn_lockfile(path: Path, name: str, declared: str = "") -> str:
    """
    Read a dependency version from yarn.lock (classic or berry).

    yarn.lock is not line-structured key/value data, so this scans it in
    blank-line separated blocks. The first block mentioning both
    ``<name>@`` and the declared specifier is selected, which tells apart
    several majors of the same package. Its first line containing
    ``version`` is split on whitespace and the second token, unquoted, is
    the version:

        next@^14.0.0:                      "next@npm:^14.0.0":
          version "14.2.3"                   version: 14.2.3
    """
    content = path.read_text(encoding="utf-8")
    for block in _BLANK_LINE.split(content):
        if f"{name}@" not in block or declared not in block:
            continue
        for line in block.splitlines():
            if "version" not in line:
                continue
            fields = line.split()
            if len(fields) < 2:
                break
            return fields[1].strip('"')
    return ""


def read_npm_lockfile(path: Path, name: str, declared: str = "") -> str:
    """
    Read a dependency version from package-lock.json or npm-shrinkwrap.json.

    Uses ``packages["node_modules/<name>"]`` (lockfileVersion 2 and 3) and
    falls back to ``dependencies[<name>]`` (lockfileVersion 1).
    """
    lockfile = _as_mapping(json.loads(path.read_text(encoding="utf-8")), "lockfile")

    packages = _as_mapping(lockfile.get("packages"), "packages")
    entry = _as_mapping(packages.get(f"node_modules/{name}"), f"packages.node_modules/{name}")
    if entry.get("version"):
        return str(entry["version"])

    dependencies = _as_mapping(lockfile.get("dependencies"), "dependencies")
    legacy = _as_mapping(dependencies.get(name), f"dependencies.{name}")
    return str(legacy.get("version") or "")


LOCKFILE_READERS: List[Tuple[str, LockfileReader]] = [
    (PNPM_LOCKFILE, read_pnpm_lockfile),
    (YARN_LOCKFILE, read_yarn_lockfile),
    (NPM_SHRINKWRAP, read_npm_lockfile),
    (NPM_LOCKFILE, read_npm_lockfile),
]
"""Lockfiles in priority order with the reader for each format"""
