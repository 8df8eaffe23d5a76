"""Pytest configuration and fixtures for apphosting tests."""
import json
import logging
import os

import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise the CLI end to end"
    )


@pytest.fixture
def clean_env():
    """Provide a clean environment for tests that modify env vars."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() so caplog sees apphosting records."""
    yield
    root = logging.getLogger("apphosting")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    """Write an apphosting.yaml with the given content and return its path."""
    def _write(content: str, name: str = "apphosting.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def full_config_yaml():
    """apphosting.yaml using every supported field"""
    return """
runConfig:
  cpu: 2
  memoryMiB: 1024
  concurrency: 80
  maxInstances: 10
  minInstances: 0
env:
  - variable: API_URL
    value: https://api.example.com
    availability:
      - BUILD
      - RUNTIME
  - variable: API_KEY
    secret: projects/demo/secrets/api-key
    availability:
      - RUNTIME
  - variable: NEXT_PUBLIC_FLAG
    value: "on"
    availability:
      - BUILD
  - variable: LOG_FORMAT
    value: json
"""


@pytest.fixture
def app_root(tmp_path):
    """Application root with a package.json declaring next ^14.0.0."""
    package_json = {
        "name": "web",
        "version": "1.0.0",
        "dependencies": {"next": "^14.0.0", "react": "^18.2.0"},
        "devDependencies": {"typescript": "^5.3.0"},
    }
    (tmp_path / "package.json").write_text(json.dumps(package_json))
    return tmp_path


PNPM_LOCKFILE = """\
lockfileVersion: '6.0'

dependencies:
  next:
    specifier: ^14.0.0
    version: 14.2.3(react-dom@18.2.0)(react@18.2.0)
  react:
    specifier: ^18.2.0
    version: 18.2.0
"""

PNPM_V9_LOCKFILE = """\
lockfileVersion: '9.0'

importers:

  .:
    dependencies:
      next:
        specifier: ^14.0.0
        version: 14.1.4(react-dom@18.2.0)(react@18.2.0)
"""

YARN_CLASSIC_LOCKFILE = """\
# THIS IS AN AUTOGENERATED FILE. DO NOT EDIT THIS FILE DIRECTLY.
# yarn lockfile v1


"@next/env@14.2.3":
  version "14.2.3"
  resolved "https://registry.yarnpkg.com/@next/env/-/env-14.2.3.tgz"

next@^13.5.0:
  version "13.5.6"
  resolved "https://registry.yarnpkg.com/next/-/next-13.5.6.tgz"

next@^14.0.0:
  version "14.2.3"
  resolved "https://registry.yarnpkg.com/next/-/next-14.2.3.tgz"
  dependencies:
    "@next/env" "14.2.3"
"""

YARN_BERRY_LOCKFILE = """\
# This file is generated by running "yarn install" inside your project.

__metadata:
  version: 6
  cacheKey: 8

"next@npm:^14.0.0":
  version: 14.0.4
  resolution: "next@npm:14.0.4"
  dependencies:
    "@next/env": 14.0.4
"""

NPM_LOCKFILE = {
    "name": "web",
    "lockfileVersion": 3,
    "packages": {
        "": {"dependencies": {"next": "^14.0.0"}},
        "node_modules/next": {"version": "14.2.1"},
        "node_modules/react": {"version": "18.2.0"},
    },
}

NPM_V1_LOCKFILE = {
    "name": "web",
    "lockfileVersion": 1,
    "dependencies": {
        "next": {"version": "13.4.19"},
    },
}


@pytest.fixture
def lockfiles():
    """Sample lockfile contents keyed by format."""
    return {
        "pnpm": PNPM_LOCKFILE,
        "pnpm_v9": PNPM_V9_LOCKFILE,
        "yarn_classic": YARN_CLASSIC_LOCKFILE,
        "yarn_berry": YARN_BERRY_LOCKFILE,
        "npm": json.dumps(NPM_LOCKFILE),
        "npm_v1": json.dumps(NPM_V1_LOCKFILE),
    }
