"""
apphosting Shared Constants

Single source of truth for file names, supported values and validation
bounds used across the apphosting packages.

Usage:
    from apphosting_common.constants import AVAILABILITY_VALUES, RunConfigBounds

    if tag not in AVAILABILITY_VALUES:
        raise ValidationError(f"invalid value in 'availability': {tag}")
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

APPHOSTING_VERSION = "0.1.0"
"""Current apphosting-core package version"""


# =============================================================================
# FILE NAMES
# =============================================================================

DEFAULT_CONFIG_FILENAME = "apphosting.yaml"
"""Config file read when no path is given"""

PACKAGE_JSON_FILENAME = "package.json"
"""Node.js dependency manifest"""

PNPM_LOCKFILE = "pnpm-lock.yaml"
YARN_LOCKFILE = "yarn.lock"
NPM_SHRINKWRAP = "npm-shrinkwrap.json"
NPM_LOCKFILE = "package-lock.json"

LOCKFILE_FILENAMES = [PNPM_LOCKFILE, YARN_LOCKFILE, NPM_SHRINKWRAP, NPM_LOCKFILE]
"""Lockfiles in the order they are consulted"""


# =============================================================================
# SUPPORTED VALUES
# =============================================================================

AVAILABILITY_BUILD = "BUILD"
AVAILABILITY_RUNTIME = "RUNTIME"

AVAILABILITY_VALUES = [AVAILABILITY_BUILD, AVAILABILITY_RUNTIME]
"""Valid tags for an environment variable's 'availability' list"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid values for APPHOSTING_LOG_LEVEL"""


# =============================================================================
# RUN CONFIG BOUNDS
# =============================================================================


class RunConfigBounds:
    """Inclusive [min, max] ranges for runConfig fields."""

    CPU = (1, 8)
    MEMORY_MIB = (512, 32768)
    CONCURRENCY = (1, 1000)
    MAX_INSTANCES = (1, 100)
    MIN_INSTANCES = (0, 100)


# =============================================================================
# ADAPTOR
# =============================================================================

DEFAULT_DEPENDENCY = "next"
"""Framework dependency resolved when none is given"""

ADAPTOR_PACKAGE = "@apphosting/adapter-nextjs"
"""Build adaptor published per major.minor of the framework"""

FALLBACK_ADAPTOR_VERSION = "latest"
"""Adaptor version requested when the framework specifier cannot be parsed"""


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

ENV_CONFIG_PATH = "APPHOSTING_CONFIG"
"""Environment variable overriding the config file path"""

ENV_LOG_LEVEL = "APPHOSTING_LOG_LEVEL"
"""Environment variable for the default log level"""

ENV_LOG_FORMAT = "APPHOSTING_LOG_FORMAT"
"""Environment variable selecting 'text' or 'json' log output"""
