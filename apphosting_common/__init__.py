"""
apphosting Common Package

Shared primitives used across the apphosting packages:
- Exception classes for consistent error handling
- Constants for file names, supported values and bounds
- Structured logger

Usage:
    from apphosting_common import ValidationError, get_logger
    from apphosting_common import RunConfigBounds, AVAILABILITY_VALUES
"""

from .errors import (
    AppHostingError,
    ValidationError,
    ConfigReadError,
    ManifestError,
)

from .constants import (
    APPHOSTING_VERSION,
    DEFAULT_CONFIG_FILENAME,
    PACKAGE_JSON_FILENAME,
    LOCKFILE_FILENAMES,
    AVAILABILITY_BUILD,
    AVAILABILITY_RUNTIME,
    AVAILABILITY_VALUES,
    LOG_LEVELS,
    RunConfigBounds,
    DEFAULT_DEPENDENCY,
    ADAPTOR_PACKAGE,
    FALLBACK_ADAPTOR_VERSION,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_LOG_FORMAT,
)

from .logger import (
    AppHostingLogger,
    get_logger,
    configure_logging,
)

__version__ = APPHOSTING_VERSION

__all__ = [
    # Errors
    "AppHostingError",
    "ValidationError",
    "ConfigReadError",
    "ManifestError",
    # Constants
    "APPHOSTING_VERSION",
    "DEFAULT_CONFIG_FILENAME",
    "PACKAGE_JSON_FILENAME",
    "LOCKFILE_FILENAMES",
    "AVAILABILITY_BUILD",
    "AVAILABILITY_RUNTIME",
    "AVAILABILITY_VALUES",
    "LOG_LEVELS",
    "RunConfigBounds",
    "DEFAULT_DEPENDENCY",
    "ADAPTOR_PACKAGE",
    "FALLBACK_ADAPTOR_VERSION",
    "ENV_CONFIG_PATH",
    "ENV_LOG_LEVEL",
    "ENV_LOG_FORMAT",
    # Logger
    "AppHostingLogger",
    "get_logger",
    "configure_logging",
]
