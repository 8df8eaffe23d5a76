"""
apphosting Schema Package

Typed models and loader for apphosting.yaml.

Usage:
    from apphosting_schema import load_apphosting_config

    config = load_apphosting_config("apphosting.yaml")
    config.run_config.max_instances
"""

from apphosting_common import ValidationError, ConfigReadError

from .apphosting_v1 import (
    AppHostingSchema,
    EnvironmentVariable,
    RunConfig,
)
from .loader import (
    load_apphosting_config,
    parse_apphosting_config,
    validate_apphosting_config,
)

__all__ = [
    "AppHostingSchema",
    "EnvironmentVariable",
    "RunConfig",
    "load_apphosting_config",
    "parse_apphosting_config",
    "validate_apphosting_config",
    "ValidationError",
    "ConfigReadError",
]
