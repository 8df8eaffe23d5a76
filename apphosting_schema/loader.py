"""
apphosting.yaml Loader

Reads an apphosting.yaml file and validates it in two phases:

1. Structural: the bytes must decode as a YAML mapping
2. Semantic: the mapping must satisfy AppHostingSchema constraints

A missing file is not an error: the caller gets a default document.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from apphosting_common import ConfigReadError, ValidationError, get_logger

from .apphosting_v1 import AppHostingSchema

logger = get_logger(__name__)


def _format_pydantic_error(e: PydanticValidationError) -> str:
    first = e.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


def parse_apphosting_config(data: Any) -> AppHostingSchema:
    """Validate already-parsed YAML data.

    Args:
        data: Result of yaml.safe_load (None for an empty document)

    Returns:
        Validated AppHostingSchema

    Raises:
        ValidationError: If the data is not a mapping or violates a constraint
    """
    if data is None:
        return AppHostingSchema()

    if not isinstance(data, dict):
        raise ValidationError(
            f"apphosting config must be a mapping at the top level, got {type(data).__name__}"
        )

    try:
        return AppHostingSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid apphosting config: {_format_pydantic_error(e)}") from e


def load_apphosting_config(path: Union[str, Path]) -> AppHostingSchema:
    """Load and validate apphosting.yaml.

    Args:
        path: Path to the config file

    Returns:
        Validated AppHostingSchema; an empty default document if the file
        does not exist

    Raises:
        ConfigReadError: If the file exists but cannot be read
        ValidationError: If the YAML is malformed or a constraint is violated

    Example:
        >>> config = load_apphosting_config("apphosting.yaml")
        >>> config.run_config.cpu
        2.0
    """
    file_path = Path(path)

    try:
        content = file_path.read_bytes()
    except FileNotFoundError:
        logger.info("Missing apphosting config, using reasonable defaults", path=str(file_path))
        return AppHostingSchema()
    except OSError as e:
        raise ConfigReadError(f"Reading apphosting config at {file_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValidationError(
            f"Unmarshalling apphosting config as YAML: {file_path}\n"
            f"Error: {e}"
        ) from e

    config = parse_apphosting_config(data)
    logger.debug(
        "Loaded apphosting config",
        path=str(file_path),
        env_count=len(config.env),
        run_config_set=not config.run_config.is_empty(),
    )
    return config


def validate_apphosting_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Validate a config file without raising.

    Returns:
        Dictionary with keys:
        - valid: bool
        - errors: list of error messages
        - warnings: list of warning messages
        - config: AppHostingSchema or None
        - message: one-line summary
    """
    file_path = Path(path)
    result: Dict[str, Any] = {
        "valid": False,
        "errors": [],
        "warnings": [],
        "config": None,
        "message": "",
    }

    if not file_path.exists():
        result["warnings"].append(
            f"Config file not found: {file_path}. Platform defaults will be used."
        )

    try:
        config = load_apphosting_config(file_path)
    except (ValidationError, ConfigReadError) as e:
        result["errors"].append(e.message)
        result["message"] = f"{file_path} is invalid"
        return result

    result["valid"] = True
    result["config"] = config
    result["message"] = (
        f"{file_path} is valid ({len(config.env)} environment variable(s))"
    )
    return result
