"""
apphosting Error Classes

Exception hierarchy shared by the schema, SDK and CLI packages.
Every error carries a human-readable message and a stable machine code.

Usage:
    from apphosting_common.errors import ValidationError

    raise ValidationError("runConfig.cpu field is not in valid range of [1, 8]")
"""

from typing import Any, Dict


class AppHostingError(Exception):
    """Base class for all apphosting errors."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for structured output (CLI --json, logs)."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }


class ValidationError(AppHostingError):
    """Raised when a config document is parsed but semantically invalid."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ConfigReadError(AppHostingError, OSError):
    """Raised when a config file exists but cannot be read."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIG_READ_ERROR")


class ManifestError(AppHostingError):
    """Raised when package.json is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, code="MANIFEST_ERROR")
