"""
apphosting.yaml Schema v1

Pydantic models for validating apphosting.yaml documents.

Design Principles:
- Pure validation: Receives dicts, validates structure, returns typed objects
- No file I/O: File reading is the loader's responsibility
- Fail fast: The first violated constraint raises ValidationError
- Absent is not zero: Optional run config fields stay None when unset

Usage:
    from apphosting_schema import AppHostingSchema

    data = {"runConfig": {"cpu": 2}, "env": [{"variable": "A", "value": "1"}]}
    config = AppHostingSchema.model_validate(data)
"""

from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

from apphosting_common import (
    AVAILABILITY_VALUES,
    RunConfigBounds,
    ValidationError,
)


def _check_range(field: str, value: Optional[Union[int, float]], bounds: Tuple[int, int]):
    if value is not None and not (bounds[0] <= value <= bounds[1]):
        raise ValidationError(
            f"runConfig.{field} field is not in valid range of [{bounds[0]}, {bounds[1]}]. "
            f"Got: {value}"
        )
    return value


# =============================================================================
# RUN CONFIG
# =============================================================================

class RunConfig(BaseModel):
    """
    Cloud Run service settings.

    Every field is optional. None means "use the platform default" and is
    distinct from a present zero (minInstances: 0 is a legal value).
    Field types match the server's field types and are strict: quoted
    numbers and booleans are rejected rather than coerced.

    Examples:
        runConfig:
          cpu: 1
          memoryMiB: 1024
          concurrency: 80
          maxInstances: 10
          minInstances: 0
    """
    cpu: Optional[float] = Field(default=None, strict=True)
    memory_mib: Optional[int] = Field(default=None, alias="memoryMiB", strict=True)
    concurrency: Optional[int] = Field(default=None, strict=True)
    max_instances: Optional[int] = Field(default=None, alias="maxInstances", strict=True)
    min_instances: Optional[int] = Field(default=None, alias="minInstances", strict=True)

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    @field_validator("cpu")
    @classmethod
    def validate_cpu(cls, v: Optional[float]) -> Optional[float]:
        return _check_range("cpu", v, RunConfigBounds.CPU)

    @field_validator("memory_mib")
    @classmethod
    def validate_memory(cls, v: Optional[int]) -> Optional[int]:
        return _check_range("memoryMiB", v, RunConfigBounds.MEMORY_MIB)

    @field_validator("concurrency")
    @classmethod
    def validate_concurrency(cls, v: Optional[int]) -> Optional[int]:
        return _check_range("concurrency", v, RunConfigBounds.CONCURRENCY)

    @field_validator("max_instances")
    @classmethod
    def validate_max_instances(cls, v: Optional[int]) -> Optional[int]:
        return _check_range("maxInstances", v, RunConfigBounds.MAX_INSTANCES)

    @field_validator("min_instances")
    @classmethod
    def validate_min_instances(cls, v: Optional[int]) -> Optional[int]:
        return _check_range("minInstances", v, RunConfigBounds.MIN_INSTANCES)

    def is_empty(self) -> bool:
        """True when no field was provided."""
        return all(
            getattr(self, name) is None
            for name in ("cpu", "memory_mib", "concurrency", "max_instances", "min_instances")
        )


# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

class EnvironmentVariable(BaseModel):
    """
    A single entry of the `env` list.

    Exactly one of `value` (a literal) or `secret` (a reference to a
    Secret Manager secret) must be set. `availability` restricts when the
    variable is materialized; an empty list means both BUILD and RUNTIME.
    """
    variable: str
    value: Optional[str] = None
    secret: Optional[str] = None
    availability: List[str] = []

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("variable", "value", "secret", mode="before")
    @classmethod
    def scalar_to_string(cls, v):
        """Unquoted YAML scalars (`value: 8080`, `value: true`) are kept as text."""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @model_validator(mode="after")
    def validate_value_or_secret(self) -> Self:
        """Check value/secret exclusivity, then availability tags."""
        if self.value and self.secret:
            raise ValidationError(
                f"Environment variable '{self.variable}': "
                "both 'value' and 'secret' fields cannot be present"
            )
        if not self.value and not self.secret:
            raise ValidationError(
                f"Environment variable '{self.variable}': "
                "either 'value' or 'secret' field is required"
            )
        for tag in self.availability:
            if tag not in AVAILABILITY_VALUES:
                raise ValidationError(
                    f"Environment variable '{self.variable}': invalid value in 'availability': {tag}. "
                    f"Valid values: {', '.join(AVAILABILITY_VALUES)}"
                )
        return self

    def is_available_at(self, phase: str) -> bool:
        """True if the variable is materialized during `phase` (BUILD or RUNTIME)."""
        return not self.availability or phase in self.availability


# =============================================================================
# ROOT MODEL
# =============================================================================

class AppHostingSchema(BaseModel):
    """
    Root model for apphosting.yaml.

    An empty document is valid and means "use defaults everywhere".
    Unknown top-level keys (scripts, outputFiles, ...) are accepted and kept.

    Usage:
        data = yaml.safe_load(content)
        config = AppHostingSchema.model_validate(data)

        config.run_config.min_instances   # None if absent, 0 if set to 0
        [e.variable for e in config.env_for("BUILD")]
    """
    run_config: RunConfig = Field(default_factory=RunConfig, alias="runConfig")
    env: List[EnvironmentVariable] = []

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    @field_validator("run_config", mode="before")
    @classmethod
    def default_null_run_config(cls, v):
        # `runConfig:` with no body parses to None
        return {} if v is None else v

    @field_validator("env", mode="before")
    @classmethod
    def default_null_env(cls, v):
        return [] if v is None else v

    def env_for(self, phase: str) -> List[EnvironmentVariable]:
        """Environment variables available during `phase`, in document order."""
        if phase not in AVAILABILITY_VALUES:
            raise ValueError(f"Unknown phase: '{phase}'. Valid phases: {', '.join(AVAILABILITY_VALUES)}")
        return [e for e in self.env if e.is_available_at(phase)]
