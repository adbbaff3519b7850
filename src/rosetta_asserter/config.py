"""Configuration management for rosetta-asserter using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".rosetta-asserter.json"


class Endpoint(str, Enum):
    """Construction objects and responses that can be validated."""
    PUBLIC_KEY = "public_key"
    SIGNING_PAYLOAD = "signing_payload"
    SIGNATURES = "signatures"
    METADATA = "metadata"
    SUBMIT = "submit"
    DERIVE = "derive"
    COMBINE = "combine"
    PAYLOADS = "payloads"
    HASH = "hash"


class ReportFormat(str, Enum):
    """Report format types."""
    TABLE = "table"
    JSON = "json"
    MARKDOWN = "markdown"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    fail_fast: bool = Field(alias="failFast", default=True)
    endpoints: list[Endpoint] = Field(default_factory=lambda: list(Endpoint))

    @field_validator("endpoints")
    @classmethod
    def validate_endpoints(cls, v):
        if not v:
            raise ValueError("at least one endpoint must be enabled")
        return v

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: ReportFormat = ReportFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class AsserterConfig(BaseModel):
    """Complete rosetta-asserter configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def endpoint_enabled(self, endpoint: str) -> bool:
        return endpoint in self.validation.endpoints


def load_config(config_path: str | Path | None = None) -> AsserterConfig:
    """Load configuration, falling back to defaults when no file is found.

    Without ``config_path`` the file is discovered with :func:`find_config_file`.

    Raises:
        ValueError: If the file is not JSON or does not match AsserterConfig
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None or not path.is_file():
        return create_default_config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    try:
        return AsserterConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e


def find_config_file(start_dir: Path | None = None,
                     file_name: str = CONFIG_FILE_NAME) -> Path | None:
    """Return the nearest ``file_name`` in ``start_dir`` or one of its parents."""
    start = Path(start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / file_name
        if candidate.is_file():
            return candidate
    return None


def create_default_config() -> AsserterConfig:
    """Create default configuration: fail-fast, every endpoint enabled."""
    return AsserterConfig()
