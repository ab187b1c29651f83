"""Configuration system for rng-service.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RNG_*) -> .env file -> field defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rng_service.exceptions import ConfigValidationError

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class ServiceConfig(BaseSettings):
    """Configuration for rng-service.

    Resolution order: init kwargs -> env vars (RNG_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RNG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Server ---

    host: str = Field(
        default="127.0.0.1",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=8080,
        ge=0,
        le=65535,
        description="TCP port the HTTP server listens on",
    )
    index_body: str = Field(
        default="Random Microservice",
        description="Body returned by GET / and GET /random",
    )

    # --- Randomness ---

    random_source_type: str = Field(
        default="system",
        description="Random source identifier: 'system', 'seeded', or a plugin name",
    )
    random_seed: int | None = Field(
        default=None,
        description="Root seed for sources that accept one (None = OS entropy)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Per-request logging verbosity: 'none', 'summary', 'full'",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return value


def load_config(**overrides: Any) -> ServiceConfig:
    """Build a ServiceConfig, wrapping validation failures.

    Args:
        overrides: Field values taking precedence over environment and defaults.
            ``None`` values are dropped so unset CLI options fall through.

    Returns:
        The resolved configuration.

    Raises:
        ConfigValidationError: If any field fails validation.
    """
    kwargs = {key: value for key, value in overrides.items() if value is not None}
    try:
        return ServiceConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
