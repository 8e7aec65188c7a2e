"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_kernel.authorization.types import Permission


class IsaGraphSettings(BaseSettings):
    """ISA graph generation settings.

    Environment variables:
        SEEK_ISA_GRAPH_MAX_NODES: Node ceiling per generated graph; empty for
            no limit (default: 10000)
        SEEK_ISA_GRAPH_VISIBILITY_PERMISSION: Permission a node must grant to be
            marked viewable (default: view)
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEK_ISA_GRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_nodes: int | None = Field(
        default=10000,
        description="Maximum number of nodes in a generated graph",
        ge=1,
    )
    visibility_permission: Permission = Field(
        default=Permission.VIEW,
        description="Permission checked to set node visibility",
    )

    @field_validator("max_nodes", mode="before")
    @classmethod
    def empty_max_nodes_means_unlimited(cls, value: object) -> object:
        """Allow SEEK_ISA_GRAPH_MAX_NODES= to disable the limit."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoggingSettings(BaseSettings):
    """Logging settings.

    Environment variables:
        SEEK_LOG_LEVEL: Minimum log level (default: INFO)
        SEEK_LOG_JSON_OUTPUT: Force JSON (true) or console (false) output; unset
            picks console output in a TTY or when FORCE_COLOR is set
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEK_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Minimum log level")
    json_output: bool | None = Field(
        default=None,
        description="Render logs as JSON",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_isa_graph_settings() -> IsaGraphSettings:
    """Get cached ISA graph settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return IsaGraphSettings()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
