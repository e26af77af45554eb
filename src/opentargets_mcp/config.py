"""
Configuration management using Pydantic Settings.

Loads environment variables with validation, defaults, and type safety.
Settings are frozen: the HTTP client captures them once at construction.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly before creating Settings instance
# Search for .env file in project root (parent of src/)
_current_file = Path(__file__)
_project_root = _current_file.parent.parent.parent
_env_file = _project_root / ".env"

# Load .env file if it exists (don't error if missing)
load_dotenv(dotenv_path=_env_file, override=False)


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    All settings have sensible defaults and are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
        frozen=True,
    )

    # ========================================================================
    # Open Targets API Configuration
    # ========================================================================

    opentargets_graphql_url: str = Field(
        default="https://api.platform.opentargets.org/api/v4/graphql",
        description="Open Targets Platform GraphQL endpoint",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        ge=1,
        le=300,
        description="Upper bound on any single upstream request",
    )
    user_agent: str = Field(
        default="OpenTargets-MCP-Server/0.1.0",
        description="User-Agent header sent upstream",
    )

    # ========================================================================
    # MCP Server Configuration
    # ========================================================================

    mcp_server_name: str = Field(
        default="opentargets-server",
        description="MCP server name",
    )
    server_version: str = Field(
        default="0.1.0",
        description="Version reported during MCP initialization",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="text",
        description="Log format: json or text",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    # ========================================================================
    # Validators
    # ========================================================================

    @field_validator("opentargets_graphql_url")
    @classmethod
    def validate_graphql_url(cls, v: str) -> str:
        """Validate endpoint is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"Invalid GraphQL endpoint: {v}. Must start with http:// or https://"
            )
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(
                f"Invalid log format: {v}. Must be 'json' or 'text'"
            )
        return v_lower

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


# Global settings instance
# Loaded once at import time
settings = Settings()
