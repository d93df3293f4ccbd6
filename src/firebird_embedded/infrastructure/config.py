"""Configuration management for the embedded Firebird lifecycle."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """Connection constants for the single embedded database."""

    path: Path = Field(
        default=Path("target/embedded-example.fdb"), description="Database file path"
    )
    user: str = Field(default="sysdba", min_length=1, description="Database owner")
    password: str = Field(default="", description="Database password")
    url_template: str = Field(
        default="jdbc:firebirdsql:embedded:{path}?charSet=utf-8",
        description="Connection URL template, formatted with the database path",
    )
    driver: str = Field(default="firebird.driver", description="Driver identifier")


class EngineConfig(BaseModel):
    """Engine manager configuration."""

    backend: Literal["firebird", "file"] = Field(
        default="firebird", description="Engine manager implementation"
    )
    plugin: str = Field(default="EMBEDDED", description="Engine plugin identifier")
    page_size: int = Field(default=8192, ge=4096, le=32768, description="Page size in bytes")
    client_library: Path | None = Field(
        default=None, description="Explicit client library path (overrides the bundled one)"
    )


class NativeLibraryConfig(BaseModel):
    """Native library search path configuration."""

    resource_name: str = Field(default="firebird", description="Bundled resource directory")
    env_var: str = Field(default="FIREBIRD", description="Environment variable to publish")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(
        default="firebird_embedded", description="Service name for tracing"
    )


class Config(BaseSettings):
    """Main configuration for the embedded database lifecycle."""

    model_config = SettingsConfigDict(
        env_prefix="FIREBIRD_EMBEDDED_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    native: NativeLibraryConfig = Field(default_factory=NativeLibraryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def url(self) -> str:
        """Connection URL for the configured database path."""
        return self.database.url_template.format(path=self.database.path.as_posix())


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
