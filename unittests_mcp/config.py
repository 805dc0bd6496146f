from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Server ---
    SERVER_NAME: str = Field(
        default="unittests-mcp",
        description="Name reported to MCP clients.",
    )
    SERVER_INSTRUCTIONS: str = Field(
        default="Provides prompts that can be used to generate unit tests.",
        description="Instructions reported to MCP clients on initialize.",
    )

    # --- Transport ---
    TRANSPORT: Literal["stdio", "http"] = Field(
        default="stdio",
        description="Serve over stdio or stateless streamable HTTP.",
    )
    HOST: str = Field(
        default="0.0.0.0",
        description="Bind address for the HTTP transport.",
    )
    PORT: int = Field(
        default=8000,
        description="Bind port for the HTTP transport.",
    )

    # --- Logging ---
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum loguru level written to stderr.",
    )

    # --- Completion ---
    COMPLETION_MAX_RESULTS: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Maximum completion values returned per request.",
    )

    # --- Observability ---
    OTEL_SERVICE_NAME: str = Field(
        default="unittests-mcp",
        description="Service name used for the OpenTelemetry tracer.",
    )
    AGENT_OBSERVABILITY_ENABLED: bool = Field(
        default=True,
        description="Emit OpenTelemetry spans for prompt and completion handlers.",
    )


settings = Settings()
