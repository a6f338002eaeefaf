"""Configuration management for the short-link service."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    # Short link settings
    base_url: str = Field(
        default="http://localhost:9200",
        description="Base URL used for short links when the request carries no host"
    )

    path_prefix: str = Field(
        default="/urls",
        description="Path prefix for short URLs (e.g., '/urls' for /urls/1a2b3c4d)"
    )

    short_code_length: int = Field(
        default=8,
        ge=2,
        description="Length of generated hexadecimal short codes"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=0,
        description="Extra attempts when a generated short code is already taken"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
