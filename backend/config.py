"""
Configuration management for the Modeldex backend.

Settings come from MODELDEX_* environment variables, layered over the
optional `search:` section of the project's config.yaml.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

ENV_PREFIX = "MODELDEX_"


class Settings(BaseSettings):
    """Application settings."""

    # API Settings
    api_title: str = "Modeldex API"
    api_version: str = "1.0.0"
    api_description: str = "Find AI models for a free-text query"

    # Server Settings
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS Settings
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Generative service
    generative_model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 4096
    max_models: int = 12

    # Request limits
    max_query_length: int = 200
    search_rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    model_config = {"env_prefix": ENV_PREFIX}


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        config_path: Explicit path; defaults to config.yaml in the project root

    Returns:
        Configuration dictionary (empty if the file does not exist)
    """
    if config_path is None:
        backend_dir = Path(__file__).parent
        config_path = backend_dir.parent / "config.yaml"

    if not config_path.exists():
        return {}

    with open(config_path) as f:
        config = yaml.safe_load(f)

    return config or {}


def get_settings(config_path: Path | None = None) -> Settings:
    """
    Get application settings.

    Values from the `search:` section of config.yaml apply unless the
    matching MODELDEX_* environment variable is set.
    """
    section = load_config(config_path).get("search", {}) or {}
    overrides = {
        key: value
        for key, value in section.items()
        if key in Settings.model_fields and f"{ENV_PREFIX}{key.upper()}" not in os.environ
    }
    return Settings(**overrides)


# Global settings instance
settings = get_settings()
