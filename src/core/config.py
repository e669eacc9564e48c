"""
Application settings.

Values are read from environment variables once, when this module is imported.
Set the environment before importing anything from ``src``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Game Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # "memory" keeps games for the lifetime of the process, "sql" uses DATABASE_URL
    backend: str = os.getenv("CATALOG_BACKEND", "memory")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./catalog.db")
    database_echo: bool = _env_flag("DATABASE_ECHO")

    # Pre-register the six Konami titles in the in-memory store
    seed_catalog: bool = _env_flag("CATALOG_SEED")

    # Answer GET /games/{id} with an empty body, as the first version of the API did
    legacy_empty_get: bool = _env_flag("CATALOG_LEGACY_EMPTY_GET")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


settings = Settings()
