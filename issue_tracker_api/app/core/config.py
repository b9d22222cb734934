"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Issue Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address for ``run.py``.  The port matches the one the
    # frontend has always talked to.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    # When enabled the store starts with a few sample issues so that the
    # frontend has something to show.  Users are always seeded.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    cors_allow_methods: List[str] = field(
        default_factory=lambda: ["GET", "POST", "PATCH", "OPTIONS"]
    )
    cors_allow_headers: List[str] = field(
        default_factory=lambda: ["Content-Type", "Authorization"]
    )

    @property
    def cors_origins(self) -> List[str]:
        """Return the configured CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
