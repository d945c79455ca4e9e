"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with an empty environment (seeded with the demo fleet).
In a production deployment you should override these via environment
variables or a dedicated configuration service.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Fleet Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Every API route is served both at the root and under this prefix,
    # so ``/vessels`` and ``/api/vessels`` are equivalent.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Load the demo fleet (two vessels with crew, a booking, a maintenance
    # job and inventory) into a freshly created database.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows all.
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at instantiation time, environment variables should
# be set before importing this module.
settings = Settings()
