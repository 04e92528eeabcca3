"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server can be started locally without any setup.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

# Directory of the ``charity_api`` package; relative paths from the
# environment are resolved against it.
BASE_DIR = Path(__file__).resolve().parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Charity Funding API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Location of the JSON document holding the orphanage and old age
    # home lists.  Relative paths are resolved against the package
    # directory by the ``storage`` module.
    data_file: str = os.getenv("DATA_FILE", "data/organizations.json")

    # Path to the SQLite database used by the store-backed listing.
    # Relative paths are resolved the same way as ``data_file``.
    database_url: str = os.getenv("DATABASE_URL", "charity.db")

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin, which is what the bundled frontend expects.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Optional directory with frontend assets.  When set, its contents
    # are served at ``/`` next to the API routes.
    static_dir: str = os.getenv("STATIC_DIR", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def resolve_path(value: str) -> Path:
    """Return ``value`` as an absolute path.

    Absolute paths are returned unchanged; relative ones are taken
    relative to the package directory so that the server behaves the
    same regardless of the working directory it is started from.
    """
    path = Path(value)
    if path.is_absolute():
        return path
    return (BASE_DIR / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
