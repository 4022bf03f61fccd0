"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts with no configuration at all: it listens on port
3000 and keeps its data in ``data/users.json`` under the working directory.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Fixed HTML documents and client assets shipped with the package.
APP_DIR = Path(__file__).resolve().parent.parent
VIEWS_DIR = APP_DIR / "views"
STATIC_DIR = APP_DIR / "static"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # ``development`` makes error responses carry the exception message.
    # Any other value hides internal details from clients.
    environment: str = os.getenv("ENVIRONMENT", "production")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the JSON file holding the user collection.  Relative paths
    # are resolved against the working directory by ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "users.json"))

    @property
    def debug(self) -> bool:
        return self.environment.lower() == "development"


def get_data_path(data_file: Optional[str] = None) -> Path:
    """Compute the path to the JSON data file.

    If the configured value is an absolute path, use it directly.
    Otherwise resolve it relative to the current working directory, so an
    installed package never writes inside site-packages.
    """
    data_file = data_file or settings.data_file
    if os.path.isabs(data_file):
        return Path(data_file)
    return (Path.cwd() / data_file).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# therefore be set before this module is imported.
settings = Settings()
