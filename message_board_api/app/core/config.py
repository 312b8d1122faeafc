"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
board can be started without any configuration at all; override them
via environment variables when deploying.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Message Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When unset, logs only go to the
    # console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address the runner binds to.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Directory holding the browser client.  A relative path is resolved
    # against the ``message_board_api`` package directory by
    # ``get_static_path``.
    static_dir: str = os.getenv("STATIC_DIR", "static")


def get_static_path(config: Settings) -> Path:
    """Compute the absolute path of the static file root.

    If ``config.static_dir`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package directory.
    """
    static_dir = Path(config.static_dir)
    if static_dir.is_absolute():
        return static_dir
    base_dir = Path(__file__).resolve().parent.parent.parent  # message_board_api/
    return (base_dir / static_dir).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
