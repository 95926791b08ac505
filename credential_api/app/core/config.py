"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, reading ``user.json``
from the project root and serving the routes at the top level.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Credential API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Location of the JSON file holding the single user record.  A
    # relative path is resolved against the project root by
    # ``core.storage.resolve_user_data_path``.
    user_data_path: str = os.getenv("USER_DATA_PATH", "user.json")

    # Prefix the user routes are mounted under, e.g. "/users".  Empty
    # means ``/profile``, ``/login`` and ``/logout`` sit at the root.
    mount_path: str = os.getenv("MOUNT_PATH", "")

    # When enabled the stored password is a PBKDF2 "salthex$hashhex"
    # string (see ``set_user.py --hash``) instead of plain text.
    password_hashing: bool = _env_flag("PASSWORD_HASHING")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
