"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with an empty store on port 3000 when nothing is set.
Tests build their own ``Settings`` instances and pass them to
``create_app`` instead of touching the environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Newsroom API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Path of an optional log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the resource routers are mounted.  Empty keeps
    # the plain ``/articles``, ``/journalists`` and ``/categories`` paths.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # How new ids are picked.  ``sequential`` never reuses an id after a
    # deletion; ``length`` assigns ``len(collection) + 1`` and can hand
    # out an id that is still in use after a delete.
    id_strategy: str = os.getenv("ID_STRATEGY", "sequential")

    # When enabled, articles must reference an existing journalist and
    # category on create and update.
    enforce_references: bool = _env_flag("ENFORCE_REFERENCES")

    # Load the built‑in sample journalists, categories and articles at
    # startup.
    seed_data: bool = _env_flag("SEED_DATA")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
