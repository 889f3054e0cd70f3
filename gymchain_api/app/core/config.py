"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration; override them via environment
variables in a real deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "GymChain API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Prefix under which the versioned router is mounted.  Empty by
    # default so resources live at ``/users`` and ``/workouts``.
    api_prefix: str = os.getenv("API_PREFIX", "")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Static token granting every authority with both scopes.  Requests
    # carrying it skip JWT decoding.  Use with care.
    super_admin_static_token: str = os.getenv("SUPER_ADMIN_TOKEN", "")

    # Comma‑separated tokens for trusted read‑only clients (dashboards,
    # reporting jobs).  They receive the search authorities and the
    # ``read`` scope only.  Example: BOT_TOKENS="token1,token2".
    bot_tokens: str = os.getenv("BOT_TOKENS", "")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "gymchain.db")


# Instantiated once; environment variables must be set before import.
settings = Settings()
