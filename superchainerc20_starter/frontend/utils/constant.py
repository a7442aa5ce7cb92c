"""Project-wide constants and configuration."""

from __future__ import annotations

import os

from .env_loader import load_project_env

# Environment keys read by the configuration loader
TOKEN_CONTRACT_ADDRESS_KEY = "VITE_TOKEN_CONTRACT_ADDRESS"
WALLET_CONNECT_PROJECT_ID_KEY = "VITE_WALLET_CONNECT_PROJECT_ID"

# The mode picks the .env.<mode> files, so it comes from the process environment only
APP_MODE: str = os.environ.get("MODE", "development")

# Load once (single source of truth)
_ENV = load_project_env(mode=APP_MODE)

DEPLOYMENT_METADATA_PATH: str | None = _ENV.get("DEPLOYMENT_METADATA_PATH") or None
FRONTEND_DIST_DIR: str = _ENV.get("FRONTEND_DIST_DIR", "dist")
LOG_LEVEL: str = _ENV.get("LOG_LEVEL", "INFO").upper()


def project_env() -> dict[str, str]:
    """Return a copy of the environment snapshot taken at import."""
    return dict(_ENV)
