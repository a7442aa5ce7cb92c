"""FastAPI application serving the SuperchainERC20 starter frontend.

This module provides a thin HTTP layer over the configuration service.
The configuration is resolved once at import; an invalid configuration
aborts startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from superchainerc20_starter.frontend.services.env_config import ResolvedConfig, load_config
from superchainerc20_starter.frontend.services.errors import ValidationError
from superchainerc20_starter.frontend.utils.constant import (
    APP_MODE,
    FRONTEND_DIST_DIR,
    LOG_LEVEL,
    project_env,
)

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")


def resolve_startup_config() -> ResolvedConfig:
    """Resolve the configuration from the project environment.

    Returns:
        The validated configuration.

    Raises:
        ValidationError: If the environment holds invalid values.
    """
    try:
        config = load_config(project_env())
    except ValidationError as exc:
        logging.error("Startup aborted: %s", exc)
        raise

    logging.info(
        f"Resolved {APP_MODE} configuration: token={config.token_contract_address}, "
        f"walletconnect={'set' if config.wallet_connect_project_id is not None else 'unset'}"
    )
    return config


CONFIG = resolve_startup_config()

app = FastAPI()


@app.get("/config")
def get_config() -> dict[str, str]:
    """Return the resolved configuration for the browser bundle.

    Returns:
        Env-keyed configuration values; an unset project id is omitted.
    """
    return CONFIG.to_dict()


# Serve the built frontend when present
if Path(FRONTEND_DIST_DIR).is_dir():
    app.mount("/", StaticFiles(directory=FRONTEND_DIST_DIR, html=True), name="frontend")
else:
    logging.warning(f"Frontend build directory {FRONTEND_DIST_DIR} not found; serving API only")
