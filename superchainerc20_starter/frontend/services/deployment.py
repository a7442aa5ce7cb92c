"""Deployment metadata provider.

Reads the deployment artifact written by the contracts package. The frontend
only needs the deployed token address, used as the configuration default.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from superchainerc20_starter.frontend.services.errors import DeploymentMetadataError
from superchainerc20_starter.frontend.utils.constant import DEPLOYMENT_METADATA_PATH

PACKAGED_DEPLOYMENT_PATH = Path(__file__).with_name("deployment.json")


@dataclass(frozen=True)
class Deployment:
    """Facts about the deployed token contract.

    Attributes:
        deployed_address: Address the token was deployed to.
        chain_ids: Chains the token was deployed on, if recorded.
    """

    deployed_address: str
    chain_ids: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Deployment:
        """Build a Deployment from the artifact's JSON object.

        Raises:
            DeploymentMetadataError: If deployedAddress is missing or not a string,
                or chainIds holds non-integer values.
        """
        address = data.get("deployedAddress")
        if not isinstance(address, str):
            raise DeploymentMetadataError("Deployment metadata has no string 'deployedAddress'")
        try:
            chain_ids = tuple(int(chain_id) for chain_id in data.get("chainIds", []))
        except (TypeError, ValueError) as exc:
            raise DeploymentMetadataError(
                f"Deployment metadata has invalid 'chainIds': {exc}"
            ) from exc
        return cls(deployed_address=address, chain_ids=chain_ids)


def resolve_deployment_path(path: str | Path | None = None) -> Path:
    """Return the artifact path: explicit, then configured, then packaged."""
    if path is not None:
        return Path(path)
    if DEPLOYMENT_METADATA_PATH:
        return Path(DEPLOYMENT_METADATA_PATH)
    return PACKAGED_DEPLOYMENT_PATH


def load_deployment(path: str | Path | None = None) -> Deployment:
    """Load deployment metadata from disk.

    Args:
        path: Optional artifact path overriding the configured one.

    Returns:
        The parsed Deployment.

    Raises:
        DeploymentMetadataError: If the file is missing, unreadable or malformed.
    """
    artifact = resolve_deployment_path(path)
    logging.debug("Loading deployment metadata from %s", artifact)

    try:
        raw = artifact.read_text(encoding="utf-8")
    except OSError as exc:
        raise DeploymentMetadataError(
            f"Could not read deployment metadata {artifact}: {exc}"
        ) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DeploymentMetadataError(f"Malformed deployment metadata {artifact}: {exc}") from exc

    if not isinstance(data, dict):
        raise DeploymentMetadataError(f"Deployment metadata {artifact} is not a JSON object")

    return Deployment.from_dict(data)


@lru_cache(maxsize=1)
def default_deployed_address() -> str:
    """Return the configured deployment's address, read once per process."""
    return load_deployment().deployed_address
