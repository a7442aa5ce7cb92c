"""Tests for the deployment metadata provider."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from superchainerc20_starter.frontend.services import deployment
from superchainerc20_starter.frontend.services.address import is_address
from superchainerc20_starter.frontend.services.deployment import (
    PACKAGED_DEPLOYMENT_PATH,
    Deployment,
    load_deployment,
    resolve_deployment_path,
)
from superchainerc20_starter.frontend.services.errors import DeploymentMetadataError


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_deployment__reads_packaged_artifact() -> None:
    """Load the packaged deployment with a well-formed address."""
    result = load_deployment(PACKAGED_DEPLOYMENT_PATH)

    assert result.deployed_address == "0x5FbDB2315678afecb367f032d93F642f64180aa3"
    assert is_address(result.deployed_address)
    assert result.chain_ids == (901, 902)


def test_load_deployment__reads_explicit_path(tmp_path: Path) -> None:
    """Load metadata from a caller-supplied file."""
    artifact = _write(
        tmp_path / "deployment.json",
        json.dumps({"deployedAddress": "0x0000000000000000000000000000000000000001"}),
    )

    result = load_deployment(artifact)

    assert result == Deployment("0x0000000000000000000000000000000000000001")


def test_load_deployment__missing_file_raises(tmp_path: Path) -> None:
    """Raise DeploymentMetadataError when the file does not exist."""
    with pytest.raises(DeploymentMetadataError) as exc_info:
        load_deployment(tmp_path / "missing.json")

    assert "missing.json" in str(exc_info.value)


def test_load_deployment__malformed_json_raises(tmp_path: Path) -> None:
    """Raise DeploymentMetadataError for unparsable JSON."""
    artifact = _write(tmp_path / "deployment.json", "{not json")

    with pytest.raises(DeploymentMetadataError):
        load_deployment(artifact)


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        "{}",
        '{"deployedAddress": 5}',
        '{"deployedAddress": "0x0000000000000000000000000000000000000001", "chainIds": ["x"]}',
    ],
)
def test_load_deployment__invalid_shape_raises(tmp_path: Path, content: str) -> None:
    """Raise DeploymentMetadataError when required fields are missing or mistyped."""
    artifact = _write(tmp_path / "deployment.json", content)

    with pytest.raises(DeploymentMetadataError):
        load_deployment(artifact)


def test_resolve_deployment_path__prefers_explicit_then_configured(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Pick the explicit path, then the configured one, then the packaged file."""
    configured = tmp_path / "configured.json"

    monkeypatch.setattr(deployment, "DEPLOYMENT_METADATA_PATH", None)
    assert resolve_deployment_path() == PACKAGED_DEPLOYMENT_PATH

    monkeypatch.setattr(deployment, "DEPLOYMENT_METADATA_PATH", str(configured))
    assert resolve_deployment_path() == configured
    assert resolve_deployment_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"


def test_default_deployed_address__uses_configured_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Read the default address from the configured artifact."""
    artifact = _write(
        tmp_path / "deployment.json",
        json.dumps({"deployedAddress": "0x00000000000000000000000000000000000000aa"}),
    )
    monkeypatch.setattr(deployment, "DEPLOYMENT_METADATA_PATH", str(artifact))
    deployment.default_deployed_address.cache_clear()
    try:
        assert deployment.default_deployed_address() == (
            "0x00000000000000000000000000000000000000aa"
        )
    finally:
        deployment.default_deployed_address.cache_clear()
