"""Frontend configuration resolution.

Turns an environment-like key/value mapping into a validated, immutable
ResolvedConfig. Every failing field is collected before a single
ValidationError is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from superchainerc20_starter.frontend.services.address import (
    InvalidAddressError,
    to_canonical_address,
)
from superchainerc20_starter.frontend.services.deployment import default_deployed_address
from superchainerc20_starter.frontend.services.errors import FieldIssue, ValidationError
from superchainerc20_starter.frontend.utils.constant import (
    TOKEN_CONTRACT_ADDRESS_KEY,
    WALLET_CONNECT_PROJECT_ID_KEY,
)


@dataclass(frozen=True)
class ResolvedConfig:
    """Validated frontend configuration.

    Attributes:
        token_contract_address: Checksummed address of the token contract.
        wallet_connect_project_id: WalletConnect project id, or None when unset.
    """

    token_contract_address: str
    wallet_connect_project_id: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Convert to an env-keyed dictionary for the browser bundle.

        Returns:
            Mapping of environment keys to values; an unset project id is omitted.
        """
        data = {TOKEN_CONTRACT_ADDRESS_KEY: self.token_contract_address}
        if self.wallet_connect_project_id is not None:
            data[WALLET_CONNECT_PROJECT_ID_KEY] = self.wallet_connect_project_id
        return data


def resolve_token_address(value: str | None, default: str | None = None) -> str:
    """Return value, or the default address when value is missing or blank.

    Blankness is judged on the trimmed value, but a non-blank value is
    returned untrimmed. Without an explicit default the deployed address
    is read from the deployment metadata.
    """
    if value is None or value.strip() == "":
        address = default if default is not None else default_deployed_address()
        logging.debug(
            "%s is unset, using deployment address %s", TOKEN_CONTRACT_ADDRESS_KEY, address
        )
        return address
    return value


def parse_token_address(value: str) -> str:
    """Validate a token address and return its checksummed form.

    Raises:
        InvalidAddressError: If value is not a well-formed address.
    """
    return to_canonical_address(value)


def _expected_string(field: str, value: Any) -> FieldIssue:  # noqa: ANN401
    return FieldIssue(field, value, f"Expected string, received {type(value).__name__}")


def load_config(
    source: Mapping[str, Any],
    *,
    default_address: str | None = None,
) -> ResolvedConfig:
    """Resolve the frontend configuration from an environment mapping.

    Args:
        source: Environment-like mapping; only the token address and
            WalletConnect project id keys are read.
        default_address: Fallback token address. Defaults to the deployed
            address from the deployment metadata.

    Returns:
        The validated configuration.

    Raises:
        ValidationError: If any field is invalid. All failing fields are listed.
        DeploymentMetadataError: If the default address is needed but cannot be read.
    """
    issues: list[FieldIssue] = []

    token_address = ""
    raw_address = source.get(TOKEN_CONTRACT_ADDRESS_KEY)
    if raw_address is not None and not isinstance(raw_address, str):
        issues.append(_expected_string(TOKEN_CONTRACT_ADDRESS_KEY, raw_address))
    else:
        candidate = resolve_token_address(raw_address, default_address)
        try:
            token_address = parse_token_address(candidate)
        except InvalidAddressError as exc:
            issues.append(FieldIssue(TOKEN_CONTRACT_ADDRESS_KEY, candidate, str(exc)))

    project_id = source.get(WALLET_CONNECT_PROJECT_ID_KEY)
    if project_id is not None and not isinstance(project_id, str):
        issues.append(_expected_string(WALLET_CONNECT_PROJECT_ID_KEY, project_id))
        project_id = None

    if issues:
        raise ValidationError(issues)

    return ResolvedConfig(
        token_contract_address=token_address,
        wallet_connect_project_id=project_id,
    )
