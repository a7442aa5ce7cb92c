"""Address format validation.

Checks that a string is a well-formed EVM address and converts it to its
EIP-55 checksummed form. Mixed-case checksums are not enforced on input.
"""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_checksum_address

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


class InvalidAddressError(ValueError):
    """Raised when a value is not a well-formed address."""

    def __init__(self, value: Any) -> None:  # noqa: ANN401
        super().__init__(f"Invalid Address {value}")
        self.value = value


def is_address(value: Any) -> bool:  # noqa: ANN401
    """Return True if value is a 0x-prefixed, 40 hex character string."""
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def to_canonical_address(value: Any) -> str:  # noqa: ANN401
    """Validate an address and return its checksummed form.

    Args:
        value: Candidate address string.

    Returns:
        The EIP-55 checksummed address.

    Raises:
        InvalidAddressError: If the value is not a well-formed address.
    """
    if not is_address(value):
        raise InvalidAddressError(value)
    return to_checksum_address(value)
