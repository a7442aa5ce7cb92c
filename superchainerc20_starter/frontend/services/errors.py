"""Configuration error hierarchy.

Failures raised while resolving the frontend configuration. They are not
caught locally; an invalid configuration aborts startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldIssue:
    """A single field that failed validation.

    Attributes:
        field: Environment variable name.
        value: The offending value as read from the source.
        message: Human-readable reason.
    """

    field: str
    value: Any
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ConfigError(Exception):
    """Base class for configuration failures."""


class ValidationError(ConfigError, ValueError):
    """Raised when one or more configuration fields are invalid."""

    def __init__(self, issues: list[FieldIssue]) -> None:
        self.issues = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid environment configuration: {details}")

    @property
    def fields(self) -> list[str]:
        """Return the names of the fields that failed."""
        return [issue.field for issue in self.issues]


class DeploymentMetadataError(ConfigError):
    """Raised when the deployment metadata file is missing or malformed."""
