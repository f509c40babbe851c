"""Custom exception classes for microsponsors-deployments library."""

from typing import List

from .types import FieldError


class DeploymentError(Exception):
    """Base exception for deployment configuration errors."""

    pass


class NotFoundError(DeploymentError, LookupError):
    """Raised when no record is configured for the requested environment."""

    pass


class DuplicateEnvironmentError(DeploymentError, ValueError):
    """Raised when two records share an environment label."""

    pass


class RegistryFileNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the registry file is not found."""

    pass


class RegistryFormatError(DeploymentError, ValueError):
    """Raised when the registry file does not match the expected layout."""

    pass


class MigrationParseError(DeploymentError, ValueError):
    """Raised when a migration script has no contract deploy call."""

    pass


class ValidationError(DeploymentError, ValueError):
    """
    Raised when one or more record fields fail validation.

    Every failing field is carried in ``errors`` so a misconfigured record
    can be fixed in one pass.
    """

    def __init__(self, environment: str, errors: List[FieldError]):
        self.environment = environment
        self.errors = list(errors)
        details = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid deployment record '{environment}': {details}")

    @property
    def fields(self) -> List[str]:
        """Names of the failing fields, in check order."""
        return [e.field for e in self.errors]
