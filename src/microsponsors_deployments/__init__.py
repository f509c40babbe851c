"""
microsponsors-deployments: deployment parameters for the Microsponsors contract
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    DeploymentError,
    DuplicateEnvironmentError,
    MigrationParseError,
    NotFoundError,
    RegistryFileNotFoundError,
    RegistryFormatError,
    ValidationError,
)
from .registry import (
    DeploymentRegistry,
    constructor_args,
    get_default_registry,
    get_record,
    list_environments,
)
from .types import DeploymentRecord, FieldError
from .validation import validate, validation_errors

try:
    __version__ = version("microsponsors-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentRegistry",
    "get_default_registry",
    "get_record",
    "list_environments",
    "constructor_args",
    "validate",
    "validation_errors",
    "DeploymentRecord",
    "FieldError",
    "DeploymentError",
    "NotFoundError",
    "ValidationError",
    "DuplicateEnvironmentError",
    "RegistryFileNotFoundError",
    "RegistryFormatError",
    "MigrationParseError",
]
