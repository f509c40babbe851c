"""Main API for microsponsors-deployments library."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import DuplicateEnvironmentError, NotFoundError
from .history import HISTORY
from .ingestion import records_from_migrations
from .parsers import parse_registry_file
from .paths import get_registry_path
from .types import DeploymentRecord, FieldError
from .validation import validate, validation_errors, warn_advisories

logger = logging.getLogger(__name__)


class DeploymentRegistry:
    """Read-only table of deployment records keyed by environment label."""

    def __init__(self, records: Iterable[DeploymentRecord]):
        """
        Build the registry.

        Args:
            records: Records in authoring order

        Raises:
            DuplicateEnvironmentError: If two records share an environment label
        """
        by_environment: Dict[str, DeploymentRecord] = {}
        for record in records:
            if record.environment in by_environment:
                raise DuplicateEnvironmentError(
                    f"Environment '{record.environment}' is configured more than once"
                )
            by_environment[record.environment] = record

        self._records = by_environment
        self._order = tuple(by_environment)

    @classmethod
    def from_history(cls) -> "DeploymentRegistry":
        """Registry over the embedded deployment history."""
        logger.debug("Loading %d records from embedded history", len(HISTORY))
        return cls(HISTORY)

    @classmethod
    def from_file(cls, file_path: Union[Path, str]) -> "DeploymentRegistry":
        """
        Registry over a JSON registry file.

        Raises:
            RegistryFileNotFoundError: If the file does not exist
            RegistryFormatError: If the file is malformed
            DuplicateEnvironmentError: If the file repeats an environment label
        """
        records = parse_registry_file(file_path)
        logger.debug("Loaded %d records from %s", len(records), file_path)
        return cls(records)

    @classmethod
    def from_migrations(
        cls,
        migrations_dir: Union[Path, str],
        labels: Optional[Dict[str, str]] = None,
        network: Optional[str] = None,
    ) -> "DeploymentRegistry":
        """Registry over records recovered from Truffle migration scripts."""
        records = records_from_migrations(migrations_dir, labels=labels, network=network)
        logger.debug("Recovered %d records from %s", len(records), migrations_dir)
        return cls(records)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, environment: object) -> bool:
        return environment in self._records

    def has_environment(self, environment: str) -> bool:
        """
        Check if an environment is configured.

        Args:
            environment: Environment label to check

        Returns:
            True if a record exists for the label, False otherwise
        """
        return environment in self._records

    def list_environments(self) -> List[str]:
        """
        Get all configured environment labels.

        Returns:
            Labels in authoring order
        """
        return list(self._order)

    def records(self) -> Tuple[DeploymentRecord, ...]:
        """All records in authoring order."""
        return tuple(self._records[environment] for environment in self._order)

    def get_record(self, environment: str) -> DeploymentRecord:
        """
        Get the record for an environment.

        Args:
            environment: Environment label

        Returns:
            DeploymentRecord exactly as authored

        Raises:
            NotFoundError: If no record exists for the label
        """
        try:
            return self._records[environment]
        except KeyError:
            available = ", ".join(self._order) or "none"
            raise NotFoundError(
                f"No deployment configured for environment '{environment}' "
                f"(available: {available})"
            ) from None

    def validate_all(self) -> Dict[str, List[FieldError]]:
        """
        Check every record.

        Records that pass are also checked for advisories, which are logged
        without failing them.

        Returns:
            Failing fields keyed by environment label; empty when all records are valid
        """
        failures: Dict[str, List[FieldError]] = {}
        for environment in self._order:
            errors = validation_errors(self._records[environment])
            if errors:
                failures[environment] = errors
            else:
                warn_advisories(self._records[environment])
        return failures

    def constructor_args(self, environment: str) -> Tuple[str, str, str]:
        """
        Get validated constructor arguments for an environment.

        This is what the deployment harness passes to the contract
        constructor: name, symbol, registry address, in that order.

        Args:
            environment: Environment label

        Returns:
            Tuple of (token_name, token_symbol, registry_address)

        Raises:
            NotFoundError: If no record exists for the label
            ValidationError: If the record fails validation
        """
        record = self.get_record(environment)
        validate(record)
        return record.constructor_args


@lru_cache(maxsize=None)
def get_default_registry() -> DeploymentRegistry:
    """
    Get the process-wide registry, building it on first use.

    Loads the file named by $MICROSPONSORS_DEPLOYMENTS_FILE when set,
    otherwise the embedded history.

    Returns:
        Shared DeploymentRegistry
    """
    registry_path = get_registry_path()
    if registry_path is None:
        return DeploymentRegistry.from_history()
    return DeploymentRegistry.from_file(registry_path)


def get_record(environment: str) -> DeploymentRecord:
    """Get a record from the default registry."""
    return get_default_registry().get_record(environment)


def list_environments() -> List[str]:
    """List environment labels of the default registry."""
    return get_default_registry().list_environments()


def constructor_args(environment: str) -> Tuple[str, str, str]:
    """Get validated constructor arguments from the default registry."""
    return get_default_registry().constructor_args(environment)
