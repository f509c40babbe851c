"""Deployment record validation for microsponsors-deployments library."""

import logging
from typing import Any, List

from eth_utils import add_0x_prefix, is_checksum_address

from .constants import ADDRESS_PATTERN, MAX_SYMBOL_LENGTH
from .exceptions import ValidationError
from .types import DeploymentRecord, FieldError

logger = logging.getLogger(__name__)


def is_valid_address(value: Any) -> bool:
    """
    Check that a value is a 40 hex digit address, optionally 0x-prefixed.

    Args:
        value: Candidate address

    Returns:
        True if the value matches the address format
    """
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def _check_text(field: str, value: Any) -> List[FieldError]:
    if not isinstance(value, str):
        return [FieldError(field, value, f"expected a string, got {type(value).__name__}")]
    if not value.strip():
        return [FieldError(field, value, "must not be empty")]
    return []


def validation_errors(record: DeploymentRecord) -> List[FieldError]:
    """
    Collect every failing field of a record.

    Args:
        record: Record to check

    Returns:
        List of FieldError, empty when the record is valid
    """
    errors: List[FieldError] = []
    errors.extend(_check_text("token_name", record.token_name))
    errors.extend(_check_text("token_symbol", record.token_symbol))

    if not is_valid_address(record.registry_address):
        errors.append(
            FieldError(
                "registry_address",
                record.registry_address,
                "expected 40 hex characters, optionally 0x-prefixed",
            )
        )

    return errors


def warn_advisories(record: DeploymentRecord) -> None:
    """Log advisory conventions a valid record breaks; never raises."""
    if len(record.token_symbol) > MAX_SYMBOL_LENGTH:
        logger.warning(
            "Symbol '%s' for '%s' is longer than %d characters",
            record.token_symbol,
            record.environment,
            MAX_SYMBOL_LENGTH,
        )

    # All-lowercase or all-uppercase hex carries no checksum
    address = record.registry_address
    digits = address[2:] if address.startswith("0x") else address
    if digits != digits.lower() and digits != digits.upper():
        if not is_checksum_address(add_0x_prefix(address)):
            logger.warning(
                "Registry address %s for '%s' has mixed case but fails its EIP-55 checksum",
                address,
                record.environment,
            )


def validate(record: DeploymentRecord) -> None:
    """
    Validate a record before it is handed to the deployment harness.

    Args:
        record: Record to check

    Raises:
        ValidationError: If any field is invalid; lists every failing field
    """
    errors = validation_errors(record)
    if errors:
        raise ValidationError(record.environment, errors)

    warn_advisories(record)
