"""Migration script ingestion for microsponsors-deployments library."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .constants import CONTRACT_NAME
from .exceptions import MigrationParseError
from .parsers import parse_migration_script
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


def records_from_migrations(
    migrations_dir: Union[Path, str],
    labels: Optional[Dict[str, str]] = None,
    network: Optional[str] = None,
) -> List[DeploymentRecord]:
    """
    Recover deployment records from a directory of Truffle migration scripts.

    Scripts are read in file name order, which is the order Truffle runs
    them in. Scripts that are not UTF-8, have no deploy call, or deploy
    another contract are skipped.

    Args:
        migrations_dir: Directory containing *.js migration scripts
        labels: Maps script file name (or stem) to environment label;
                unmapped scripts are labelled with their stem
        network: Network recorded on every recovered record

    Returns:
        Records in script order

    Raises:
        NotADirectoryError: If migrations_dir is not a directory
    """
    migrations_dir = Path(migrations_dir)
    if not migrations_dir.is_dir():
        raise NotADirectoryError(f"Migrations directory not found: {migrations_dir}")

    labels = labels or {}
    records: List[DeploymentRecord] = []

    for script in sorted(migrations_dir.glob("*.js")):
        try:
            parsed = parse_migration_script(script)
        except MigrationParseError:
            logger.debug("Skipping %s: no deploy call", script.name)
            continue

        if parsed["contract"] != CONTRACT_NAME:
            logger.debug("Skipping %s: deploys %s", script.name, parsed["contract"])
            continue

        environment = labels.get(script.name, labels.get(script.stem, script.stem))
        records.append(
            DeploymentRecord(
                environment=environment,
                token_name=parsed["name"],
                token_symbol=parsed["symbol"],
                registry_address=parsed["registry_address"],
                network=network,
                notes=parsed.get("notes"),
            )
        )

    return records
