"""Path management utilities for microsponsors-deployments library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import REGISTRY_FILE_ENV


def get_default_export_dir() -> Path:
    """
    Get default directory for exported registry files.

    Returns:
        Path to ./.microsponsors-deployments
    """
    return Path.cwd() / ".microsponsors-deployments"


def get_default_export_path() -> Path:
    """
    Get default path for an exported registry file.

    Returns:
        Path to ./.microsponsors-deployments/deployments.json
    """
    return get_default_export_dir() / "deployments.json"


def get_registry_path(path: Optional[Union[Path, str]] = None) -> Optional[Path]:
    """
    Resolve which registry file to load.

    Args:
        path: Explicit registry file (takes precedence)

    Returns:
        Absolute path from the argument or $MICROSPONSORS_DEPLOYMENTS_FILE,
        or None when the embedded history should be used
    """
    if path is None:
        path = os.environ.get(REGISTRY_FILE_ENV) or None

    if path is None:
        return None

    return Path(path).absolute()
