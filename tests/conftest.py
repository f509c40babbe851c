"""Shared pytest fixtures for microsponsors-deployments tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from microsponsors_deployments.constants import REGISTRY_FILE_ENV
from microsponsors_deployments.registry import get_default_registry
from microsponsors_deployments.types import DeploymentRecord

VALID_ADDRESS = "0xcac14f367a032c14563a5ade63e33f00fe0f4c89"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def migrations_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample Truffle migrations directory."""
    return fixtures_dir / "migrations"


@pytest.fixture
def sample_registry_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample deployments.json fixture."""
    with open(fixtures_dir / "deployments.json") as f:
        return json.load(f)


@pytest.fixture
def temp_registry_file(tmp_path: Path, sample_registry_json: Dict[str, Any]) -> Path:
    """Create a temporary registry file with sample data."""
    registry_path = tmp_path / "deployments.json"
    with open(registry_path, "w") as f:
        json.dump(sample_registry_json, f, indent=2)
    return registry_path


@pytest.fixture
def valid_record() -> DeploymentRecord:
    """Return a record that passes validation."""
    return DeploymentRecord(
        environment="kovan-v2",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=VALID_ADDRESS,
    )


@pytest.fixture(autouse=True)
def isolated_default_registry(monkeypatch):
    """Reset the process-wide registry and registry file env var around each test."""
    monkeypatch.delenv(REGISTRY_FILE_ENV, raising=False)
    get_default_registry.cache_clear()
    yield
    get_default_registry.cache_clear()
