"""
Embedded deployment history for microsponsors-deployments library.

Each entry replaces one historical migration script. The table is
append-only: add a new record for a new deployment and never edit or
reorder existing ones.
"""

from typing import Tuple

from .types import DeploymentRecord

# Registry contract addresses referenced by the deployments below
KOVAN_REGISTRY_V0_2 = "0xcac14f367a032c14563a5ade63e33f00fe0f4c89"
LATEST_REGISTRY = "0xb6A30fdc3e3f11b20af1670550083AA06eb0479A"

HISTORY: Tuple[DeploymentRecord, ...] = (
    DeploymentRecord(
        environment="kovan-v1",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=KOVAN_REGISTRY_V0_2,
        network="kovan",
        notes="Kovan: Microsponsors Registry v0.2",
    ),
    DeploymentRecord(
        environment="kovan-v2",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=KOVAN_REGISTRY_V0_2,
        network="kovan",
        notes="Kovan: Microsponsors Registry v0.2, contract redeploy",
    ),
    DeploymentRecord(
        environment="kovan-v3",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=LATEST_REGISTRY,
        network="kovan",
    ),
    DeploymentRecord(
        environment="kovan-v4",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=LATEST_REGISTRY,
        network="kovan",
    ),
    DeploymentRecord(
        environment="test",
        token_name="Microsponsors Test Token",
        token_symbol="MSTEST",
        registry_address=KOVAN_REGISTRY_V0_2,
        network="development",
        notes="Test token variant",
    ),
    DeploymentRecord(
        environment="test-v2",
        token_name="Microsponsors Test Token",
        token_symbol="MSTEST",
        registry_address=LATEST_REGISTRY,
        network="development",
        notes="Test token variant",
    ),
    DeploymentRecord(
        environment="latest",
        token_name="Microsponsors Time Slots",
        token_symbol="MSPT",
        registry_address=LATEST_REGISTRY,
        network="kovan",
    ),
)
