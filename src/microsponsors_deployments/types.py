"""Data types and dataclasses for microsponsors-deployments library."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from eth_utils import to_checksum_address

from .constants import CONTRACT_NAME, NETWORK_CONFIG


@dataclass(frozen=True)
class DeploymentRecord:
    """Constructor parameters for one deployment of the contract."""

    # Required fields
    environment: str  # e.g., "kovan-v2", "latest"
    token_name: str  # e.g., "Microsponsors Time Slots"
    token_symbol: str  # e.g., "MSPT"
    registry_address: str  # Registry contract address, as authored

    # Optional fields
    network: Optional[str] = None  # e.g., "kovan"
    contract: str = CONTRACT_NAME
    notes: Optional[str] = None

    @property
    def constructor_args(self) -> Tuple[str, str, str]:
        """Arguments in the order the contract constructor expects."""
        return (self.token_name, self.token_symbol, self.registry_address)

    @property
    def checksum_address(self) -> str:
        """EIP-55 form of the registry address."""
        return to_checksum_address(self.registry_address)

    @property
    def explorer_url(self) -> Optional[str]:
        """Block explorer page for the registry address, if the network has one."""
        explorer = NETWORK_CONFIG.get(self.network or "", {}).get("block_explorer_url")
        if explorer is None:
            return None
        return f"{explorer}/address/{self.checksum_address}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the registry file entry layout.

        Optional fields are omitted when unset.
        """
        result: Dict[str, Any] = {
            "environment": self.environment,
            "name": self.token_name,
            "symbol": self.token_symbol,
            "registry_address": self.registry_address,
        }
        if self.network is not None:
            result["network"] = self.network
        if self.contract != CONTRACT_NAME:
            result["contract"] = self.contract
        if self.notes is not None:
            result["notes"] = self.notes
        return result


@dataclass(frozen=True)
class FieldError:
    """
    A single failing field of a deployment record.

    ``field`` uses the record attribute names: ``token_name`` (tokenName),
    ``token_symbol`` (tokenSymbol) and ``registry_address`` (dependencyAddress).
    """

    field: str
    value: Any
    message: str
