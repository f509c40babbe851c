"""Configuration constants for microsponsors-deployments library."""

import re

# Contract deployed by every migration
CONTRACT_NAME = "Microsponsors"

# 20-byte address, optionally 0x-prefixed
ADDRESS_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]{40}")

# Ticker convention; longer symbols are only warned about
MAX_SYMBOL_LENGTH = 10

# Environment variable naming a JSON registry file that replaces the embedded table
REGISTRY_FILE_ENV = "MICROSPONSORS_DEPLOYMENTS_FILE"

# Network configuration based on ethereum-lists/chains
NETWORK_CONFIG = {
    "kovan": {
        "chain_id": 42,
        "chain_name": "Ethereum Testnet Kovan",
        "block_explorer_url": "https://kovan.etherscan.io",
    },
    "development": {
        "chain_id": 1337,
        "chain_name": "Local development chain",
        "block_explorer_url": None,
    },
}
