"""
Configuration for the eDexa SDK.

All chain constants (endpoint, contract addresses, name suffixes) live on an
explicit ``EdexaConfig`` that is handed to the resolver, the facades and the
client.  ``load_config`` builds one from the environment, optionally loading
a ``.env`` file first.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_RPC_URL = "https://testnet.edexa.com/rpc"
DEFAULT_RESOLVER_ADDRESS = "0xEF1db68FaDfdD398886EE73Cbc34918Be51Ae304"
DEFAULT_LEGACY_REGISTRY_ADDRESS = "0x0cc23341aacFc90B1582d965943d1f10D94638Cf"
DEFAULT_TLD = ".edx"
DEFAULT_REVERSE_SUFFIX = "addr.reverse"
DEFAULT_MIN_LABEL_LENGTH = 4
DEFAULT_GAS_LIMIT = 500_000
DEFAULT_DEPLOY_GAS_LIMIT = 5_000_000

# Default config directory
EDEXA_DIR = Path.home() / ".edexa"
EDEXA_ENV = EDEXA_DIR / ".env"


@dataclass(frozen=True)
class EdexaConfig:
    """
    Chain endpoint and contract constants.

    Attributes:
        rpc_url: JSON-RPC endpoint of the eDexa node
        chain_id: Chain ID for signed transactions (None = ask the node)
        resolver_address: Reverse-registrar resolver (addr/name lookups)
        legacy_registry_address: Registry queried by getDomainInfo
        tld: Required suffix of forward-resolvable names
        reverse_suffix: Suffix appended to an address for reverse lookups
        min_label_length: Minimum characters before the first '.'
        artifacts_dir: Directory holding compiled contract artifacts
        request_timeout: HTTP timeout in seconds
        gas_limit: Gas limit for contract transactions
        deploy_gas_limit: Gas limit for contract creation
    """
    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = None
    resolver_address: str = DEFAULT_RESOLVER_ADDRESS
    legacy_registry_address: str = DEFAULT_LEGACY_REGISTRY_ADDRESS
    tld: str = DEFAULT_TLD
    reverse_suffix: str = DEFAULT_REVERSE_SUFFIX
    min_label_length: int = DEFAULT_MIN_LABEL_LENGTH
    artifacts_dir: Optional[Path] = None
    request_timeout: float = 30.0
    gas_limit: int = DEFAULT_GAS_LIMIT
    deploy_gas_limit: int = DEFAULT_DEPLOY_GAS_LIMIT

    def replace(self, **changes) -> "EdexaConfig":
        return replace(self, **changes)


def _optional_int(value: Optional[str], name: str) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def load_config(env_path: Optional[Path] = None) -> EdexaConfig:
    """
    Load configuration from environment variables.

    Args:
        env_path: Path to .env file (default: ~/.edexa/.env)

    Returns:
        EdexaConfig with environment overrides applied
    """
    env_path = env_path or EDEXA_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)

    artifacts = os.environ.get("EDEXA_ARTIFACTS_DIR")
    timeout = os.environ.get("EDEXA_REQUEST_TIMEOUT")

    return EdexaConfig(
        rpc_url=os.environ.get("EDEXA_RPC_URL", DEFAULT_RPC_URL).strip(),
        chain_id=_optional_int(os.environ.get("EDEXA_CHAIN_ID"), "EDEXA_CHAIN_ID"),
        resolver_address=os.environ.get("EDEXA_RESOLVER_ADDRESS", DEFAULT_RESOLVER_ADDRESS),
        legacy_registry_address=os.environ.get(
            "EDEXA_LEGACY_REGISTRY_ADDRESS", DEFAULT_LEGACY_REGISTRY_ADDRESS
        ),
        tld=os.environ.get("EDEXA_TLD", DEFAULT_TLD),
        artifacts_dir=Path(artifacts) if artifacts else None,
        request_timeout=float(timeout) if timeout else 30.0,
    )
