"""
Name Resolver - map eDexa names to addresses and back.

Two strategies share one ``NameResolver``:

* the reverse-registrar resolver (``resolve_name_to_address`` and
  ``resolve_address_to_name``), which hashes names with namehash and returns
  typed ``Resolution`` values for format errors and missing records;
* the legacy registry path (``resolve_ens_or_return_address``), which passes
  addresses through untouched and asks the registry's ``getDomainInfo`` for
  anything else, raising on every failure.

Lookups are never cached: each call reads current chain state.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..chain.abi import load_abi
from ..chain.contract import ContractHandle
from ..chain.rpc import RpcClient
from ..chain.tx import to_checksum_address
from ..config import EdexaConfig
from ..errors import LookupFailedError, ResolutionError, require_str
from .namehash import (
    has_valid_name_format,
    is_address,
    is_checksum_address,
    is_zero_address,
    namehash,
    normalize_name,
    reverse_name,
)

logger = logging.getLogger(__name__)

NOT_ADDRESS_MESSAGE = "input is not an address"
NO_REVERSE_RECORD_MESSAGE = "address is not associated with any ENS name"


class ResolutionKind(enum.Enum):
    RESOLVED_ADDRESS = "resolved_address"
    RESOLVED_NAME = "resolved_name"
    NOT_REGISTERED = "not_registered"
    INVALID_FORMAT = "invalid_format"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of one bidirectional lookup.

    Exactly one of ``value`` (address or name) and ``message`` is set.
    """
    kind: ResolutionKind
    input: str
    value: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return self.value if self.value is not None else (self.message or "")


def name_format_message(config: EdexaConfig) -> str:
    return (
        f"Invalid name: the name must have at least {config.min_label_length} "
        f"characters before the first '.' and end with '{config.tld}'"
    )


class NameResolver:
    """Resolves identifiers against the chain described by ``config``."""

    def __init__(self, config: Optional[EdexaConfig] = None, rpc: Optional[RpcClient] = None) -> None:
        self.config = config or EdexaConfig()
        self.rpc = rpc or RpcClient(self.config.rpc_url, timeout=self.config.request_timeout)

    def _resolver_contract(self) -> ContractHandle:
        return ContractHandle(self.config.resolver_address, load_abi("EdexaResolver"), self.rpc)

    def _registry_contract(self) -> ContractHandle:
        return ContractHandle(
            self.config.legacy_registry_address, load_abi("DomainRegistry"), self.rpc
        )

    # ------------------------------------------------------------------
    # Reverse-registrar strategy
    # ------------------------------------------------------------------

    async def resolve_name_to_address(self, name: str) -> Resolution:
        """
        Forward-resolve ``name`` (e.g. ``"alice.edx"``) to an address.

        Names failing the format check are returned as INVALID_FORMAT
        without touching the network.

        Raises:
            LookupFailedError: If the resolver call fails
        """
        name = normalize_name(require_str(name, "name"))
        if not has_valid_name_format(name, self.config.tld, self.config.min_label_length):
            return Resolution(ResolutionKind.INVALID_FORMAT, name, message=name_format_message(self.config))

        node = namehash(name)
        logger.debug("addr lookup %s (node %s)", name, node.hex())
        try:
            address = await self._resolver_contract().addr(node)
        except Exception as exc:
            raise LookupFailedError(f"Error: {exc}") from exc

        if address is None:
            raise LookupFailedError(f"Error: empty response from resolver {self.config.resolver_address}")
        if is_zero_address(address):
            return Resolution(ResolutionKind.NOT_REGISTERED, name, message=f"{name} is not registered")
        return Resolution(ResolutionKind.RESOLVED_ADDRESS, name, value=to_checksum_address(address))

    async def resolve_address_to_name(self, address: str) -> Resolution:
        """
        Reverse-resolve ``address`` through ``<hex>.addr.reverse``.

        Raises:
            LookupFailedError: If the resolver call fails
        """
        address = require_str(address, "address")
        if not is_address(address):
            return Resolution(ResolutionKind.INVALID_FORMAT, address, message=NOT_ADDRESS_MESSAGE)

        reverse = reverse_name(address, self.config.reverse_suffix)
        logger.debug("name lookup %s", reverse)
        try:
            name = await self._resolver_contract().name(namehash(reverse))
        except Exception as exc:
            raise LookupFailedError(f"Error: {exc}") from exc

        if name is None:
            raise LookupFailedError(f"Error: empty response from resolver {self.config.resolver_address}")
        if not name:
            return Resolution(ResolutionKind.NOT_REGISTERED, address, message=NO_REVERSE_RECORD_MESSAGE)
        return Resolution(ResolutionKind.RESOLVED_NAME, address, value=name)

    async def resolve_name(self, name: str) -> str:
        """Resolved address, or the format / not-registered message."""
        return str(await self.resolve_name_to_address(name))

    async def resolve_addr(self, address: str) -> str:
        """Resolved name, or the not-an-address / no-record message."""
        return str(await self.resolve_address_to_name(address))

    # ------------------------------------------------------------------
    # Legacy registry strategy
    # ------------------------------------------------------------------

    async def resolve_ens_or_return_address(self, value: str) -> str:
        """
        Return ``value`` if it is an address, else its registered resolver.

        Mixed-case addresses with a bad EIP-55 checksum are treated as names.
        The raw input is passed to ``getDomainInfo`` (no namehash).

        Raises:
            ResolutionError: "Error: ENS Not Registered for <value>",
                "Error: ENS resolution failed for <value>", or
                "Error: <transport message>"
            MissingValueError: If ``value`` is None
        """
        value = require_str(value, "value")
        if is_checksum_address(value):
            return value

        logger.debug("getDomainInfo %r", value)
        try:
            details = await self._registry_contract().getDomainInfo(value)
        except Exception as exc:
            raise ResolutionError(f"Error: {exc}") from exc

        resolver = _resolver_field(details)
        if resolver is None:
            raise ResolutionError(f"Error: ENS resolution failed for {value}")
        if is_zero_address(resolver):
            raise ResolutionError(f"Error: ENS Not Registered for {value}")
        return to_checksum_address(resolver)


def _resolver_field(details: Any) -> Optional[str]:
    if not details:
        return None
    if isinstance(details, dict):
        return details.get("resolver")
    return None
