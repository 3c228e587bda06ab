"""
Shared plumbing for token facades.

Every facade method resolves address-like inputs through the legacy
resolver first, then issues one contract call.  Errors from either step
propagate to the caller untouched.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from ..chain.abi import load_abi
from ..chain.contract import ContractHandle
from ..chain.rpc import RpcClient
from ..config import EdexaConfig
from ..naming.resolver import NameResolver
from ..wallet import WalletSigner


def stringify(value: Any) -> Any:
    """Render integers (and lists of them) as decimal strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [stringify(v) for v in value]
    return value


class TokenContract:
    abi_name: ClassVar[str]

    def __init__(
        self,
        address: str,
        config: Optional[EdexaConfig] = None,
        rpc: Optional[RpcClient] = None,
        resolver: Optional[NameResolver] = None,
    ) -> None:
        self.address = address
        self.config = config or EdexaConfig()
        self.rpc = rpc or RpcClient(self.config.rpc_url, timeout=self.config.request_timeout)
        self.resolver = resolver or NameResolver(self.config, self.rpc)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address!r})"

    @property
    def abi(self) -> list[dict[str, Any]]:
        return load_abi(self.abi_name)

    def contract(self) -> ContractHandle:
        """Read-only contract handle."""
        return ContractHandle(self.address, self.abi, self.rpc)

    def action_contract(self, signer: WalletSigner) -> ContractHandle:
        """Contract handle that signs state-changing calls with ``signer``."""
        return ContractHandle(
            self.address, self.abi, self.rpc, signer=signer, gas_limit=self.config.gas_limit
        )

    async def resolve(self, value: str) -> str:
        return await self.resolver.resolve_ens_or_return_address(value)

    async def _read(self, function_name: str, *args: Any) -> Any:
        result = await getattr(self.contract(), function_name)(*args)
        return stringify(result)

    async def _act(self, signer: WalletSigner, function_name: str, *args: Any) -> str:
        tx_hash = await getattr(self.action_contract(signer), function_name)(*args)
        return str(tx_hash)

    # Ownable

    async def get_owner(self) -> str:
        return await self._read("owner")

    async def transfer_ownership(self, to: str, signer: WalletSigner) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "transferOwnership", to)

    async def renounce_ownership(self, signer: WalletSigner) -> str:
        return await self._act(signer, "renounceOwnership")
