"""
EdexaClient - entry point of the SDK.

Builds wallet signers and token facades bound to one configuration, submits
deployments of precompiled token contracts, and exposes the name resolution
operations.
"""

from __future__ import annotations

from typing import Optional

from .chain.abi import load_abi, load_bytecode
from .chain.rpc import RpcClient
from .chain.tx import Deployment, deploy_contract
from .config import EdexaConfig
from .naming.resolver import NameResolver, Resolution
from .tokens import ERC20, ERC721, ERC1155, StableCoin
from .wallet import WalletSigner, create_wallet_signer

# Artifact names looked up in config.artifacts_dir
ERC20_MINTABLE_ARTIFACT = "ERC20Mintable"
ERC20_FIXED_SUPPLY_ARTIFACT = "ERC20FixedSupply"
ERC721_ARTIFACT = "ERC721Token"
ERC1155_ARTIFACT = "ERC1155Token"
STABLE_COIN_ARTIFACT = "StableCoin"


class EdexaClient:
    """
    Client for one eDexa network.

    Args:
        config: Chain configuration (defaults to the public testnet)
        rpc: RPC client override, mostly for tests
    """

    def __init__(self, config: Optional[EdexaConfig] = None, rpc: Optional[RpcClient] = None) -> None:
        self.config = config or EdexaConfig()
        self.rpc = rpc or RpcClient(self.config.rpc_url, timeout=self.config.request_timeout)
        self.resolver = NameResolver(self.config, self.rpc)

    def _rpc_for(self, rpc_url: Optional[str]) -> RpcClient:
        if rpc_url is None or rpc_url == self.rpc.rpc_url:
            return self.rpc
        return RpcClient(rpc_url, timeout=self.config.request_timeout)

    # ============ Signers ============

    def create_wallet_signer(self, private_key: Optional[str]) -> WalletSigner:
        """Create a signer for ``private_key`` connected to this client's RPC."""
        return create_wallet_signer(private_key, self.rpc, chain_id=self.config.chain_id)

    # ============ Token instances ============

    def get_erc20_instance(self, address: str, rpc_url: Optional[str] = None) -> ERC20:
        return ERC20(address, self.config, self._rpc_for(rpc_url), self.resolver)

    def get_erc721_instance(self, address: str, rpc_url: Optional[str] = None) -> ERC721:
        return ERC721(address, self.config, self._rpc_for(rpc_url), self.resolver)

    def get_erc1155_instance(self, address: str, rpc_url: Optional[str] = None) -> ERC1155:
        return ERC1155(address, self.config, self._rpc_for(rpc_url), self.resolver)

    def get_stable_coin_instance(self, address: str, rpc_url: Optional[str] = None) -> StableCoin:
        return StableCoin(address, self.config, self._rpc_for(rpc_url), self.resolver)

    # ============ Deployments ============

    async def _deploy(self, abi_name: str, artifact: str, args: list, signer: WalletSigner) -> Deployment:
        bytecode = load_bytecode(artifact, self.config.artifacts_dir)
        return await deploy_contract(
            signer,
            load_abi(abi_name),
            bytecode,
            constructor_args=args,
            gas_limit=self.config.deploy_gas_limit,
        )

    async def create_contract_erc20(
        self, name: str, symbol: str, signer: WalletSigner, supply: Optional[int] = None
    ) -> Deployment:
        """
        Deploy an ERC-20 token.

        Without ``supply`` the mintable artifact is deployed with an initial
        supply of 0; with it, the fixed-supply artifact.
        """
        if supply is None:
            return await self._deploy("ERC20", ERC20_MINTABLE_ARTIFACT, [name, symbol, 0], signer)
        return await self._deploy("ERC20", ERC20_FIXED_SUPPLY_ARTIFACT, [name, symbol, int(supply)], signer)

    async def create_contract_erc721(self, name: str, symbol: str, signer: WalletSigner) -> Deployment:
        return await self._deploy("ERC721", ERC721_ARTIFACT, [name, symbol], signer)

    async def create_contract_erc1155(self, uri: str, signer: WalletSigner) -> Deployment:
        return await self._deploy("ERC1155", ERC1155_ARTIFACT, [uri], signer)

    async def create_contract_stable_coin(
        self, name: str, symbol: str, supply: int, signer: WalletSigner
    ) -> Deployment:
        return await self._deploy("StableCoin", STABLE_COIN_ARTIFACT, [name, symbol, int(supply)], signer)

    # ============ Name resolution ============

    async def resolve_ens_or_return_address(self, value: str) -> str:
        return await self.resolver.resolve_ens_or_return_address(value)

    async def resolve_name_to_address(self, name: str) -> Resolution:
        return await self.resolver.resolve_name_to_address(name)

    async def resolve_address_to_name(self, address: str) -> Resolution:
        return await self.resolver.resolve_address_to_name(address)

    async def resolve_name(self, name: str) -> str:
        return await self.resolver.resolve_name(name)

    async def resolve_addr(self, address: str) -> str:
        return await self.resolver.resolve_addr(address)
