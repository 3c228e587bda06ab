"""ERC-721 non-fungible token facade."""

from __future__ import annotations

from typing import Union

from ..wallet import WalletSigner
from .base import TokenContract

TokenId = Union[int, str]


class ERC721(TokenContract):
    abi_name = "ERC721"

    async def get_balance(self, owner: str) -> str:
        owner = await self.resolve(owner)
        return await self._read("balanceOf", owner)

    async def get_approved(self, token_id: TokenId) -> str:
        return await self._read("getApproved", token_id)

    async def owner_of(self, token_id: TokenId) -> str:
        return await self._read("ownerOf", token_id)

    async def token_uri(self, token_id: TokenId) -> str:
        return await self._read("tokenURI", token_id)

    async def is_approved_for_all(self, owner: str, operator: str) -> bool:
        owner = await self.resolve(owner)
        operator = await self.resolve(operator)
        return await self._read("isApprovedForAll", owner, operator)

    async def safe_mint(self, to: str, uri: str, signer: WalletSigner) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "safeMint", to, uri)

    async def burn(self, token_id: TokenId, signer: WalletSigner) -> str:
        return await self._act(signer, "burn", token_id)

    async def approve(self, to: str, token_id: TokenId, signer: WalletSigner) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "approve", to, token_id)

    async def safe_transfer_from(
        self, from_: str, to: str, token_id: TokenId, signer: WalletSigner
    ) -> str:
        from_ = await self.resolve(from_)
        to = await self.resolve(to)
        return await self._act(signer, "safeTransferFrom", from_, to, token_id)

    async def set_approval_for_all(self, operator: str, approved: bool, signer: WalletSigner) -> str:
        operator = await self.resolve(operator)
        return await self._act(signer, "setApprovalForAll", operator, approved)

    async def pause(self, signer: WalletSigner) -> str:
        return await self._act(signer, "pause")

    async def unpause(self, signer: WalletSigner) -> str:
        return await self._act(signer, "unpause")
