"""
Permissioned stable coin facade.

An ERC-20 with owner-controlled pause, burn-from and an account blacklist.
"""

from __future__ import annotations

from ..wallet import WalletSigner
from .erc20 import ERC20, Amount


class StableCoin(ERC20):
    abi_name = "StableCoin"

    async def burn_from(self, from_: str, amount: Amount, signer: WalletSigner) -> str:
        from_ = await self.resolve(from_)
        return await self._act(signer, "burnFrom", from_, amount)

    async def pause(self, signer: WalletSigner) -> str:
        return await self._act(signer, "pause")

    async def unpause(self, signer: WalletSigner) -> str:
        return await self._act(signer, "unpause")

    async def is_paused(self) -> bool:
        return await self._read("paused")

    async def add_to_blacklist(self, account: str, signer: WalletSigner) -> str:
        account = await self.resolve(account)
        return await self._act(signer, "addToBlacklist", account)

    async def remove_from_blacklist(self, account: str, signer: WalletSigner) -> str:
        account = await self.resolve(account)
        return await self._act(signer, "removeFromBlacklist", account)

    async def is_blacklisted(self, account: str) -> bool:
        account = await self.resolve(account)
        return await self._read("isBlacklisted", account)
