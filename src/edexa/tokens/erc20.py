"""ERC-20 fungible token facade."""

from __future__ import annotations

from typing import Union

from ..wallet import WalletSigner
from .base import TokenContract

Amount = Union[int, str]


class ERC20(TokenContract):
    abi_name = "ERC20"

    async def get_balance(self, account: str) -> str:
        account = await self.resolve(account)
        return await self._read("balanceOf", account)

    async def get_allowance(self, owner: str, spender: str) -> str:
        owner = await self.resolve(owner)
        spender = await self.resolve(spender)
        return await self._read("allowance", owner, spender)

    async def get_name(self) -> str:
        return await self._read("name")

    async def get_symbol(self) -> str:
        return await self._read("symbol")

    async def get_decimals(self) -> str:
        return await self._read("decimals")

    async def get_total_supply(self) -> str:
        return await self._read("totalSupply")

    async def mint(self, to: str, amount: Amount, signer: WalletSigner) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "mint", to, amount)

    async def burn(self, amount: Amount, signer: WalletSigner) -> str:
        return await self._act(signer, "burn", amount)

    async def transfer(self, to: str, amount: Amount, signer: WalletSigner) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "transfer", to, amount)

    async def approve(self, spender: str, amount: Amount, signer: WalletSigner) -> str:
        spender = await self.resolve(spender)
        return await self._act(signer, "approve", spender, amount)

    async def transfer_from(
        self, from_: str, to: str, amount: Amount, signer: WalletSigner
    ) -> str:
        from_ = await self.resolve(from_)
        to = await self.resolve(to)
        return await self._act(signer, "transferFrom", from_, to, amount)

    async def increase_allowance(self, spender: str, amount: Amount, signer: WalletSigner) -> str:
        spender = await self.resolve(spender)
        return await self._act(signer, "increaseAllowance", spender, amount)

    async def decrease_allowance(self, spender: str, amount: Amount, signer: WalletSigner) -> str:
        spender = await self.resolve(spender)
        return await self._act(signer, "decreaseAllowance", spender, amount)
