"""ERC-1155 multi-token facade."""

from __future__ import annotations

from typing import Sequence, Union

from ..wallet import WalletSigner
from .base import TokenContract

Quantity = Union[int, str]
Data = Union[bytes, str]


class ERC1155(TokenContract):
    abi_name = "ERC1155"

    async def get_balance(self, account: str, token_id: Quantity) -> str:
        account = await self.resolve(account)
        return await self._read("balanceOf", account, token_id)

    async def get_uri(self, token_id: Quantity) -> str:
        return await self._read("uri", token_id)

    async def get_balance_of_batch(
        self, accounts: Union[str, Sequence[str]], ids: Sequence[Quantity]
    ) -> list[str]:
        """
        Balances of several token ids.

        A single account is paired with every id; a list of accounts must
        match ``ids`` in length.
        """
        if isinstance(accounts, str):
            account = await self.resolve(accounts)
            resolved = [account] * len(ids)
        else:
            resolved = [await self.resolve(a) for a in accounts]
        return await self._read("balanceOfBatch", resolved, list(ids))

    async def is_approved_for_all(self, account: str, operator: str) -> bool:
        account = await self.resolve(account)
        operator = await self.resolve(operator)
        return await self._read("isApprovedForAll", account, operator)

    async def mint(
        self, to: str, token_id: Quantity, amount: Quantity, signer: WalletSigner, data: Data = b""
    ) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "mint", to, token_id, amount, data)

    async def mint_batch(
        self,
        to: str,
        ids: Sequence[Quantity],
        amounts: Sequence[Quantity],
        signer: WalletSigner,
        data: Data = b"",
    ) -> str:
        to = await self.resolve(to)
        return await self._act(signer, "mintBatch", to, list(ids), list(amounts), data)

    async def safe_transfer_from(
        self,
        from_: str,
        to: str,
        token_id: Quantity,
        amount: Quantity,
        signer: WalletSigner,
        data: Data = b"",
    ) -> str:
        from_ = await self.resolve(from_)
        to = await self.resolve(to)
        return await self._act(signer, "safeTransferFrom", from_, to, token_id, amount, data)

    async def safe_batch_transfer_from(
        self,
        from_: str,
        to: str,
        ids: Sequence[Quantity],
        amounts: Sequence[Quantity],
        signer: WalletSigner,
        data: Data = b"",
    ) -> str:
        from_ = await self.resolve(from_)
        to = await self.resolve(to)
        return await self._act(
            signer, "safeBatchTransferFrom", from_, to, list(ids), list(amounts), data
        )

    async def set_approval_for_all(self, operator: str, approved: bool, signer: WalletSigner) -> str:
        operator = await self.resolve(operator)
        return await self._act(signer, "setApprovalForAll", operator, approved)
