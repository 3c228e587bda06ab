"""
JSON-RPC Client for the eDexa chain.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Every call opens its own ``httpx.AsyncClient`` so concurrent callers never
share a connection.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Optional

import httpx
from eth_hash.auto import keccak

from ..errors import RpcError

logger = logging.getLogger(__name__)

_request_ids = itertools.count(1)


def keccak256(data: bytes) -> bytes:
    """Compute Keccak-256 hash (NOT the same as hashlib.sha3_256 / NIST SHA-3)."""
    return keccak(data)


def _hex_to_int(value: Any, method: str) -> int:
    if not isinstance(value, str):
        raise RpcError(f"Unexpected {method} result: {value!r}")
    return int(value, 16)


class RpcClient:
    """Minimal async JSON-RPC 2.0 client bound to a single endpoint."""

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        url = (rpc_url or "").strip()
        if not url:
            raise ValueError("rpc_url must be a non-empty string.")
        self.rpc_url = url
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"RpcClient({self.rpc_url!r})"

    async def call(self, method: str, params: Optional[list] = None) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "eth_call")
            params: RPC parameters

        Returns:
            Result field from the RPC response

        Raises:
            RpcError: On transport failure, an error object or a malformed body
        """
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": next(_request_ids),
        }
        logger.debug("rpc %s -> %s", method, self.rpc_url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.rpc_url, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise RpcError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise RpcError(f"Malformed JSON-RPC response: {exc}") from exc

        if not isinstance(data, dict):
            raise RpcError("Unexpected JSON-RPC response (non-object).")

        error = data.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise RpcError(
                    str(error.get("message") or "unknown error"),
                    code=error.get("code"),
                    data=error.get("data"),
                )
            raise RpcError(f"RPC error: {error}")

        return data.get("result")

    async def eth_call(self, to: str, data: str, block: str = "latest") -> str:
        """Execute a read-only call and return the raw hex result."""
        result = await self.call("eth_call", [{"to": to, "data": data}, block])
        if result is not None and not isinstance(result, str):
            raise RpcError(f"Unexpected eth_call result: {result!r}")
        return result or "0x"

    async def get_chain_id(self) -> int:
        return _hex_to_int(await self.call("eth_chainId"), "eth_chainId")

    async def get_nonce(self, address: str) -> int:
        """Get transaction nonce for an address (pending block)."""
        result = await self.call("eth_getTransactionCount", [address, "pending"])
        return _hex_to_int(result, "eth_getTransactionCount")

    async def get_gas_price(self) -> int:
        return _hex_to_int(await self.call("eth_gasPrice"), "eth_gasPrice")

    async def get_balance(self, address: str) -> int:
        """Get native coin balance for an address, in wei."""
        result = await self.call("eth_getBalance", [address, "latest"])
        return _hex_to_int(result, "eth_getBalance")

    async def send_raw_transaction(self, raw_tx: str) -> str:
        """
        Send a signed raw transaction.

        Returns:
            Transaction hash (0x-prefixed hex)
        """
        return await self.call("eth_sendRawTransaction", [raw_tx])
