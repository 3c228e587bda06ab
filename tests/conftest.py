"""
Shared fixtures: an in-memory JSON-RPC node behind ``httpx.MockTransport``.

Contract functions are registered per (address, ABI, function) with a plain
Python callable; the node decodes calldata, calls it, and ABI-encodes the
return value.  Every request is recorded so tests can count lookups.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import httpx
import pytest
import rlp
from eth_abi import decode, encode

from edexa.chain.abi import abi_type, find_function, function_signature, load_abi
from edexa.chain.rpc import RpcClient, keccak256
from edexa.config import EdexaConfig
from edexa.wallet import generate_private_key

FAKE_RPC_URL = "http://fake-node.test/rpc"
CHAIN_ID = 1995


class FakeNode:
    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.sent: list[str] = []
        self.error: Optional[dict[str, Any]] = None
        self.transport_error: Optional[Exception] = None
        self.nonce = 7
        self.gas_price = 1_000_000_000
        self._functions: dict[tuple[str, str], tuple[dict, Callable[..., Any]]] = {}

    # ---- setup ----

    def register(self, address: str, abi_name: str, function_name: str, fn: Callable[..., Any]) -> None:
        entry = find_function(load_abi(abi_name), function_name)
        assert entry is not None, function_name
        selector = keccak256(function_signature(entry).encode("utf-8"))[:4].hex()
        self._functions[(address.lower(), selector)] = (entry, fn)

    def rpc(self) -> RpcClient:
        return RpcClient(FAKE_RPC_URL, transport=httpx.MockTransport(self.handle))

    # ---- inspection ----

    def calls(self, method: str) -> list[dict[str, Any]]:
        return [r for r in self.requests if r["method"] == method]

    @property
    def eth_calls(self) -> list[dict[str, Any]]:
        return self.calls("eth_call")

    def decode_sent(self, index: int = -1) -> dict[str, Any]:
        """Decode a legacy signed transaction into its fields."""
        fields = rlp.decode(bytes.fromhex(self.sent[index][2:]))
        nonce, gas_price, gas, to, value, data = fields[:6]
        return {
            "nonce": int.from_bytes(nonce, "big"),
            "gasPrice": int.from_bytes(gas_price, "big"),
            "gas": int.from_bytes(gas, "big"),
            "to": "0x" + to.hex() if to else None,
            "value": int.from_bytes(value, "big"),
            "data": "0x" + data.hex(),
        }

    # ---- transport ----

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        if self.transport_error is not None:
            raise self.transport_error
        if self.error is not None:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "error": self.error})
        result = self._dispatch(body["method"], body["params"])
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    def _dispatch(self, method: str, params: list) -> Any:
        if method == "eth_call":
            return self._eth_call(params[0])
        if method == "eth_chainId":
            return hex(CHAIN_ID)
        if method == "eth_getTransactionCount":
            return hex(self.nonce)
        if method == "eth_gasPrice":
            return hex(self.gas_price)
        if method == "eth_getBalance":
            return hex(0)
        if method == "eth_sendRawTransaction":
            raw = params[0]
            self.sent.append(raw)
            return "0x" + keccak256(bytes.fromhex(raw[2:])).hex()
        raise AssertionError(f"unexpected RPC method {method}")

    def _eth_call(self, call: dict[str, Any]) -> str:
        data = call["data"]
        key = (call["to"].lower(), data[2:10])
        if key not in self._functions:
            return "0x"
        entry, fn = self._functions[key]
        args = decode([abi_type(i) for i in entry["inputs"]], bytes.fromhex(data[10:]))
        value = fn(*args)
        out_types = [abi_type(o) for o in entry["outputs"]]
        if len(out_types) == 1:
            value = (value,)
        return "0x" + encode(out_types, list(value)).hex()


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def config() -> EdexaConfig:
    return EdexaConfig(rpc_url=FAKE_RPC_URL, chain_id=CHAIN_ID)


@pytest.fixture()
def wallet() -> tuple[str, str]:
    """A fresh (private_key, address) pair."""
    return generate_private_key()
