"""
Contract handles - map ABI entry points to awaitable calls.

``ContractHandle(address, abi, rpc, signer)`` exposes every ABI function as an
attribute.  View/pure functions run as ``eth_call`` and return decoded
values; state-changing functions are signed by ``signer`` and return the
transaction hash.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from eth_abi import decode

from ..errors import ContractError
from .abi import abi_type, find_function
from .rpc import RpcClient
from .tx import encode_call, send_contract_tx, to_checksum_address

if TYPE_CHECKING:
    from ..wallet import WalletSigner

logger = logging.getLogger(__name__)

_READ_ONLY = {"view", "pure"}


def _normalize_arg(param: dict[str, Any], value: Any) -> Any:
    """Coerce user-friendly values (hex strings, decimal strings) to ABI values."""
    typ = param["type"]
    if typ.endswith("[]") and isinstance(value, (list, tuple)):
        inner = dict(param, type=typ[:-2])
        return [_normalize_arg(inner, v) for v in value]
    if typ == "address" and isinstance(value, str):
        return to_checksum_address(value)
    if typ.startswith(("uint", "int")) and isinstance(value, str):
        return int(value, 0)
    if typ.startswith("bytes") and isinstance(value, str):
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)
    return value


def _shape_output(param: dict[str, Any], value: Any) -> Any:
    """Decode structs to dicts keyed by component name."""
    if param["type"] == "tuple" and param.get("components"):
        return {
            comp.get("name") or str(i): _shape_output(comp, v)
            for i, (comp, v) in enumerate(zip(param["components"], value))
        }
    return value


def decode_result(func: dict[str, Any], data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        None for empty data, a single value for one output, otherwise a tuple
    """
    outputs = func.get("outputs", [])
    if not outputs or data in (None, "", "0x"):
        return None

    raw = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    decoded = decode([abi_type(out) for out in outputs], raw)
    shaped = tuple(_shape_output(out, v) for out, v in zip(outputs, decoded))

    if len(shaped) == 1:
        return shaped[0]
    return shaped


class ContractFunction:
    """One ABI function bound to a contract handle."""

    def __init__(self, handle: "ContractHandle", entry: dict[str, Any]) -> None:
        self.handle = handle
        self.entry = entry
        self.name = entry["name"]

    @property
    def read_only(self) -> bool:
        return self.entry.get("stateMutability") in _READ_ONLY or bool(self.entry.get("constant"))

    def _args(self, args: tuple) -> list:
        inputs = self.entry.get("inputs", [])
        if len(args) != len(inputs):
            raise ContractError(
                f"{self.name} expects {len(inputs)} argument(s), got {len(args)}"
            )
        return [_normalize_arg(p, a) for p, a in zip(inputs, args)]

    async def __call__(self, *args: Any) -> Any:
        values = self._args(args)
        handle = self.handle
        if self.read_only:
            calldata = encode_call(handle.abi, self.name, values)
            logger.debug("call %s.%s%s", handle.address, self.name, tuple(values))
            result = await handle.rpc.eth_call(handle.address, calldata)
            return decode_result(self.entry, result)

        if handle.signer is None:
            raise ContractError(
                f"{self.name} changes state and needs a signer; "
                f"create the contract handle with a WalletSigner"
            )
        logger.debug("transact %s.%s%s", handle.address, self.name, tuple(values))
        return await send_contract_tx(
            handle.signer,
            handle.address,
            handle.abi,
            self.name,
            values,
            gas_limit=handle.gas_limit,
        )


class ContractHandle:
    """
    Callable proxy over a deployed contract.

    Attributes:
        address: Contract address
        abi: Contract ABI
        rpc: Connection used for read-only calls
        signer: Optional signer for state-changing calls (uses its own RPC)
    """

    def __init__(
        self,
        address: str,
        abi: list[dict[str, Any]],
        rpc: RpcClient,
        signer: Optional["WalletSigner"] = None,
        gas_limit: int = 500_000,
    ) -> None:
        self.address = address
        self.abi = abi
        self.rpc = signer.rpc if signer is not None else rpc
        self.signer = signer
        self.gas_limit = gas_limit

    def __repr__(self) -> str:
        mode = "signing" if self.signer is not None else "read-only"
        return f"ContractHandle({self.address}, {mode})"

    def __getattr__(self, name: str) -> ContractFunction:
        if name.startswith("_"):
            raise AttributeError(name)
        entry = find_function(self.abi, name)
        if entry is None:
            raise AttributeError(f"Contract at {self.address} has no function {name!r}")
        return ContractFunction(self, entry)
