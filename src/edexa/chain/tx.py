"""
Transaction Builder - Build, sign, and send eDexa transactions.

Uses eth-account for signing and the httpx-based JSON-RPC client for sending.
Receipts are not awaited; callers get the transaction hash back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import rlp
from eth_abi import encode

from ..errors import ContractError
from .abi import abi_type, find_constructor, find_function, function_signature
from .rpc import keccak256

if TYPE_CHECKING:
    from ..wallet import WalletSigner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deployment:
    """A submitted contract-creation transaction."""
    tx_hash: str
    contract_address: str


def to_checksum_address(address: str) -> str:
    """Convert an address to EIP-55 checksummed format.

    eth-account requires checksummed addresses in transaction fields.
    """
    addr = address.lower().replace("0x", "")
    addr_hash = keccak256(addr.encode("utf-8")).hex()
    result = "0x"
    for i, c in enumerate(addr):
        if c in "abcdef":
            result += c.upper() if int(addr_hash[i], 16) >= 8 else c
        else:
            result += c
    return result


def contract_address_for(sender: str, nonce: int) -> str:
    """Address of a contract created by ``sender`` at ``nonce``."""
    encoded = rlp.encode([bytes.fromhex(sender[2:]), nonce])
    return to_checksum_address("0x" + keccak256(encoded)[12:].hex())


def encode_call(abi: list, function_name: str, args: list) -> str:
    """ABI-encode a function call to hex calldata."""
    func = find_function(abi, function_name)
    if func is None:
        raise ContractError(f"Function {function_name} not found in ABI")

    inputs = func.get("inputs", [])
    if len(args) != len(inputs):
        raise ContractError(
            f"{function_name} expects {len(inputs)} argument(s), got {len(args)}"
        )

    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    selector = keccak256(function_signature(func).encode("utf-8"))[:4]
    input_types = [abi_type(inp) for inp in inputs]
    encoded_args = encode(input_types, list(args)) if args else b""

    return "0x" + selector.hex() + encoded_args.hex()


def encode_constructor(abi: list, bytecode: str, args: list) -> str:
    """Append ABI-encoded constructor args to creation bytecode."""
    deploy_data = bytecode if bytecode.startswith("0x") else "0x" + bytecode
    if not args:
        return deploy_data

    constructor = find_constructor(abi)
    if constructor is None:
        raise ContractError("Constructor not found in ABI, but constructor args were provided.")

    input_types = [abi_type(inp) for inp in constructor.get("inputs", [])]
    return deploy_data + encode(input_types, list(args)).hex()


async def build_transaction(
    signer: "WalletSigner",
    data: str,
    to: Optional[str] = None,
    value: int = 0,
    gas_limit: int = 500_000,
) -> dict[str, Any]:
    """
    Build an unsigned legacy transaction for ``signer``.

    Args:
        signer: Wallet signer providing sender and RPC
        data: 0x-prefixed calldata or creation bytecode
        to: Target address (None for contract creation)
        value: Native value in wei
        gas_limit: Gas limit (no estimation is done)

    Returns:
        Unsigned transaction dict
    """
    rpc = signer.rpc
    tx: dict[str, Any] = {
        "data": data,
        "value": value,
        "nonce": await rpc.get_nonce(signer.address),
        "gas": gas_limit,
        "gasPrice": await rpc.get_gas_price(),
        "chainId": await signer.get_chain_id(),
    }
    if to is not None:
        tx["to"] = to_checksum_address(to)
    return tx


async def sign_and_send(signer: "WalletSigner", tx: dict[str, Any]) -> str:
    """
    Sign a transaction and send it.

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    raw_tx = signer.sign_transaction(tx)
    tx_hash = await signer.rpc.send_raw_transaction(raw_tx)
    logger.debug("sent tx %s from %s (nonce %s)", tx_hash, signer.address, tx["nonce"])
    return tx_hash


async def send_contract_tx(
    signer: "WalletSigner",
    contract_address: str,
    abi: list,
    function_name: str,
    args: list,
    value: int = 0,
    gas_limit: int = 500_000,
) -> str:
    """Build, sign, and send a contract call transaction; returns the tx hash."""
    calldata = encode_call(abi, function_name, args)
    tx = await build_transaction(
        signer, calldata, to=contract_address, value=value, gas_limit=gas_limit
    )
    return await sign_and_send(signer, tx)


async def deploy_contract(
    signer: "WalletSigner",
    abi: list,
    bytecode: str,
    constructor_args: Optional[list] = None,
    gas_limit: int = 5_000_000,
) -> Deployment:
    """
    Deploy a contract to the chain.

    Builds a creation transaction (no ``to``), signs and sends it.  The
    contract address is derived from the sender and nonce.
    """
    deploy_data = encode_constructor(abi, bytecode, constructor_args or [])
    tx = await build_transaction(signer, deploy_data, gas_limit=gas_limit)
    tx_hash = await sign_and_send(signer, tx)
    return Deployment(
        tx_hash=tx_hash,
        contract_address=contract_address_for(signer.address, tx["nonce"]),
    )
