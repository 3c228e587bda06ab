"""
ECDSA / secp256k1 wallet signers for the eDexa SDK.

A ``WalletSigner`` is an eth-account ``LocalAccount`` connected to an RPC
endpoint.  Keys come from the caller or from PRIVATE_KEY in the environment
(optionally loaded from ~/.edexa/.env).

Dependencies: eth-account (lightweight, no full web3.py needed)
"""

from __future__ import annotations

import os
import re
import secrets
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from .chain.rpc import RpcClient
from .config import EDEXA_ENV
from .errors import InvalidKeyError, missing_value

_PRIVATE_KEY_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


class WalletSigner:
    """A private key bound to a JSON-RPC connection."""

    def __init__(self, account: LocalAccount, rpc: RpcClient, chain_id: Optional[int] = None) -> None:
        self.account = account
        self.rpc = rpc
        self._chain_id = chain_id

    def __repr__(self) -> str:
        return f"WalletSigner({self.address}, {self.rpc.rpc_url!r})"

    @property
    def address(self) -> str:
        return self.account.address

    async def get_chain_id(self) -> int:
        """Chain ID from config, or asked once from the node."""
        if self._chain_id is None:
            self._chain_id = await self.rpc.get_chain_id()
        return self._chain_id

    def sign_transaction(self, tx: dict[str, Any]) -> str:
        """Sign ``tx`` and return the 0x-prefixed raw transaction."""
        signed = self.account.sign_transaction(tx)
        raw = signed.raw_transaction.hex()
        return raw if raw.startswith("0x") else "0x" + raw

    def sign_message(self, message: str) -> str:
        """Sign a message using EIP-191 personal_sign; returns 0x-prefixed hex."""
        signed = self.account.sign_message(encode_defunct(text=message))
        sig = signed.signature.hex()
        return sig if sig.startswith("0x") else "0x" + sig


def _account_from_key(private_key: Optional[str]) -> LocalAccount:
    if private_key is None:
        raise missing_value("private_key")
    if not isinstance(private_key, str) or not _PRIVATE_KEY_RE.match(private_key):
        raise InvalidKeyError(
            f"invalid hexlify value: private key must be 32 bytes of hex, "
            f"got {len(str(private_key))} characters"
        )
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key
    try:
        return Account.from_key(private_key)
    except Exception as exc:
        # key outside the curve order
        raise InvalidKeyError(f"invalid hexlify value: {exc}") from exc


def create_wallet_signer(
    private_key: Optional[str],
    rpc: RpcClient,
    chain_id: Optional[int] = None,
) -> WalletSigner:
    """
    Create a signer from a private key and an RPC connection.

    Args:
        private_key: Hex private key, with or without 0x prefix
        rpc: RPC client the signer sends transactions through
        chain_id: Chain ID for signing (None = ask the node on first use)

    Raises:
        MissingValueError: If ``private_key`` is None
        InvalidKeyError: If the key is not 32 bytes of hex
    """
    return WalletSigner(_account_from_key(private_key), rpc, chain_id=chain_id)


def generate_private_key() -> tuple[str, str]:
    """
    Generate a new ECDSA/secp256k1 keypair.

    Returns:
        Tuple of (private_key_hex, checksummed address)
    """
    private_key = "0x" + secrets.token_hex(32)
    return private_key, Account.from_key(private_key).address


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from .env file or environment.

    Args:
        env_path: Path to .env file (default: ~/.edexa/.env)

    Returns:
        0x-prefixed hex private key

    Raises:
        ValueError: If PRIVATE_KEY is not set
    """
    env_path = env_path or EDEXA_ENV

    if env_path.exists():
        load_dotenv(env_path, override=True)

    private_key = os.environ.get("PRIVATE_KEY")
    if not private_key:
        raise ValueError(f"PRIVATE_KEY not found. Set PRIVATE_KEY in the environment or in {env_path}")

    # Ensure 0x prefix
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key
