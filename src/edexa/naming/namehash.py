"""
Name and address classification helpers.

``namehash`` follows the EIP-137 construction: starting from 32 zero bytes,
each label is hashed right to left into the running node.
"""

from __future__ import annotations

import re

from ..chain.rpc import keccak256
from ..chain.tx import to_checksum_address

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ZERO_NODE = b"\x00" * 32

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(value: object) -> bool:
    """True for 0x + 40 hex digits, in any letter case (checksum not enforced)."""
    return isinstance(value, str) and ADDRESS_RE.fullmatch(value) is not None


def is_checksum_address(value: object) -> bool:
    """
    Like ``is_address``, but mixed-case input must carry a valid EIP-55 checksum.

    All-lowercase and all-uppercase hex bodies carry no checksum and pass.
    """
    if not is_address(value):
        return False
    body = value[2:]
    if body == body.lower() or body == body.upper():
        return True
    return to_checksum_address(value) == value


def is_zero_address(value: object) -> bool:
    return isinstance(value, str) and value.lower() == ZERO_ADDRESS


def normalize_name(name: str) -> str:
    return name.strip().lower()


def namehash(name: str) -> bytes:
    """
    Compute the namehash of a dot-separated name.

    >>> namehash("").hex() == "00" * 32
    True
    """
    node = ZERO_NODE
    name = normalize_name(name)
    if not name:
        return node
    for label in reversed(name.split(".")):
        node = keccak256(node + keccak256(label.encode("utf-8")))
    return node


def label_of(name: str) -> str:
    """Text before the first '.' (the whole name if there is none)."""
    return name.split(".", 1)[0]


def has_valid_name_format(name: str, tld: str, min_label_length: int) -> bool:
    return name.endswith(tld) and len(label_of(name)) >= min_label_length


def reverse_name(address: str, suffix: str) -> str:
    """Reverse-registrar name for an address: ``<hex body>.<suffix>``."""
    return f"{address[2:].lower()}.{suffix.lstrip('.')}"
