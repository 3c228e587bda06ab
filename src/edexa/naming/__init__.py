"""
Naming - eDexa name service resolution.

Classifies identifiers as addresses or names and resolves them on-chain,
either through the reverse-registrar resolver or the legacy domain registry.
"""

from .namehash import (
    ZERO_ADDRESS,
    is_address,
    is_checksum_address,
    label_of,
    namehash,
    reverse_name,
)
from .resolver import (
    NO_REVERSE_RECORD_MESSAGE,
    NOT_ADDRESS_MESSAGE,
    NameResolver,
    Resolution,
    ResolutionKind,
    name_format_message,
)

__all__ = [
    "NO_REVERSE_RECORD_MESSAGE",
    "NOT_ADDRESS_MESSAGE",
    "NameResolver",
    "Resolution",
    "ResolutionKind",
    "ZERO_ADDRESS",
    "is_address",
    "is_checksum_address",
    "label_of",
    "name_format_message",
    "namehash",
    "reverse_name",
]
