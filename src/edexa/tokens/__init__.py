"""
Tokens - facades over the eDexa token standards.

- ERC20:      fungible tokens
- ERC721:     non-fungible tokens
- ERC1155:    multi-tokens
- StableCoin: ERC-20 with pause, burn-from and blacklist
"""

from .base import TokenContract
from .erc20 import ERC20
from .erc721 import ERC721
from .erc1155 import ERC1155
from .stablecoin import StableCoin

__all__ = ["ERC20", "ERC721", "ERC1155", "StableCoin", "TokenContract"]
