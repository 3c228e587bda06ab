__version__ = "1.1.0"

__all__ = [
    # Client
    "EdexaClient",
    "Deployment",
    # Configuration
    "EdexaConfig",
    "load_config",
    # Name resolution
    "NameResolver",
    "Resolution",
    "ResolutionKind",
    "namehash",
    "is_address",
    # Token facades
    "ERC20",
    "ERC721",
    "ERC1155",
    "StableCoin",
    # Chain access
    "RpcClient",
    "ContractHandle",
    # Wallets
    "WalletSigner",
    "create_wallet_signer",
    "generate_private_key",
    "load_private_key",
    # Errors
    "EdexaError",
    "ResolutionError",
    "LookupFailedError",
    "RpcError",
    "ContractError",
    "SignerError",
    "InvalidKeyError",
    "MissingValueError",
]

from .errors import (
    ContractError,
    EdexaError,
    InvalidKeyError,
    LookupFailedError,
    MissingValueError,
    ResolutionError,
    RpcError,
    SignerError,
)
from .config import EdexaConfig, load_config
from .chain.contract import ContractHandle
from .chain.rpc import RpcClient
from .chain.tx import Deployment
from .naming import NameResolver, Resolution, ResolutionKind, is_address, namehash
from .wallet import WalletSigner, create_wallet_signer, generate_private_key, load_private_key
from .tokens import ERC20, ERC721, ERC1155, StableCoin
from .client import EdexaClient
