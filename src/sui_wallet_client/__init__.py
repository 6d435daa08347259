"""
Sui Wallet Client

Local, file-backed store for Sui wallets, named RPC endpoints and tags, with
wallet credentials sealed under ChaCha20-Poly1305.
"""

# Runtime value types and errors
from .runtime.errors import *
from .runtime.names import Alias, Tag
from .runtime.address import SuiAddress
from .runtime.url import RpcUrl
from .runtime.config import CipherConfig, default_store_path

# Key material and the credential cipher
from .crypto import (
    CredentialCipher, SignatureScheme, SuiKeyPair, WordLength,
    derive_key_pair_from_mnemonic, generate_new_key,
)

# Records, collections and the store aggregate
from .models import *

# Persistence and services
from .storage import StoreRepository, MemoryStoreRepository, FileStoreRepository
from .services import WalletService, TagService, RpcService, CipherService

__version__ = "0.1.0"
__all__ = [
    "Alias",
    "Tag",
    "SuiAddress",
    "RpcUrl",
    "CipherConfig",
    "default_store_path",
    "CredentialCipher",
    "SignatureScheme",
    "SuiKeyPair",
    "WordLength",
    "derive_key_pair_from_mnemonic",
    "generate_new_key",
    "TagSet",
    "NetworkEnv",
    "SecondaryIndexedCollection",
    "WalletCredentials",
    "WalletRecord",
    "WalletCollection",
    "RpcServerRecord",
    "RpcServerCollection",
    "AliasOrAddress",
    "AliasOrUrl",
    "parse_alias_or_address",
    "parse_alias_or_url",
    "WalletStore",
    "StoreRepository",
    "MemoryStoreRepository",
    "FileStoreRepository",
    "WalletService",
    "TagService",
    "RpcService",
    "CipherService",
    "WalletClientError",
    "ErrorCode",
]
