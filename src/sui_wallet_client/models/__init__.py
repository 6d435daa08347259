"""
Record types, indexed collections and the store aggregate.
"""

from .tags import TagSet
from .network_env import NetworkEnv
from .indexed import SecondaryIndexedCollection
from .credentials import WalletCredentials
from .wallet import WalletRecord, WalletCollection
from .rpc_server import RpcServerRecord, RpcServerCollection
from .selectors import AliasOrAddress, AliasOrUrl, parse_alias_or_address, parse_alias_or_url
from .store import WalletStore

__all__ = [
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
]
