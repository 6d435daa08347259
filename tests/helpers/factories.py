"""
Test factories for creating records consistently.

Provides utilities for building addresses, wallets, RPC servers and stores
without going through key generation.
"""

from __future__ import annotations
import hashlib
from typing import Iterable, Optional

from sui_wallet_client.models.network_env import NetworkEnv
from sui_wallet_client.models.rpc_server import RpcServerRecord
from sui_wallet_client.models.store import WalletStore
from sui_wallet_client.models.tags import TagSet
from sui_wallet_client.models.wallet import WalletRecord
from sui_wallet_client.runtime.address import SuiAddress
from sui_wallet_client.runtime.names import Alias
from sui_wallet_client.runtime.url import RpcUrl

TEST_KEY_HEX = "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
TEST_NONCE_HEX = "000102030405060708090a0b"

# Standard BIP-39 test vectors (all-zero entropy)
MNEMONIC_12 = " ".join(["abandon"] * 11 + ["about"])
MNEMONIC_24 = " ".join(["abandon"] * 23 + ["art"])


def mk_address(seed: int = 0) -> SuiAddress:
    """
    Create a deterministic address for testing.

    Args:
        seed: Distinct seeds give distinct addresses

    Returns:
        Address derived by hashing the seed
    """
    return SuiAddress(hashlib.sha256(seed.to_bytes(8, "big")).digest())


def mk_tags(text: str = "") -> TagSet:
    return TagSet.parse(text)


def mk_wallet(seed: int = 0, alias: Optional[str] = None, tags: str = "") -> WalletRecord:
    """Create a watch-only wallet record."""
    return WalletRecord(
        address=mk_address(seed),
        alias=Alias(alias) if alias is not None else None,
        tags=mk_tags(tags),
    )


def mk_rpc_server(url: str = "https://fullnode.testnet.sui.io:443", alias: str = "testnet",
                  env: NetworkEnv = NetworkEnv.TESTNET) -> RpcServerRecord:
    return RpcServerRecord(url=RpcUrl(url), alias=Alias(alias), env=env)


def mk_store(tags: str = "", wallets: Iterable[WalletRecord] = ()) -> WalletStore:
    """Create a store with known ``tags`` holding ``wallets``."""
    store = WalletStore()
    store.add_tags(mk_tags(tags))
    for wallet in wallets:
        store.add_wallet(wallet)
    return store
