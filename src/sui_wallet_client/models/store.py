r"""
Wallet store aggregate.

The persisted root: the wallet collection, the RPC server collection and the
set of known tags. Every wallet's tags must be drawn from the known tags;
each mutation checks this before touching anything, so a rejected mutation
leaves the store unchanged.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Union

from ..runtime.address import SuiAddress
from ..runtime.errors import DeserializationError, TagNotFoundError, ValidationError
from ..runtime.names import Alias
from ..runtime.url import RpcUrl
from .rpc_server import RpcServerCollection, RpcServerRecord
from .tags import TagSet
from .wallet import WalletCollection, WalletRecord

logger = logging.getLogger(__name__)

STORE_VERSION = 1


class WalletStore:
    """Aggregate root holding wallets, RPC servers and known tags."""

    def __init__(self, wallets: Optional[WalletCollection] = None,
                 rpc_servers: Optional[RpcServerCollection] = None,
                 tags: Optional[TagSet] = None):
        self.wallets = wallets if wallets is not None else WalletCollection()
        self.rpc_servers = rpc_servers if rpc_servers is not None else RpcServerCollection()
        self.tags = tags if tags is not None else TagSet()

    # ------------------------------------------------------------------
    # Wallets
    # ------------------------------------------------------------------

    def _check_known_tags(self, tags: TagSet) -> None:
        missing = self.tags.missing(tags)
        if not missing.is_empty():
            raise TagNotFoundError(missing)

    def add_wallet(self, record: WalletRecord) -> None:
        """
        Add a wallet whose tags are all known.

        Raises:
            TagNotFoundError: If the wallet carries an unknown tag
            PrimaryKeyAlreadyExistsError: If the address is already stored
            AliasAlreadyExistsError: If another wallet owns the alias
        """
        self._check_known_tags(record.tags)
        self.wallets.add(record.model_copy(update={"tags": record.tags.copy()}))

    def edit_wallet(self, address: SuiAddress, alias: Optional[Alias] = None,
                    tags: Optional[TagSet] = None) -> WalletRecord:
        """
        Change a wallet's alias and/or replace its tags.

        Raises:
            TagNotFoundError: If ``tags`` holds an unknown tag
            KeyNotFoundError: If no wallet has ``address``
            AliasAlreadyExistsError: If another wallet owns ``alias``
        """
        if tags is not None:
            self._check_known_tags(tags)
            tags = tags.copy()
        return self.wallets.edit(address, alias=alias, tags=tags)

    def resolve_wallet(self, target: Union[SuiAddress, Alias]) -> WalletRecord:
        """
        Look up a wallet by address or alias.

        Raises:
            KeyNotFoundError: If no wallet has the address
            AliasNotFoundError: If no wallet has the alias
        """
        if isinstance(target, Alias):
            return self.wallets.require_by_alias(target)
        return self.wallets.require_by_key(target)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def add_tags(self, tags: TagSet) -> None:
        self.tags.extend(tags)
        logger.debug(f"Added tags {tags.join(',')}")

    def remove_tags(self, tags: TagSet) -> None:
        """Forget ``tags`` and strip them from every wallet."""
        for record in self.wallets.records():
            if any(tag in record.tags for tag in tags):
                self.wallets.edit(record.address, tags=record.tags.without(tags))
        self.tags.remove(tags)
        logger.debug(f"Removed tags {tags.join(',')}")

    # ------------------------------------------------------------------
    # RPC servers
    # ------------------------------------------------------------------

    def add_rpc_server(self, record: RpcServerRecord) -> None:
        self.rpc_servers.add(record)

    def remove_rpc_server(self, url: RpcUrl) -> RpcServerRecord:
        """
        Remove and return the server at ``url``.

        Raises:
            KeyNotFoundError: If no server has ``url``
        """
        return self.rpc_servers.pop(url)

    def resolve_rpc_server(self, target: Union[RpcUrl, Alias]) -> RpcServerRecord:
        if isinstance(target, Alias):
            return self.rpc_servers.require_by_alias(target)
        return self.rpc_servers.require_by_key(target)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": STORE_VERSION,
            "wallets": self.wallets.to_dict(),
            "rpc_servers": self.rpc_servers.to_dict(),
            "tags": self.tags.names(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> WalletStore:
        """
        Rebuild a store from its document and re-check its invariants.

        Raises:
            DeserializationError: If the document is malformed, of an unknown
                version, or a wallet references an unknown tag
        """
        if not isinstance(data, dict):
            raise DeserializationError("Store document must be an object")

        version = data.get("version", STORE_VERSION)
        if version != STORE_VERSION:
            raise DeserializationError(f"Unsupported store version: {version}",
                                       {"version": version})

        raw_tags = data.get("tags", [])
        if not isinstance(raw_tags, list):
            raise DeserializationError("Store tags must be a list")
        try:
            tags = TagSet(raw_tags)
        except (TypeError, ValidationError) as e:
            raise DeserializationError("Invalid tag in store", cause=e) from e

        store = cls(
            wallets=WalletCollection.from_dict(data.get("wallets", {})),
            rpc_servers=RpcServerCollection.from_dict(data.get("rpc_servers", {})),
            tags=tags,
        )

        for record in store.wallets:
            missing = tags.missing(record.tags)
            if not missing.is_empty():
                raise DeserializationError(
                    f"Wallet {record.address} references unknown tags: {missing.join(', ')}",
                    {"address": str(record.address), "missing": missing.names()},
                )
        return store

    def __repr__(self) -> str:
        return (f"WalletStore(wallets={len(self.wallets)}, rpc_servers={len(self.rpc_servers)}, "
                f"tags={len(self.tags)})")


__all__ = ["WalletStore", "STORE_VERSION"]
