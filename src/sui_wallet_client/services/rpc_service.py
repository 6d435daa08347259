"""
RPC server operations.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ..models.network_env import NetworkEnv
from ..models.rpc_server import RpcServerRecord
from ..models.selectors import AliasOrUrl
from ..runtime.names import Alias
from ..runtime.url import RpcUrl
from ..storage.repository import StoreRepository

logger = logging.getLogger(__name__)


class RpcService:
    """Add, remove and list named RPC endpoints."""

    def __init__(self, repository: StoreRepository):
        self.repository = repository

    def add(self, url: RpcUrl, alias: Alias, env: NetworkEnv = NetworkEnv.NONE) -> RpcServerRecord:
        """
        Register an RPC server.

        Raises:
            PrimaryKeyAlreadyExistsError: If ``url`` is already registered
            AliasAlreadyExistsError: If another server owns ``alias``
        """
        store = self.repository.load()
        record = RpcServerRecord(url=url, alias=alias, env=env)
        store.add_rpc_server(record)
        self.repository.store(store)
        return record

    def remove(self, target: AliasOrUrl) -> RpcServerRecord:
        """
        Remove a server selected by URL or alias.

        Raises:
            AliasNotFoundError: If no server has the alias
            KeyNotFoundError: If no server has the URL
        """
        store = self.repository.load()
        record = store.resolve_rpc_server(target)
        store.remove_rpc_server(record.url)
        self.repository.store(store)
        return record

    def list(self, alias: Optional[Alias] = None, env: Optional[NetworkEnv] = None) -> List[RpcServerRecord]:
        """
        Servers ordered by environment, then alias.

        Args:
            alias: Keep servers whose alias contains this substring
            env: Keep servers of this environment only
        """
        store = self.repository.load()
        predicate = None
        if env is not None:
            predicate = lambda record: record.env is env
        servers = store.rpc_servers.filter(alias=alias, predicate=predicate)
        return sorted(servers, key=RpcServerRecord.sort_key)


__all__ = ["RpcService"]
