"""
RPC server records and the URL-keyed collection.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..runtime.names import Alias
from ..runtime.url import RpcUrl
from .indexed import SecondaryIndexedCollection
from .network_env import NetworkEnv


class RpcServerRecord(BaseModel):
    """Named RPC endpoint. Every server has an alias."""

    model_config = ConfigDict(frozen=True)

    url: RpcUrl
    alias: Alias
    env: NetworkEnv = NetworkEnv.NONE

    def sort_key(self):
        return (self.env, self.alias)


class RpcServerCollection(SecondaryIndexedCollection[RpcUrl, RpcServerRecord]):
    """RPC servers keyed by URL, with mandatory unique aliases."""

    record_type = RpcServerRecord
    kind = "RPC server"
    key_name = "url"

    def primary_key_of(self, record: RpcServerRecord) -> RpcUrl:
        return record.url


__all__ = ["RpcServerRecord", "RpcServerCollection"]
