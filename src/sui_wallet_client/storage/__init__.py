"""Persistence backends for the wallet store."""

from .repository import StoreRepository, MemoryStoreRepository, FileStoreRepository

__all__ = ["StoreRepository", "MemoryStoreRepository", "FileStoreRepository"]
