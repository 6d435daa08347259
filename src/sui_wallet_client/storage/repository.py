r"""
Store persistence.

Provides the load/store contract for the wallet store with a JSON file
backend and an in-memory backend. At most one writer at a time is assumed;
the file backend replaces the document atomically but does not lock it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
import copy
import json
import logging
import os
import tempfile
from pathlib import Path

from ..models.store import WalletStore
from ..runtime.config import default_store_path
from ..runtime.errors import DeserializationError, StorageError

logger = logging.getLogger(__name__)


class StoreRepository(ABC):
    """
    Abstract store repository.

    Every command loads the store once and, if it mutates it, stores it once.
    """

    @abstractmethod
    def load(self) -> WalletStore:
        """
        Load the persisted store.

        Returns:
            The store, or an empty one if nothing has been persisted yet

        Raises:
            DeserializationError: If the persisted document is corrupt
            StorageError: If reading fails
        """
        pass

    @abstractmethod
    def store(self, store: WalletStore) -> None:
        """
        Persist the store, replacing the previous document.

        Raises:
            StorageError: If writing fails
        """
        pass


class MemoryStoreRepository(StoreRepository):
    """
    In-memory repository.

    Keeps the serialised document, so each load returns an independent store
    and unsaved mutations are never visible to later loads.
    """

    def __init__(self, document: Optional[Dict[str, Any]] = None):
        self._document = copy.deepcopy(document)

    def load(self) -> WalletStore:
        if self._document is None:
            return WalletStore()
        return WalletStore.from_dict(copy.deepcopy(self._document))

    def store(self, store: WalletStore) -> None:
        self._document = store.to_dict()
        logger.debug(f"Stored {store!r} in memory repository")

    @property
    def document(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self._document)

    def __repr__(self) -> str:
        return f"MemoryStoreRepository(empty={self._document is None})"


class FileStoreRepository(StoreRepository):
    """
    JSON file repository.

    The document is written with sorted keys to a temporary file next to the
    target, restricted to the owner, then moved into place.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize file repository.

        Args:
            path: Document location (defaults to :func:`default_store_path`)
        """
        self.path = Path(path) if path is not None else default_store_path()

    def load(self) -> WalletStore:
        """Read the document, or return an empty store if there is none."""
        if not self.path.exists():
            logger.debug(f"No store at {self.path}, starting empty")
            return WalletStore()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Store at {self.path} is not valid JSON: {e}")
            raise DeserializationError(f"Store at {self.path} is not valid JSON",
                                       {"path": str(self.path)}, e) from e
        except OSError as e:
            raise StorageError(f"Failed to read store at {self.path}",
                               details={"path": str(self.path)}, cause=e) from e

        try:
            store = WalletStore.from_dict(document)
        except DeserializationError as e:
            logger.error(f"Store at {self.path} is corrupt: {e.message}")
            raise

        logger.debug(f"Loaded {store!r} from {self.path}")
        return store

    def store(self, store: WalletStore) -> None:
        """Atomically replace the document."""
        text = json.dumps(store.to_dict(), indent=2, sort_keys=True)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.",
                                            suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise StorageError(f"Failed to write store at {self.path}",
                               details={"path": str(self.path)}, cause=e) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug(f"Stored {store!r} to {self.path}")

    def __repr__(self) -> str:
        return f"FileStoreRepository(path='{self.path}')"


__all__ = ["StoreRepository", "MemoryStoreRepository", "FileStoreRepository"]
