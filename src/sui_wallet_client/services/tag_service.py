"""
Known-tag operations.
"""

from __future__ import annotations
import logging
from typing import List

from ..models.tags import TagSet
from ..runtime.names import Tag
from ..storage.repository import StoreRepository

logger = logging.getLogger(__name__)


class TagService:
    """Add, remove and list the tags wallets may carry."""

    def __init__(self, repository: StoreRepository):
        self.repository = repository

    def add(self, tags: TagSet) -> List[Tag]:
        """Make ``tags`` known; returns the resulting known tags."""
        store = self.repository.load()
        store.add_tags(tags)
        self.repository.store(store)
        return list(store.tags)

    def remove(self, tags: TagSet) -> List[Tag]:
        """Forget ``tags`` and strip them from every wallet."""
        store = self.repository.load()
        store.remove_tags(tags)
        self.repository.store(store)
        return list(store.tags)

    def list(self) -> List[Tag]:
        return list(self.repository.load().tags)


__all__ = ["TagService"]
