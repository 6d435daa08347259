r"""
Secondary-indexed record collection.

A map from primary key to record plus a map from alias to primary key. The
two maps are only ever changed together, after every check has passed, so a
failed operation leaves both exactly as they were.

Invariants:
- every alias in the alias index references a primary key that is present
- a record that declares an alias is reachable through it
- no two records share a primary key or an alias
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..runtime.errors import (
    AliasAlreadyExistsError,
    AliasNotFoundError,
    DeserializationError,
    KeyNotFoundError,
    PrimaryKeyAlreadyExistsError,
)
from ..runtime.names import Alias

logger = logging.getLogger(__name__)

K = TypeVar("K")
R = TypeVar("R", bound=BaseModel)


class SecondaryIndexedCollection(ABC, Generic[K, R]):
    """
    Records addressable by primary key and by alias.

    Records are frozen pydantic models. Subclasses set :attr:`record_type`,
    bind the primary key through :meth:`primary_key_of` and name the record
    kind for error messages. The alias is read from the record's ``alias``
    field.
    """

    record_type: Type[R]
    kind = "Record"
    key_name = "key"

    def __init__(self):
        self._records: Dict[K, R] = {}
        self._aliases: Dict[Alias, K] = {}

    # ------------------------------------------------------------------
    # Record binding
    # ------------------------------------------------------------------

    @abstractmethod
    def primary_key_of(self, record: R) -> K:
        pass

    def alias_of(self, record: R) -> Optional[Alias]:
        return record.alias

    def _replace(self, record: R, changes: Dict[str, Any]) -> R:
        return record.model_copy(update=changes)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_by_key(self, key: K) -> Optional[R]:
        return self._records.get(key)

    def get_by_alias(self, alias: Alias) -> Optional[R]:
        key = self._aliases.get(alias)
        if key is None:
            return None
        return self._records.get(key)

    def get_key_by_alias(self, alias: Alias) -> Optional[K]:
        return self._aliases.get(alias)

    def contains_key(self, key: K) -> bool:
        return key in self._records

    def contains_alias(self, alias: Alias) -> bool:
        return alias in self._aliases

    def require_by_key(self, key: K) -> R:
        record = self._records.get(key)
        if record is None:
            raise KeyNotFoundError(key, self.kind, self.key_name)
        return record

    def require_by_alias(self, alias: Alias) -> R:
        key = self._aliases.get(alias)
        if key is None:
            raise AliasNotFoundError(alias, self.kind)
        return self.require_by_key(key)

    def records(self) -> List[R]:
        """All records, ordered by primary key."""
        return [self._records[key] for key in sorted(self._records)]

    def filter(self, alias: Optional[Alias] = None,
               predicate: Optional[Callable[[R], bool]] = None) -> List[R]:
        """
        Records matching every given criterion, ordered by primary key.

        Args:
            alias: Keep records whose alias contains this one as a substring
            predicate: Additional record test
        """
        result = []
        for record in self.records():
            if alias is not None:
                own = self.alias_of(record)
                if own is None or not own.contains(alias):
                    continue
            if predicate is not None and not predicate(record):
                continue
            result.append(record)
        return result

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.records())

    def __contains__(self, key: Any) -> bool:
        return key in self._records

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, record: R) -> None:
        """
        Insert a record into both indices.

        Raises:
            PrimaryKeyAlreadyExistsError: If the primary key is present
            AliasAlreadyExistsError: If another record owns the alias
        """
        key = self.primary_key_of(record)
        if key in self._records:
            raise PrimaryKeyAlreadyExistsError(key, self.kind, self.key_name)

        alias = self.alias_of(record)
        if alias is not None and alias in self._aliases:
            raise AliasAlreadyExistsError(alias, self.kind)

        self._records[key] = record
        if alias is not None:
            self._aliases[alias] = key
        logger.debug(f"Added {self.kind.lower()} {key}")

    def edit(self, key: K, alias: Optional[Alias] = None, **changes: Any) -> R:
        """
        Update a record in place of the old one.

        A new alias replaces the old mapping; it may be the record's current
        alias but not one owned by another record. Other ``changes`` replace
        the named fields wholesale; ``None`` values are ignored.

        Returns:
            The updated record

        Raises:
            KeyNotFoundError: If ``key`` is absent
            AliasAlreadyExistsError: If another record owns ``alias``
        """
        record = self.require_by_key(key)

        if alias is not None:
            owner = self._aliases.get(alias)
            if owner is not None and owner != key:
                raise AliasAlreadyExistsError(alias, self.kind)

        updates = {name: value for name, value in changes.items() if value is not None}
        if alias is not None:
            updates["alias"] = alias
        if not updates:
            return record

        updated = self._replace(record, updates)

        old_alias = self.alias_of(record)
        if alias is not None and old_alias is not None:
            self._aliases.pop(old_alias, None)
        self._records[key] = updated
        if alias is not None:
            self._aliases[alias] = key

        logger.debug(f"Edited {self.kind.lower()} {key}")
        return updated

    def remove(self, record: R) -> None:
        """Delete a record from both indices; absent records are ignored."""
        key = self.primary_key_of(record)
        if key not in self._records:
            return
        stored = self._records.pop(key)
        alias = self.alias_of(stored)
        if alias is not None and self._aliases.get(alias) == key:
            del self._aliases[alias]
        logger.debug(f"Removed {self.kind.lower()} {key}")

    def pop(self, key: K) -> R:
        """Delete and return the record under ``key``."""
        record = self.require_by_key(key)
        self.remove(record)
        return record

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _dump_record(self, record: R) -> Dict[str, Any]:
        return record.model_dump(mode="json")

    def _load_record(self, data: Any) -> R:
        try:
            return self.record_type.model_validate(data)
        except PydanticValidationError as e:
            raise DeserializationError(f"Invalid {self.kind.lower()} record", cause=e) from e

    def to_dict(self) -> Dict[str, Any]:
        """Both indices, keyed by their string forms."""
        return {
            "records": {str(key): self._dump_record(self._records[key]) for key in sorted(self._records)},
            "aliases": {str(alias): str(key) for alias, key in sorted(self._aliases.items())},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Rebuild a collection and verify its invariants.

        Raises:
            DeserializationError: If the document is malformed or inconsistent
        """
        if not isinstance(data, dict):
            raise DeserializationError(f"Malformed {cls.kind.lower()} collection")
        collection = cls()
        records = data.get("records", {})
        aliases = data.get("aliases", {})
        if not isinstance(records, dict) or not isinstance(aliases, dict):
            raise DeserializationError(f"Malformed {cls.kind.lower()} collection")

        for stored_key, raw in records.items():
            record = collection._load_record(raw)
            key = collection.primary_key_of(record)
            if str(key) != stored_key:
                raise DeserializationError(
                    f"{cls.kind} stored under {stored_key} has {cls.key_name} {key}")
            collection._records[key] = record

        keys_by_text = {str(key): key for key in collection._records}
        for raw_alias, raw_key in aliases.items():
            key = keys_by_text.get(raw_key)
            if key is None:
                raise DeserializationError(
                    f"Alias {raw_alias} references missing {cls.kind.lower()} {raw_key}")
            alias = collection.alias_of(collection._records[key])
            if alias is None or str(alias) != raw_alias:
                raise DeserializationError(
                    f"Alias {raw_alias} does not match {cls.kind.lower()} {raw_key}")
            collection._aliases[alias] = key

        for key, record in collection._records.items():
            alias = collection.alias_of(record)
            if alias is not None and collection._aliases.get(alias) != key:
                raise DeserializationError(
                    f"{cls.kind} {key} declares alias {alias} missing from the index")

        return collection

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self._records)})"


__all__ = ["SecondaryIndexedCollection"]
