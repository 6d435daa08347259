"""
Tag sets.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Optional, Set

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..runtime.errors import WalletClientError
from ..runtime.names import Tag


class TagSet:
    """
    Unordered set of unique tags.

    Iteration is in sorted order so listings and serialised documents are
    deterministic; storage order carries no meaning.
    """

    def __init__(self, tags: Optional[Iterable[Tag]] = None):
        self._tags: Set[Tag] = set()
        for tag in tags or ():
            self._tags.add(tag if isinstance(tag, Tag) else Tag(tag))

    @classmethod
    def parse(cls, text: str) -> TagSet:
        """Build a set from a comma-separated list such as ``"dev,ops"``."""
        names = [name.strip() for name in text.split(",")]
        return cls(Tag(name) for name in names if name)

    def contains(self, tag: Tag) -> bool:
        return tag in self._tags

    def contains_all(self, other: TagSet) -> bool:
        """True iff every tag of ``other`` is present."""
        return other._tags <= self._tags

    def missing(self, other: TagSet) -> TagSet:
        """Tags of ``other`` that are not present here."""
        return TagSet(other._tags - self._tags)

    def extend(self, other: TagSet) -> None:
        self._tags |= other._tags

    def remove(self, other: TagSet) -> None:
        self._tags -= other._tags

    def without(self, other: TagSet) -> TagSet:
        return TagSet(self._tags - other._tags)

    def copy(self) -> TagSet:
        return TagSet(self._tags)

    def join(self, separator: str) -> str:
        return separator.join(self.names())

    def names(self) -> List[str]:
        return sorted(str(tag) for tag in self._tags)

    def is_empty(self) -> bool:
        return not self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(sorted(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, tag: Any) -> bool:
        return tag in self._tags

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TagSet):
            return NotImplemented
        return self._tags == other._tags

    __hash__ = None

    def __repr__(self) -> str:
        return f"TagSet({self.names()})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Validate from a list of names, serialise to a sorted list."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda tags: tags.names()
            ),
        )

    @classmethod
    def _validate(cls, value: Any, _info=None) -> TagSet:
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.parse(value)
            if isinstance(value, (list, tuple, set, frozenset)):
                return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e
        except WalletClientError as e:
            raise ValueError(e.message) from e
        raise ValueError(f"Invalid TagSet: {value!r}")


__all__ = ["TagSet"]
