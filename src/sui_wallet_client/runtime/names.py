"""
Alias and Tag value types.

Short validated identifiers. An Alias names a wallet or an RPC endpoint; a
Tag labels wallets. Both are immutable and compare by value, and both plug
into pydantic so records validate and serialise them as plain strings.
"""

from __future__ import annotations
import functools
import string
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import NameTooLongError, NameInvalidCharactersError, WalletClientError


@functools.total_ordering
class _Name:
    """Common base for bounded, charset-restricted names."""

    MAX_LENGTH = 0
    ALLOWED = frozenset()
    ALLOWED_DESCRIPTION = ""

    __slots__ = ("_value",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__name__} must be a string")
        if len(name) > self.MAX_LENGTH:
            raise NameTooLongError(self.MAX_LENGTH, name)
        if not all(c in self.ALLOWED for c in name):
            raise NameInvalidCharactersError(self.ALLOWED_DESCRIPTION, name)
        object.__setattr__(self, "_value", name)

    @classmethod
    def new(cls, name: str):
        """Validated constructor; raises on bad length or charset."""
        return cls(name)

    @property
    def value(self) -> str:
        return self._value

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return self._value == other._value
        elif isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, type(self)):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __reduce__(self):
        return (type(self), (self._value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Validate from str, serialise back to str."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any, _info=None):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except WalletClientError as e:
                raise ValueError(e.message) from e
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")


class Alias(_Name):
    """
    Human-chosen identifier for a wallet or RPC endpoint.

    At most 20 characters from ``[A-Za-z0-9_]``. Aliases are totally ordered
    by their string value.
    """

    MAX_LENGTH = 20
    ALLOWED = frozenset(string.ascii_letters + string.digits + "_")
    ALLOWED_DESCRIPTION = "alphabetic letters, numbers, or underscores"

    __slots__ = ()

    def contains(self, other: Alias) -> bool:
        """Case-sensitive substring test, used for partial alias filtering."""
        return str(other) in self._value


class Tag(_Name):
    """Wallet label: at most 10 characters from ``[a-z0-9_]``."""

    MAX_LENGTH = 10
    ALLOWED = frozenset(string.ascii_lowercase + string.digits + "_")
    ALLOWED_DESCRIPTION = "lowercase letters, numbers, or underscores"

    __slots__ = ()


__all__ = ["Alias", "Tag"]
