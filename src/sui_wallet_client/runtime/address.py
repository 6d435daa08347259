"""
SuiAddress Pydantic custom type for 32-byte chain addresses.
"""

from __future__ import annotations
import hashlib
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import InvalidAddressError

ADDRESS_LENGTH = 32
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class SuiAddress:
    """
    Sui account address.

    The canonical text form is ``0x`` followed by 64 lowercase hex digits.
    """

    __slots__ = ("_bytes",)

    def __init__(self, address: Union[str, bytes]):
        if isinstance(address, (bytes, bytearray)):
            if len(address) != ADDRESS_LENGTH:
                raise InvalidAddressError(
                    f"Address must be {ADDRESS_LENGTH} bytes, got {len(address)}")
            self._bytes = bytes(address)
            return

        if not isinstance(address, str):
            raise InvalidAddressError("Address must be a string or bytes")

        hex_part = address[2:] if address[:2] in ("0x", "0X") else address
        if len(hex_part) != ADDRESS_LENGTH * 2 or not all(c in _HEX_DIGITS for c in hex_part):
            raise InvalidAddressError(f"Invalid address: {address}", {"address": address})
        self._bytes = bytes.fromhex(hex_part)

    @classmethod
    def from_str(cls, address: str) -> SuiAddress:
        """Parse an address from its hex form."""
        return cls(address)

    @classmethod
    def from_public_key(cls, flag: int, public_key: bytes) -> SuiAddress:
        """
        Derive the address of a public key.

        Args:
            flag: Signature scheme flag byte
            public_key: Raw public key bytes

        Returns:
            blake2b-256 digest of ``flag || public_key`` as an address
        """
        digest = hashlib.blake2b(bytes([flag]) + public_key, digest_size=ADDRESS_LENGTH).digest()
        return cls(digest)

    def to_bytes(self) -> bytes:
        return self._bytes

    def to_hex(self) -> str:
        return "0x" + self._bytes.hex()

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"SuiAddress('{self.to_hex()}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SuiAddress):
            return self._bytes == other._bytes
        return False

    def __lt__(self, other: SuiAddress) -> bool:
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the SuiAddress."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any, _info=None) -> SuiAddress:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, bytes)):
            try:
                return cls(value)
            except InvalidAddressError as e:
                raise ValueError(e.message) from e
        raise ValueError(f"Invalid SuiAddress: {value}")


__all__ = ["SuiAddress", "ADDRESS_LENGTH"]
