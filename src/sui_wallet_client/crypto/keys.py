"""
Sui key pairs.

A key pair is a signature scheme plus a 32-byte secret. Its raw form,
``flag || secret``, is what the credential vault encrypts. Public keys are
computed with ``cryptography``; this module does no curve math of its own.
"""

from __future__ import annotations
from enum import Enum
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..runtime.address import SuiAddress
from ..runtime.errors import InvalidKeyMaterialError

SECRET_LEN = 32


class SignatureScheme(Enum):
    """Key schemes supported by Sui, valued by their serialized name."""

    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"
    SECP256R1 = "Secp256r1"

    @property
    def flag(self) -> int:
        """Scheme flag byte prefixed to public keys and raw key pairs."""
        return _FLAGS[self]

    @classmethod
    def from_flag(cls, flag: int) -> SignatureScheme:
        for scheme, value in _FLAGS.items():
            if value == flag:
                return scheme
        raise InvalidKeyMaterialError(f"Unknown signature scheme flag: {flag}")

    @classmethod
    def parse(cls, name: str) -> SignatureScheme:
        """Case-insensitive lookup by name."""
        for scheme in cls:
            if scheme.value.lower() == name.strip().lower():
                return scheme
        raise ValueError(f"Unknown key scheme: {name}")

    def __str__(self) -> str:
        return self.value


_FLAGS = {
    SignatureScheme.ED25519: 0x00,
    SignatureScheme.SECP256K1: 0x01,
    SignatureScheme.SECP256R1: 0x02,
}

_CURVES = {
    SignatureScheme.SECP256K1: ec.SECP256K1,
    SignatureScheme.SECP256R1: ec.SECP256R1,
}


class SuiKeyPair:
    """
    Private key of one of the supported schemes.

    Exposes the public key, the derived address and the raw byte encoding.
    """

    def __init__(self, scheme: SignatureScheme, secret: bytes):
        """
        Initialize from a 32-byte secret.

        Args:
            scheme: Signature scheme of the key
            secret: Raw 32-byte private key

        Raises:
            InvalidKeyMaterialError: If the secret is not a valid key for the scheme
        """
        if len(secret) != SECRET_LEN:
            raise InvalidKeyMaterialError(
                f"{scheme.value} private key must be {SECRET_LEN} bytes, got {len(secret)}")
        self.scheme = scheme
        self._secret = bytes(secret)
        self._public_key = self._compute_public_key()

    def _compute_public_key(self) -> bytes:
        try:
            if self.scheme is SignatureScheme.ED25519:
                private_key = Ed25519PrivateKey.from_private_bytes(self._secret)
                return private_key.public_key().public_bytes(
                    encoding=serialization.Encoding.Raw,
                    format=serialization.PublicFormat.Raw,
                )
            private_value = int.from_bytes(self._secret, "big")
            private_key = ec.derive_private_key(private_value, _CURVES[self.scheme]())
            return private_key.public_key().public_bytes(
                encoding=serialization.Encoding.X962,
                format=serialization.PublicFormat.CompressedPoint,
            )
        except ValueError as e:
            raise InvalidKeyMaterialError(f"Invalid {self.scheme.value} private key", cause=e)

    @classmethod
    def from_bytes(cls, data: bytes) -> SuiKeyPair:
        """Rebuild a key pair from ``flag || secret``."""
        if len(data) != SECRET_LEN + 1:
            raise InvalidKeyMaterialError(
                f"Key pair encoding must be {SECRET_LEN + 1} bytes, got {len(data)}")
        return cls(SignatureScheme.from_flag(data[0]), data[1:])

    def to_bytes(self) -> bytes:
        """Raw encoding: scheme flag followed by the secret."""
        return bytes([self.scheme.flag]) + self._secret

    def public_key(self) -> bytes:
        return self._public_key

    def address(self) -> SuiAddress:
        return SuiAddress.from_public_key(self.scheme.flag, self._public_key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SuiKeyPair):
            return False
        return self.scheme is other.scheme and self._secret == other._secret

    def __hash__(self) -> int:
        return hash((self.scheme, self._public_key))

    def __repr__(self) -> str:
        return f"SuiKeyPair({self.scheme.value}, address={self.address()})"


__all__ = ["SignatureScheme", "SuiKeyPair", "SECRET_LEN"]
