"""
Process configuration for the wallet client.

Cipher key material is sourced from the environment and handed to the cipher
as an explicit value; it is never written next to the ciphertext it protects.
"""

from __future__ import annotations
import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import KeyMaterialMissingError, InvalidKeyMaterialError

CIPHER_KEY_ENV = "CIPHER_KEY"
CIPHER_NONCE_ENV = "CIPHER_NONCE"
STORE_PATH_ENV = "SUI_WALLET_STORE_PATH"

KEY_LEN = 32
NONCE_LEN = 12

APP_NAME = "sui_wallet_cli"
CONFIG_FILE = "wallets.json"


def _decode_hex(name: str, value: str, length: int) -> bytes:
    try:
        raw = bytes.fromhex(value)
    except ValueError as e:
        raise InvalidKeyMaterialError(f"{name} is not valid hex", {"variable": name}, e)
    if len(raw) != length:
        raise InvalidKeyMaterialError(
            f"{name} must be exactly {length} bytes, got {len(raw)}",
            {"variable": name, "expected": length, "actual": len(raw)},
        )
    return raw


@dataclass(frozen=True)
class CipherConfig:
    """
    Key material for the credential cipher.

    Attributes:
        key: 32-byte ChaCha20-Poly1305 key
        nonce: 12-byte nonce used only to open legacy fixed-nonce ciphertexts
    """

    key: bytes
    nonce: bytes

    def __post_init__(self):
        if not isinstance(self.key, bytes) or len(self.key) != KEY_LEN:
            raise InvalidKeyMaterialError(f"Cipher key must be exactly {KEY_LEN} bytes")
        if not isinstance(self.nonce, bytes) or len(self.nonce) != NONCE_LEN:
            raise InvalidKeyMaterialError(f"Cipher nonce must be exactly {NONCE_LEN} bytes")

    @classmethod
    def from_hex(cls, key_hex: str, nonce_hex: str) -> CipherConfig:
        return cls(
            key=_decode_hex(CIPHER_KEY_ENV, key_hex, KEY_LEN),
            nonce=_decode_hex(CIPHER_NONCE_ENV, nonce_hex, NONCE_LEN),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CipherConfig:
        """
        Resolve key material from the environment.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated cipher configuration

        Raises:
            KeyMaterialMissingError: If either variable is unset or empty
            InvalidKeyMaterialError: If either value is malformed
        """
        env = os.environ if environ is None else environ
        key_hex = env.get(CIPHER_KEY_ENV, "").strip()
        nonce_hex = env.get(CIPHER_NONCE_ENV, "").strip()

        missing = [name for name, value in ((CIPHER_KEY_ENV, key_hex), (CIPHER_NONCE_ENV, nonce_hex))
                   if not value]
        if missing:
            raise KeyMaterialMissingError(details={"missing": missing})

        return cls.from_hex(key_hex, nonce_hex)

    @classmethod
    def generate(cls) -> CipherConfig:
        """Create fresh random key material."""
        return cls(key=secrets.token_bytes(KEY_LEN), nonce=secrets.token_bytes(NONCE_LEN))

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    @property
    def nonce_hex(self) -> str:
        return self.nonce.hex()

    def __str__(self) -> str:
        return f"{self.key_hex}\n{self.nonce_hex}"

    def __repr__(self) -> str:
        return "CipherConfig(key=<redacted>, nonce=<redacted>)"


def default_store_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Location of the persisted store document."""
    env = os.environ if environ is None else environ
    override = env.get(STORE_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / APP_NAME / CONFIG_FILE


__all__ = [
    "CipherConfig",
    "default_store_path",
    "CIPHER_KEY_ENV",
    "CIPHER_NONCE_ENV",
    "STORE_PATH_ENV",
    "KEY_LEN",
    "NONCE_LEN",
]
