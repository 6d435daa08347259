r"""
Authenticated symmetric encryption for wallet credentials.

ChaCha20-Poly1305 under a 256-bit key. Every encryption draws a fresh 96-bit
nonce and returns ``nonce || ciphertext || tag``. Ciphertexts written by
older versions were sealed under the single configured nonce; those are
opened with :meth:`CredentialCipher.decrypt_legacy`.
"""

from __future__ import annotations
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..runtime.config import CipherConfig, NONCE_LEN
from ..runtime.errors import CryptoAuthenticationFailedError, KeyMaterialMissingError

TAG_LEN = 16


class CredentialCipher:
    """
    AEAD cipher bound to one key configuration.

    Build one per operation from a freshly resolved :class:`CipherConfig`;
    do not keep instances around longer than the command that needs them.
    """

    def __init__(self, config: CipherConfig):
        """
        Initialize the cipher.

        Args:
            config: Validated key material

        Raises:
            KeyMaterialMissingError: If no configuration was supplied
        """
        if config is None:
            raise KeyMaterialMissingError()
        self._aead = ChaCha20Poly1305(config.key)
        self._legacy_nonce = config.nonce

    def encrypt(self, plaintext: bytes) -> bytes:
        """Seal ``plaintext`` under a fresh random nonce."""
        nonce = os.urandom(NONCE_LEN)
        return nonce + self._aead.encrypt(nonce, bytes(plaintext), None)

    def decrypt(self, envelope: bytes) -> bytes:
        """
        Open an envelope produced by :meth:`encrypt`.

        Raises:
            CryptoAuthenticationFailedError: On wrong key, tampering or truncation
        """
        if len(envelope) < NONCE_LEN + TAG_LEN:
            raise CryptoAuthenticationFailedError("Ciphertext is truncated")
        nonce, ciphertext = envelope[:NONCE_LEN], envelope[NONCE_LEN:]
        return self._open(nonce, ciphertext)

    def decrypt_legacy(self, ciphertext: bytes) -> bytes:
        """Open a ciphertext sealed under the configured fixed nonce."""
        if len(ciphertext) < TAG_LEN:
            raise CryptoAuthenticationFailedError("Ciphertext is truncated")
        return self._open(self._legacy_nonce, ciphertext)

    def _open(self, nonce: bytes, ciphertext: bytes) -> bytes:
        try:
            return self._aead.decrypt(nonce, bytes(ciphertext), None)
        except InvalidTag as e:
            raise CryptoAuthenticationFailedError(cause=e) from e

    def __repr__(self) -> str:
        return "CredentialCipher(ChaCha20Poly1305)"


__all__ = ["CredentialCipher", "TAG_LEN"]
