"""
Cipher key material generation.
"""

from ..runtime.config import CipherConfig


class CipherService:
    """Produces fresh key material for ``CIPHER_KEY`` and ``CIPHER_NONCE``."""

    def create(self) -> CipherConfig:
        return CipherConfig.generate()


__all__ = ["CipherService"]
