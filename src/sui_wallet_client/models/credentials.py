r"""
Encrypted wallet credentials.

The vault of a wallet: the public key and scheme in the clear, the raw key
pair and the mnemonic phrase each sealed by :class:`CredentialCipher`.
Sealed values are stored as ``"v1:" + hex(nonce || ciphertext || tag)``.
Values without the prefix were written under the fixed configured nonce and
are still readable.
"""

from __future__ import annotations
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..crypto.cipher import CredentialCipher
from ..crypto.keys import SignatureScheme, SuiKeyPair
from ..runtime.config import CipherConfig
from ..runtime.errors import CiphertextDecodeError, InvalidKeyMaterialError

logger = logging.getLogger(__name__)

ENVELOPE_PREFIX = "v1:"


def seal(cipher: CredentialCipher, plaintext: bytes) -> str:
    """Encrypt ``plaintext`` into its stored text form."""
    return ENVELOPE_PREFIX + cipher.encrypt(plaintext).hex()


def unseal(cipher: CredentialCipher, stored: str) -> bytes:
    """
    Decrypt a stored value, current or legacy.

    Raises:
        CiphertextDecodeError: If the value is not hex
        CryptoAuthenticationFailedError: On wrong key or tampering
    """
    legacy = not stored.startswith(ENVELOPE_PREFIX)
    text = stored if legacy else stored[len(ENVELOPE_PREFIX):]
    try:
        raw = bytes.fromhex(text)
    except ValueError as e:
        raise CiphertextDecodeError(cause=e) from e
    if legacy:
        return cipher.decrypt_legacy(raw)
    return cipher.decrypt(raw)


class WalletCredentials(BaseModel):
    """
    Credential vault attached to a wallet.

    Never holds plaintext. Every export needs the same key configuration
    that sealed the vault.
    """

    model_config = ConfigDict(frozen=True)

    public_key: bytes
    encrypted_private_key: str
    key_scheme: SignatureScheme
    encrypted_mnemonic: str

    @field_validator("public_key", mode="before")
    @classmethod
    def _parse_public_key(cls, value: Any) -> Any:
        if isinstance(value, str):
            return bytes.fromhex(value)
        return value

    @field_serializer("public_key")
    def _serialize_public_key(self, value: bytes) -> str:
        return value.hex()

    @classmethod
    def create(cls, key_pair: SuiKeyPair, scheme: SignatureScheme, phrase: str,
               config: CipherConfig) -> WalletCredentials:
        """
        Seal a key pair and its mnemonic phrase.

        Args:
            key_pair: Key pair to protect
            scheme: Signature scheme of the key pair
            phrase: Mnemonic phrase the key pair was derived from
            config: Cipher key material

        Returns:
            New credential vault

        Raises:
            KeyMaterialMissingError: If no configuration was supplied
        """
        cipher = CredentialCipher(config)
        return cls(
            public_key=key_pair.public_key(),
            encrypted_private_key=seal(cipher, key_pair.to_bytes()),
            key_scheme=scheme,
            encrypted_mnemonic=seal(cipher, phrase.encode("utf-8")),
        )

    def export_key_pair(self, config: CipherConfig) -> SuiKeyPair:
        """Decrypt the key pair."""
        cipher = CredentialCipher(config)
        key_pair = SuiKeyPair.from_bytes(unseal(cipher, self.encrypted_private_key))
        if key_pair.public_key() != self.public_key:
            raise InvalidKeyMaterialError("Decrypted key pair does not match the stored public key")
        return key_pair

    def export_phrase(self, config: CipherConfig) -> str:
        """Decrypt the mnemonic phrase."""
        cipher = CredentialCipher(config)
        plaintext = unseal(cipher, self.encrypted_mnemonic)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CiphertextDecodeError("Decrypted mnemonic is not valid UTF-8", cause=e) from e

    def __repr__(self) -> str:
        return f"WalletCredentials({self.key_scheme.value}, public_key={self.public_key.hex()})"


__all__ = ["WalletCredentials", "ENVELOPE_PREFIX", "seal", "unseal"]
