"""
Cryptographic building blocks for the wallet client.

Provides the credential cipher, Sui key pairs and mnemonic key derivation.
"""

from .cipher import CredentialCipher
from .keys import SignatureScheme, SuiKeyPair
from .key_derive import WordLength, derive_key_pair_from_mnemonic, generate_new_key

__all__ = [
    "CredentialCipher",
    "SignatureScheme",
    "SuiKeyPair",
    "WordLength",
    "derive_key_pair_from_mnemonic",
    "generate_new_key",
]
