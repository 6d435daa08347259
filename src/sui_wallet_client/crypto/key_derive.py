"""
Mnemonic-based key generation and derivation.

BIP-39 phrases, seeds and SLIP-10/BIP-32 derivation are delegated to
``bip_utils``. Keys are derived at the standard Sui paths for each scheme.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Tuple

from bip_utils import (
    Bip39MnemonicGenerator,
    Bip39MnemonicValidator,
    Bip39SeedGenerator,
    Bip39WordsNum,
    Bip32Slip10Ed25519,
    Bip32Slip10Nist256p1,
    Bip32Slip10Secp256k1,
)

from ..runtime.address import SuiAddress
from ..runtime.errors import KeyGenerationError, MnemonicError, WalletClientError
from .keys import SignatureScheme, SuiKeyPair

logger = logging.getLogger(__name__)


class WordLength(Enum):
    """Supported mnemonic lengths."""

    WORD12 = 12
    WORD15 = 15
    WORD18 = 18
    WORD21 = 21
    WORD24 = 24

    @classmethod
    def parse(cls, value) -> WordLength:
        """Accept ``24``, ``"24"`` or ``"word24"``."""
        text = str(value).strip().lower()
        if text.startswith("word"):
            text = text[4:]
        try:
            return cls(int(text))
        except ValueError:
            raise ValueError(f"Unsupported mnemonic length: {value}") from None


_WORDS_NUM = {
    WordLength.WORD12: Bip39WordsNum.WORDS_NUM_12,
    WordLength.WORD15: Bip39WordsNum.WORDS_NUM_15,
    WordLength.WORD18: Bip39WordsNum.WORDS_NUM_18,
    WordLength.WORD21: Bip39WordsNum.WORDS_NUM_21,
    WordLength.WORD24: Bip39WordsNum.WORDS_NUM_24,
}

DERIVATION_PATHS = {
    SignatureScheme.ED25519: "m/44'/784'/0'/0'/0'",
    SignatureScheme.SECP256K1: "m/54'/784'/0'/0/0",
    SignatureScheme.SECP256R1: "m/74'/784'/0'/0/0",
}

_BIP32_CLASSES = {
    SignatureScheme.ED25519: Bip32Slip10Ed25519,
    SignatureScheme.SECP256K1: Bip32Slip10Secp256k1,
    SignatureScheme.SECP256R1: Bip32Slip10Nist256p1,
}


def derive_key_pair_from_mnemonic(phrase: str, scheme: SignatureScheme) -> Tuple[SuiAddress, SuiKeyPair]:
    """
    Derive the key pair a phrase controls under ``scheme``.

    Args:
        phrase: BIP-39 mnemonic phrase
        scheme: Signature scheme to derive for

    Returns:
        Tuple of (address, key pair)

    Raises:
        MnemonicError: If the phrase fails BIP-39 validation
        KeyGenerationError: If derivation fails
    """
    phrase = " ".join(phrase.split())
    if not Bip39MnemonicValidator().IsValid(phrase):
        raise MnemonicError()

    try:
        seed = Bip39SeedGenerator(phrase).Generate()
        node = _BIP32_CLASSES[scheme].FromSeedAndPath(seed, DERIVATION_PATHS[scheme])
        secret = node.PrivateKey().Raw().ToBytes()
        key_pair = SuiKeyPair(scheme, secret)
    except WalletClientError:
        raise
    except Exception as e:
        raise KeyGenerationError(str(e), cause=e) from e

    address = key_pair.address()
    logger.debug(f"Derived {scheme.value} key for {address}")
    return address, key_pair


def generate_new_key(
    scheme: SignatureScheme,
    word_length: WordLength = WordLength.WORD24,
) -> Tuple[SuiAddress, SuiKeyPair, SignatureScheme, str]:
    """
    Generate a fresh mnemonic and derive its key pair.

    Returns:
        Tuple of (address, key pair, scheme, mnemonic phrase)
    """
    try:
        phrase = str(Bip39MnemonicGenerator().FromWordsNumber(_WORDS_NUM[word_length]))
    except Exception as e:
        raise KeyGenerationError(str(e), cause=e) from e

    address, key_pair = derive_key_pair_from_mnemonic(phrase, scheme)
    return address, key_pair, scheme, phrase


__all__ = [
    "WordLength",
    "DERIVATION_PATHS",
    "derive_key_pair_from_mnemonic",
    "generate_new_key",
]
