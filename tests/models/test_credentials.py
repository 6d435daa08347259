"""
Test the wallet credential vault.

Covers sealing and exporting the key pair and mnemonic, the stored envelope
format, legacy values, and failures under the wrong key or corrupt data.
"""

import pytest
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from sui_wallet_client.crypto.key_derive import derive_key_pair_from_mnemonic
from sui_wallet_client.crypto.keys import SignatureScheme
from sui_wallet_client.models.credentials import ENVELOPE_PREFIX, WalletCredentials
from sui_wallet_client.runtime.errors import (
    CiphertextDecodeError,
    CryptoAuthenticationFailedError,
    InvalidKeyMaterialError,
)

from helpers import MNEMONIC_12


@pytest.fixture
def key_pair():
    _, key_pair = derive_key_pair_from_mnemonic(MNEMONIC_12, SignatureScheme.ED25519)
    return key_pair


@pytest.fixture
def vault(key_pair, cipher_config):
    return WalletCredentials.create(key_pair, SignatureScheme.ED25519, MNEMONIC_12, cipher_config)


class TestCreateAndExport:
    def test_export_phrase(self, vault, cipher_config):
        assert vault.export_phrase(cipher_config) == MNEMONIC_12

    def test_export_key_pair(self, vault, key_pair, cipher_config):
        assert vault.export_key_pair(cipher_config) == key_pair

    def test_public_fields_in_clear(self, vault, key_pair):
        assert vault.public_key == key_pair.public_key()
        assert vault.key_scheme is SignatureScheme.ED25519

    def test_no_plaintext_stored(self, vault, key_pair):
        dumped = vault.model_dump_json()
        assert "abandon" not in dumped
        assert key_pair.to_bytes().hex() not in dumped

    def test_values_use_versioned_envelope(self, vault):
        assert vault.encrypted_private_key.startswith(ENVELOPE_PREFIX)
        assert vault.encrypted_mnemonic.startswith(ENVELOPE_PREFIX)
        assert vault.encrypted_private_key != vault.encrypted_mnemonic


class TestFailures:
    def test_wrong_key(self, vault, other_cipher_config):
        with pytest.raises(CryptoAuthenticationFailedError):
            vault.export_phrase(other_cipher_config)
        with pytest.raises(CryptoAuthenticationFailedError):
            vault.export_key_pair(other_cipher_config)

    def test_non_hex_ciphertext(self, vault, cipher_config):
        broken = vault.model_copy(update={"encrypted_mnemonic": ENVELOPE_PREFIX + "not-hex"})
        with pytest.raises(CiphertextDecodeError):
            broken.export_phrase(cipher_config)

    def test_tampered_ciphertext(self, vault, cipher_config):
        value = vault.encrypted_mnemonic
        flipped = value[:-1] + ("0" if value[-1] != "0" else "1")
        broken = vault.model_copy(update={"encrypted_mnemonic": flipped})
        with pytest.raises(CryptoAuthenticationFailedError):
            broken.export_phrase(cipher_config)

    def test_key_pair_must_match_public_key(self, vault, cipher_config):
        broken = vault.model_copy(update={"public_key": b"\x00" * 32})
        with pytest.raises(InvalidKeyMaterialError):
            broken.export_key_pair(cipher_config)


def test_legacy_values_still_open(key_pair, cipher_config):
    aead = ChaCha20Poly1305(cipher_config.key)
    legacy = WalletCredentials(
        public_key=key_pair.public_key(),
        encrypted_private_key=aead.encrypt(cipher_config.nonce, key_pair.to_bytes(), None).hex(),
        key_scheme=SignatureScheme.ED25519,
        encrypted_mnemonic=aead.encrypt(cipher_config.nonce, MNEMONIC_12.encode(), None).hex(),
    )
    assert legacy.export_phrase(cipher_config) == MNEMONIC_12
    assert legacy.export_key_pair(cipher_config) == key_pair


def test_serialisation_round_trip(vault):
    document = vault.model_dump(mode="json")
    assert document["public_key"] == vault.public_key.hex()
    assert document["key_scheme"] == "ED25519"
    assert WalletCredentials.model_validate(document) == vault
