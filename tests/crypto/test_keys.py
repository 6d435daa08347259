"""
Test Sui key pairs across the supported signature schemes.
"""

import hashlib

import pytest

from sui_wallet_client.crypto.keys import SignatureScheme, SuiKeyPair
from sui_wallet_client.runtime.errors import InvalidKeyMaterialError

SECRET = bytes(range(1, 33))


class TestSignatureScheme:
    def test_flags(self):
        assert SignatureScheme.ED25519.flag == 0
        assert SignatureScheme.SECP256K1.flag == 1
        assert SignatureScheme.SECP256R1.flag == 2

    @pytest.mark.parametrize("flag", [0, 1, 2])
    def test_from_flag_round_trip(self, flag):
        assert SignatureScheme.from_flag(flag).flag == flag

    def test_unknown_flag(self):
        with pytest.raises(InvalidKeyMaterialError):
            SignatureScheme.from_flag(9)

    @pytest.mark.parametrize("name, scheme", [
        ("ed25519", SignatureScheme.ED25519),
        ("SECP256K1", SignatureScheme.SECP256K1),
        ("secp256r1", SignatureScheme.SECP256R1),
    ])
    def test_parse(self, name, scheme):
        assert SignatureScheme.parse(name) is scheme

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            SignatureScheme.parse("rsa")


class TestSuiKeyPair:
    @pytest.mark.parametrize("scheme, public_len", [
        (SignatureScheme.ED25519, 32),
        (SignatureScheme.SECP256K1, 33),
        (SignatureScheme.SECP256R1, 33),
    ])
    def test_public_key_lengths(self, scheme, public_len):
        assert len(SuiKeyPair(scheme, SECRET).public_key()) == public_len

    @pytest.mark.parametrize("scheme", list(SignatureScheme))
    def test_bytes_round_trip(self, scheme):
        key_pair = SuiKeyPair(scheme, SECRET)
        raw = key_pair.to_bytes()
        assert raw[0] == scheme.flag
        assert raw[1:] == SECRET
        assert SuiKeyPair.from_bytes(raw) == key_pair

    def test_address_derivation(self):
        key_pair = SuiKeyPair(SignatureScheme.ED25519, SECRET)
        expected = hashlib.blake2b(b"\x00" + key_pair.public_key(), digest_size=32).digest()
        assert key_pair.address().to_bytes() == expected

    def test_same_secret_different_schemes_differ(self):
        addresses = {SuiKeyPair(scheme, SECRET).address() for scheme in SignatureScheme}
        assert len(addresses) == 3

    def test_wrong_secret_length(self):
        with pytest.raises(InvalidKeyMaterialError):
            SuiKeyPair(SignatureScheme.ED25519, b"\x01" * 31)

    def test_zero_secret_invalid_on_curve(self):
        with pytest.raises(InvalidKeyMaterialError):
            SuiKeyPair(SignatureScheme.SECP256K1, b"\x00" * 32)

    def test_from_bytes_wrong_length(self):
        with pytest.raises(InvalidKeyMaterialError):
            SuiKeyPair.from_bytes(b"\x00" * 32)

    def test_repr_hides_secret(self):
        assert SECRET.hex() not in repr(SuiKeyPair(SignatureScheme.ED25519, SECRET))
