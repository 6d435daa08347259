"""
Test SuiAddress and RpcUrl parsing and normalisation.
"""

import hashlib

import pytest

from sui_wallet_client.runtime.address import SuiAddress
from sui_wallet_client.runtime.errors import InvalidAddressError, InvalidURLError
from sui_wallet_client.runtime.url import RpcUrl

HEX = "ab" * 32


class TestSuiAddress:
    def test_parse_prefixed_and_bare(self):
        assert SuiAddress("0x" + HEX) == SuiAddress(HEX)
        assert str(SuiAddress(HEX)) == "0x" + HEX

    def test_normalises_to_lowercase(self):
        assert str(SuiAddress("0x" + HEX.upper())) == "0x" + HEX

    def test_from_bytes(self):
        raw = bytes(range(32))
        address = SuiAddress(raw)
        assert address.to_bytes() == raw
        assert address.to_hex() == "0x" + raw.hex()

    @pytest.mark.parametrize("text", ["", "0x", "0x1234", "zz" * 32, "0x" + "ab" * 33])
    def test_invalid(self, text):
        with pytest.raises(InvalidAddressError):
            SuiAddress(text)

    def test_wrong_byte_length(self):
        with pytest.raises(InvalidAddressError):
            SuiAddress(b"\x00" * 31)

    def test_from_public_key_is_blake2b_of_flag_and_key(self):
        public_key = bytes(32)
        expected = hashlib.blake2b(b"\x00" + public_key, digest_size=32).digest()
        assert SuiAddress.from_public_key(0, public_key).to_bytes() == expected
        assert SuiAddress.from_public_key(1, public_key) != SuiAddress.from_public_key(0, public_key)

    def test_ordering_and_hash(self):
        low, high = SuiAddress(b"\x00" * 32), SuiAddress(b"\xff" * 32)
        assert sorted([high, low]) == [low, high]
        assert len({low, SuiAddress(b"\x00" * 32)}) == 1

    def test_not_equal_to_strings(self):
        address = SuiAddress(HEX)
        assert address != "0x" + HEX
        assert "0x" + HEX not in {address: 1}
        assert SuiAddress("0x" + HEX) in {address: 1}


class TestRpcUrl:
    @pytest.mark.parametrize("url", [
        "https://fullnode.mainnet.sui.io:443",
        "http://127.0.0.1:9000",
        "http://localhost:9000/rpc",
    ])
    def test_valid(self, url):
        assert str(RpcUrl(url)) == url

    @pytest.mark.parametrize("url", ["not_a_url", "", "localhost:9000", "http://", "http://host:port", "http://a b"])
    def test_invalid(self, url):
        with pytest.raises(InvalidURLError):
            RpcUrl(url)

    def test_parts(self):
        url = RpcUrl("https://fullnode.testnet.sui.io:443")
        assert url.scheme == "https"
        assert url.host == "fullnode.testnet.sui.io"

    def test_equality_and_ordering(self):
        a, b = RpcUrl("http://a.example"), RpcUrl("http://b.example")
        assert a == "http://a.example"
        assert sorted([b, a]) == [a, b]
        assert hash(a) == hash(RpcUrl("http://a.example"))
