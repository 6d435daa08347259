from .factories import (
    TEST_KEY_HEX, TEST_NONCE_HEX, MNEMONIC_12, MNEMONIC_24,
    mk_address, mk_tags, mk_wallet, mk_rpc_server, mk_store,
)

__all__ = [
    "TEST_KEY_HEX",
    "TEST_NONCE_HEX",
    "MNEMONIC_12",
    "MNEMONIC_24",
    "mk_address",
    "mk_tags",
    "mk_wallet",
    "mk_rpc_server",
    "mk_store",
]
