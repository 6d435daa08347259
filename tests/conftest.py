"""
Test bootstrap:
- Deterministic cipher key material, injected or exported to the environment
- In-memory and temporary-file store repositories
- Keep the real store location and .env out of every test
"""
import pytest

from sui_wallet_client.runtime.config import CipherConfig, CIPHER_KEY_ENV, CIPHER_NONCE_ENV, STORE_PATH_ENV
from sui_wallet_client.storage.repository import FileStoreRepository, MemoryStoreRepository

from helpers import TEST_KEY_HEX, TEST_NONCE_HEX


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """No test reads real key material or writes to the home directory."""
    monkeypatch.delenv(CIPHER_KEY_ENV, raising=False)
    monkeypatch.delenv(CIPHER_NONCE_ENV, raising=False)
    monkeypatch.setenv(STORE_PATH_ENV, str(tmp_path / "default" / "wallets.json"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cipher_config():
    """Fixed key material for reproducible tests."""
    return CipherConfig.from_hex(TEST_KEY_HEX, TEST_NONCE_HEX)


@pytest.fixture
def other_cipher_config():
    """Key material unrelated to ``cipher_config``."""
    return CipherConfig(key=bytes(range(32, 64)), nonce=bytes(range(12, 24)))


@pytest.fixture
def cipher_env(monkeypatch):
    """Export the fixed key material the way a user's shell would."""
    monkeypatch.setenv(CIPHER_KEY_ENV, TEST_KEY_HEX)
    monkeypatch.setenv(CIPHER_NONCE_ENV, TEST_NONCE_HEX)


@pytest.fixture
def memory_repository():
    return MemoryStoreRepository()


@pytest.fixture
def file_repository(tmp_path):
    return FileStoreRepository(tmp_path / "store" / "wallets.json")


@pytest.fixture
def config_loader(cipher_config):
    return lambda: cipher_config
