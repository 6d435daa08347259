r"""
Wallet operations.

Each call runs one load, mutate, store cycle against the repository. Cipher
key material is resolved through the config loader on each call that needs
it and is not kept afterwards.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional

from ..crypto.key_derive import WordLength, derive_key_pair_from_mnemonic, generate_new_key
from ..crypto.keys import SignatureScheme, SuiKeyPair
from ..models.selectors import AliasOrAddress
from ..models.tags import TagSet
from ..models.wallet import WalletRecord
from ..runtime.address import SuiAddress
from ..runtime.config import CipherConfig
from ..runtime.errors import ImportAddressMismatchError
from ..runtime.names import Alias
from ..storage.repository import StoreRepository

logger = logging.getLogger(__name__)

ConfigLoader = Callable[[], CipherConfig]


class WalletService:
    """Create, import, edit, list and export wallets."""

    def __init__(self, repository: StoreRepository, config_loader: Optional[ConfigLoader] = None):
        """
        Initialize the service.

        Args:
            repository: Store persistence
            config_loader: Resolves cipher key material (defaults to the environment)
        """
        self.repository = repository
        self.config_loader = config_loader or CipherConfig.from_env

    def create(self, alias: Optional[Alias] = None,
               key_scheme: SignatureScheme = SignatureScheme.ED25519,
               word_length: WordLength = WordLength.WORD24,
               tags: Optional[TagSet] = None) -> WalletRecord:
        """
        Generate a new wallet and store it with its sealed credentials.

        Returns:
            The stored wallet record

        Raises:
            TagNotFoundError: If ``tags`` holds an unknown tag
            AliasAlreadyExistsError: If another wallet owns ``alias``
            KeyMaterialMissingError: If no cipher key is configured
        """
        store = self.repository.load()
        address, key_pair, scheme, phrase = generate_new_key(key_scheme, word_length)
        record = WalletRecord.with_credentials(
            address, key_pair, scheme, phrase, self.config_loader(),
            alias=alias, tags=tags or TagSet(),
        )
        store.add_wallet(record)
        self.repository.store(store)
        logger.debug(f"Created {scheme.value} wallet {address}")
        return record

    def import_mnemonic(self, phrase: str, key_scheme: SignatureScheme,
                        address: Optional[SuiAddress] = None, alias: Optional[Alias] = None,
                        tags: Optional[TagSet] = None) -> WalletRecord:
        """
        Import a wallet from its mnemonic phrase.

        Args:
            phrase: BIP-39 mnemonic phrase
            key_scheme: Scheme to derive the key for
            address: Expected address; checked against the derived one when given
            alias: Optional alias
            tags: Optional tags, all of which must be known

        Raises:
            MnemonicError: If the phrase is invalid
            ImportAddressMismatchError: If ``address`` differs from the derived address
        """
        store = self.repository.load()
        derived, key_pair = derive_key_pair_from_mnemonic(phrase, key_scheme)
        if address is not None and address != derived:
            raise ImportAddressMismatchError(address, derived)

        record = WalletRecord.with_credentials(
            derived, key_pair, key_scheme, " ".join(phrase.split()), self.config_loader(),
            alias=alias, tags=tags or TagSet(),
        )
        store.add_wallet(record)
        self.repository.store(store)
        logger.debug(f"Imported {key_scheme.value} wallet {derived}")
        return record

    def import_address(self, address: SuiAddress, alias: Optional[Alias] = None,
                       tags: Optional[TagSet] = None) -> WalletRecord:
        """Track a watch-only wallet that has no credentials."""
        store = self.repository.load()
        record = WalletRecord(address=address, alias=alias, tags=tags or TagSet())
        store.add_wallet(record)
        self.repository.store(store)
        logger.debug(f"Imported watch-only wallet {address}")
        return record

    def edit(self, target: AliasOrAddress, alias: Optional[Alias] = None,
             tags: Optional[TagSet] = None) -> WalletRecord:
        """Change the alias and/or replace the tags of a wallet."""
        store = self.repository.load()
        record = store.resolve_wallet(target)
        updated = store.edit_wallet(record.address, alias=alias, tags=tags)
        self.repository.store(store)
        return updated

    def list(self, alias: Optional[Alias] = None, tags: Optional[TagSet] = None) -> List[WalletRecord]:
        """
        Wallets ordered by address.

        Args:
            alias: Keep wallets whose alias contains this substring
            tags: Keep wallets carrying all of these tags
        """
        store = self.repository.load()
        predicate = None
        if tags is not None:
            predicate = lambda record: record.tags.contains_all(tags)
        return store.wallets.filter(alias=alias, predicate=predicate)

    def export_phrase(self, target: AliasOrAddress) -> str:
        """
        Decrypt a wallet's mnemonic phrase.

        Raises:
            AliasNotFoundError: If no wallet has the alias
            KeyNotFoundError: If no wallet has the address
            MnemonicNotAvailableError: If the wallet is watch-only
        """
        record = self.repository.load().resolve_wallet(target)
        return record.export_phrase(self.config_loader())

    def export_key_pair(self, target: AliasOrAddress) -> SuiKeyPair:
        record = self.repository.load().resolve_wallet(target)
        return record.export_key_pair(self.config_loader())


__all__ = ["WalletService"]
