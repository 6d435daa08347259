"""
Wallet records and the address-keyed wallet collection.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..crypto.keys import SignatureScheme, SuiKeyPair
from ..runtime.address import SuiAddress
from ..runtime.config import CipherConfig
from ..runtime.errors import MnemonicNotAvailableError
from ..runtime.names import Alias
from .credentials import WalletCredentials
from .indexed import SecondaryIndexedCollection
from .tags import TagSet


class WalletRecord(BaseModel):
    """
    A wallet known to the store.

    The address is the primary key. Watch-only wallets carry no credentials.
    """

    model_config = ConfigDict(frozen=True)

    address: SuiAddress
    alias: Optional[Alias] = None
    tags: TagSet = Field(default_factory=TagSet)
    credentials: Optional[WalletCredentials] = None

    @classmethod
    def with_credentials(cls, address: SuiAddress, key_pair: SuiKeyPair, scheme: SignatureScheme,
                         phrase: str, config: CipherConfig, alias: Optional[Alias] = None,
                         tags: Optional[TagSet] = None) -> WalletRecord:
        """Build a wallet whose key pair and phrase are sealed in a vault."""
        return cls(
            address=address,
            alias=alias,
            tags=tags.copy() if tags is not None else TagSet(),
            credentials=WalletCredentials.create(key_pair, scheme, phrase, config),
        )

    @property
    def has_credentials(self) -> bool:
        return self.credentials is not None

    def contains_alias(self, alias: Alias) -> bool:
        """Substring match against this wallet's alias; False without one."""
        return self.alias is not None and self.alias.contains(alias)

    def export_phrase(self, config: CipherConfig) -> str:
        """
        Decrypt the mnemonic phrase.

        Raises:
            MnemonicNotAvailableError: If the wallet holds no vault
        """
        if self.credentials is None:
            raise MnemonicNotAvailableError(self.address)
        return self.credentials.export_phrase(config)

    def export_key_pair(self, config: CipherConfig) -> SuiKeyPair:
        if self.credentials is None:
            raise MnemonicNotAvailableError(self.address)
        return self.credentials.export_key_pair(config)


class WalletCollection(SecondaryIndexedCollection[SuiAddress, WalletRecord]):
    """Wallets keyed by address, with optional unique aliases."""

    record_type = WalletRecord
    kind = "Wallet"
    key_name = "address"

    def primary_key_of(self, record: WalletRecord) -> SuiAddress:
        return record.address


__all__ = ["WalletRecord", "WalletCollection"]
