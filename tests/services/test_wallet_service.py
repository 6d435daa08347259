"""
Test wallet service operations against a repository.
"""

import pytest

from sui_wallet_client.crypto.key_derive import WordLength, derive_key_pair_from_mnemonic
from sui_wallet_client.crypto.keys import SignatureScheme
from sui_wallet_client.models.tags import TagSet
from sui_wallet_client.runtime.errors import (
    AliasAlreadyExistsError,
    AliasNotFoundError,
    ImportAddressMismatchError,
    KeyMaterialMissingError,
    KeyNotFoundError,
    MnemonicError,
    MnemonicNotAvailableError,
    PrimaryKeyAlreadyExistsError,
    TagNotFoundError,
)
from sui_wallet_client.runtime.names import Alias
from sui_wallet_client.services import TagService, WalletService

from helpers import MNEMONIC_12, mk_address, mk_tags


@pytest.fixture
def service(memory_repository, config_loader):
    return WalletService(memory_repository, config_loader)


class TestCreate:
    def test_create_and_export(self, service, memory_repository):
        record = service.create(alias=Alias("alice"), word_length=WordLength.WORD12)
        stored = memory_repository.load().wallets.get_by_alias(Alias("alice"))
        assert stored.address == record.address
        phrase = service.export_phrase(Alias("alice"))
        assert len(phrase.split()) == 12
        assert derive_key_pair_from_mnemonic(phrase, SignatureScheme.ED25519)[0] == record.address

    @pytest.mark.parametrize("scheme", list(SignatureScheme))
    def test_export_key_pair_matches_address(self, service, scheme):
        record = service.create(key_scheme=scheme, word_length=WordLength.WORD12)
        key_pair = service.export_key_pair(record.address)
        assert key_pair.scheme is scheme
        assert key_pair.address() == record.address

    def test_unknown_tags_rejected_and_nothing_stored(self, service, memory_repository):
        with pytest.raises(TagNotFoundError):
            service.create(alias=Alias("alice"), tags=mk_tags("dev"))
        assert memory_repository.document is None

    def test_duplicate_alias(self, service):
        service.create(alias=Alias("alice"), word_length=WordLength.WORD12)
        with pytest.raises(AliasAlreadyExistsError):
            service.create(alias=Alias("alice"), word_length=WordLength.WORD12)

    def test_config_resolved_from_environment_by_default(self, memory_repository, cipher_env):
        service = WalletService(memory_repository)
        record = service.create(word_length=WordLength.WORD12)
        assert service.export_key_pair(record.address).address() == record.address

    def test_missing_key_material(self, memory_repository):
        with pytest.raises(KeyMaterialMissingError):
            WalletService(memory_repository).create()
        assert memory_repository.document is None

    def test_config_is_resolved_per_call(self, memory_repository, cipher_config):
        calls = []

        def loader():
            calls.append(1)
            return cipher_config

        service = WalletService(memory_repository, loader)
        record = service.create(word_length=WordLength.WORD12)
        service.export_phrase(record.address)
        service.export_phrase(record.address)
        assert len(calls) == 3


class TestImport:
    def test_import_mnemonic_persists(self, service, memory_repository):
        record = service.import_mnemonic(MNEMONIC_12, SignatureScheme.ED25519, alias=Alias("restored"))
        stored = memory_repository.load().wallets.get_by_alias(Alias("restored"))
        assert stored.address == record.address
        assert service.export_phrase(Alias("restored")) == MNEMONIC_12

    def test_import_with_matching_address(self, service):
        expected, _ = derive_key_pair_from_mnemonic(MNEMONIC_12, SignatureScheme.SECP256K1)
        record = service.import_mnemonic(MNEMONIC_12, SignatureScheme.SECP256K1, address=expected)
        assert record.address == expected

    def test_import_address_mismatch(self, service, memory_repository):
        with pytest.raises(ImportAddressMismatchError):
            service.import_mnemonic(MNEMONIC_12, SignatureScheme.ED25519, address=mk_address(1))
        assert memory_repository.document is None

    def test_import_invalid_mnemonic(self, service):
        with pytest.raises(MnemonicError):
            service.import_mnemonic("not a phrase", SignatureScheme.ED25519)

    def test_import_twice(self, service):
        service.import_mnemonic(MNEMONIC_12, SignatureScheme.ED25519)
        with pytest.raises(PrimaryKeyAlreadyExistsError):
            service.import_mnemonic(MNEMONIC_12, SignatureScheme.ED25519)

    def test_watch_only_import_has_no_mnemonic(self, service):
        service.import_address(mk_address(1), alias=Alias("watch"))
        with pytest.raises(MnemonicNotAvailableError):
            service.export_phrase(Alias("watch"))
        with pytest.raises(MnemonicNotAvailableError):
            service.export_key_pair(mk_address(1))


class TestEditAndList:
    @pytest.fixture
    def populated(self, service, memory_repository):
        TagService(memory_repository).add(mk_tags("dev,ops"))
        service.import_address(mk_address(1), alias=Alias("alice"), tags=mk_tags("dev"))
        service.import_address(mk_address(2), alias=Alias("alice_old"), tags=mk_tags("dev,ops"))
        service.import_address(mk_address(3), alias=Alias("bob"))
        return service

    def test_edit_by_alias(self, populated):
        populated.edit(Alias("alice"), alias=Alias("carol"), tags=mk_tags("ops"))
        [record] = populated.list(alias=Alias("carol"))
        assert record.address == mk_address(1)
        assert record.tags.names() == ["ops"]

    def test_edit_by_address(self, populated):
        populated.edit(mk_address(3), tags=mk_tags("dev"))
        assert [r.address for r in populated.list(tags=mk_tags("dev"))] == sorted(
            [mk_address(1), mk_address(2), mk_address(3)])

    def test_edit_missing_targets(self, populated):
        with pytest.raises(AliasNotFoundError):
            populated.edit(Alias("ghost"), alias=Alias("x"))
        with pytest.raises(KeyNotFoundError):
            populated.edit(mk_address(99), alias=Alias("x"))

    def test_edit_unknown_tag(self, populated):
        with pytest.raises(TagNotFoundError):
            populated.edit(Alias("bob"), tags=mk_tags("qa"))

    def test_list_sorted_by_address(self, populated):
        addresses = [r.address for r in populated.list()]
        assert addresses == sorted(addresses)
        assert len(addresses) == 3

    def test_list_alias_substring_and_tags(self, populated):
        assert {str(r.alias) for r in populated.list(alias=Alias("alice"))} == {"alice", "alice_old"}
        assert [r.address for r in populated.list(tags=mk_tags("dev,ops"))] == [mk_address(2)]
        assert populated.list(alias=Alias("bob"), tags=mk_tags("dev")) == []

    def test_list_with_empty_tag_filter_matches_all(self, populated):
        assert len(populated.list(tags=TagSet())) == 3
