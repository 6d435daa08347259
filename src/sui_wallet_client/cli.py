"""
Command line interface for the Sui wallet store.

Usage:
    sui-wallet create --alias main --tags dev
    sui-wallet list --json
    sui-wallet rpc add https://fullnode.testnet.sui.io:443 --alias testnet --env testnet
    sui-wallet new-cipher
"""

from __future__ import annotations
import argparse
import getpass
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .crypto.key_derive import WordLength
from .crypto.keys import SignatureScheme
from .models.network_env import NetworkEnv
from .models.rpc_server import RpcServerRecord
from .models.selectors import parse_alias_or_address, parse_alias_or_url
from .models.tags import TagSet
from .models.wallet import WalletRecord
from .runtime.address import SuiAddress
from .runtime.errors import WalletClientError
from .runtime.names import Alias
from .runtime.url import RpcUrl
from .services import CipherService, RpcService, TagService, WalletService
from .storage.repository import FileStoreRepository, StoreRepository

logger = logging.getLogger(__name__)

_ADD_ENVS = ["mainnet", "testnet", "devnet", "local"]
_LIST_ENVS = _ADD_ENVS + ["all"]


def _value(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    """Adapt a validating constructor to an argparse ``type``."""
    def convert(text: str) -> Any:
        try:
            return parse(text)
        except WalletClientError as e:
            raise argparse.ArgumentTypeError(e.message) from e
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    convert.__name__ = getattr(parse, "__name__", "value")
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sui-wallet", description="Local Sui wallet manager")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--store", help="Path of the store document")
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a new wallet")
    create.add_argument("-a", "--alias", type=_value(Alias))
    create.add_argument("-k", "--key-scheme", type=_value(SignatureScheme.parse),
                        default=SignatureScheme.ED25519)
    create.add_argument("-w", "--word-length", type=_value(WordLength.parse),
                        default=WordLength.WORD24)
    create.add_argument("-t", "--tags", type=_value(TagSet.parse))

    imp = commands.add_parser("import", help="Import a wallet from a mnemonic or an address")
    source = imp.add_mutually_exclusive_group(required=True)
    source.add_argument("-m", "--mnemonic", action="store_true", help="Prompt for a mnemonic phrase")
    source.add_argument("--address", type=_value(SuiAddress), help="Watch-only address")
    imp.add_argument("--expect-address", type=_value(SuiAddress),
                     help="Address the mnemonic must derive to")
    imp.add_argument("-a", "--alias", type=_value(Alias))
    imp.add_argument("-k", "--key-scheme", type=_value(SignatureScheme.parse),
                     default=SignatureScheme.ED25519)
    imp.add_argument("-t", "--tags", type=_value(TagSet.parse))

    edit = commands.add_parser("edit", help="Edit a wallet's alias or tags")
    edit.add_argument("target", type=_value(parse_alias_or_address), help="Alias or address")
    edit.add_argument("-a", "--alias", type=_value(Alias))
    edit.add_argument("-t", "--tags", type=_value(TagSet.parse))

    lst = commands.add_parser("list", help="List wallets")
    lst.add_argument("-a", "--alias", type=_value(Alias))
    lst.add_argument("-t", "--tags", type=_value(TagSet.parse))
    lst.add_argument("-j", "--json", action="store_true")

    export = commands.add_parser("export", help="Export a wallet's mnemonic phrase")
    export.add_argument("target", type=_value(parse_alias_or_address), help="Alias or address")

    tag = commands.add_parser("tag", help="Manage tags")
    tag_commands = tag.add_subparsers(dest="tag_command", required=True)
    tag_add = tag_commands.add_parser("add", help="Add tags")
    tag_add.add_argument("tags", type=_value(TagSet.parse))
    tag_remove = tag_commands.add_parser("remove", help="Remove tags from the store and all wallets")
    tag_remove.add_argument("tags", type=_value(TagSet.parse))
    tag_list = tag_commands.add_parser("list", help="List tags")
    tag_list.add_argument("-j", "--json", action="store_true")

    rpc = commands.add_parser("rpc", help="Manage RPC servers")
    rpc_commands = rpc.add_subparsers(dest="rpc_command", required=True)
    rpc_add = rpc_commands.add_parser("add", help="Add an RPC server")
    rpc_add.add_argument("url", type=_value(RpcUrl))
    rpc_add.add_argument("-a", "--alias", type=_value(Alias), required=True)
    rpc_add.add_argument("-e", "--env", choices=_ADD_ENVS)
    rpc_remove = rpc_commands.add_parser("remove", help="Remove an RPC server")
    rpc_remove.add_argument("target", type=_value(parse_alias_or_url), help="Alias or URL")
    rpc_list = rpc_commands.add_parser("list", help="List RPC servers")
    rpc_list.add_argument("-a", "--alias", type=_value(Alias))
    rpc_list.add_argument("-e", "--env", choices=_LIST_ENVS, default="all")
    rpc_list.add_argument("-j", "--json", action="store_true")

    commands.add_parser("new-cipher", help="Generate a new cipher key and nonce")
    return parser


# =============================================================================
# Rendering
# =============================================================================

def _wallet_row(record: WalletRecord) -> Dict[str, str]:
    return {
        "address": str(record.address),
        "alias": str(record.alias) if record.alias is not None else "",
        "tags": record.tags.join(", "),
    }


def _rpc_row(record: RpcServerRecord) -> Dict[str, str]:
    return {"url": str(record.url), "alias": str(record.alias), "env": str(record.env)}


def _render(rows: List[Dict[str, str]], columns: Sequence[str], as_json: bool) -> str:
    if as_json:
        return json.dumps(rows, indent=2)
    widths = {c: max([len(c)] + [len(row[c]) for row in rows]) for c in columns}
    lines = ["  ".join(c.capitalize().ljust(widths[c]) for c in columns)]
    for row in rows:
        lines.append("  ".join(row[c].ljust(widths[c]) for c in columns))
    return "\n".join(line.rstrip() for line in lines)


# =============================================================================
# Dispatch
# =============================================================================

def run(args: argparse.Namespace, repository: StoreRepository) -> str:
    """Execute a parsed command and return its output."""
    if args.command == "create":
        record = WalletService(repository).create(
            alias=args.alias, key_scheme=args.key_scheme,
            word_length=args.word_length, tags=args.tags,
        )
        return (f"Wallet created successfully\n"
                f"Alias: {record.alias or ''}\n"
                f"Address: {record.address}")

    if args.command == "import":
        service = WalletService(repository)
        if args.mnemonic:
            phrase = getpass.getpass("Enter mnemonic phrase: ")
            record = service.import_mnemonic(
                phrase, args.key_scheme, address=args.expect_address,
                alias=args.alias, tags=args.tags,
            )
        else:
            record = service.import_address(args.address, alias=args.alias, tags=args.tags)
        return f"Wallet imported successfully\nAddress: {record.address}"

    if args.command == "edit":
        WalletService(repository).edit(args.target, alias=args.alias, tags=args.tags)
        return "Wallet edited successfully"

    if args.command == "list":
        records = WalletService(repository).list(alias=args.alias, tags=args.tags)
        return _render([_wallet_row(r) for r in records], ("address", "alias", "tags"), args.json)

    if args.command == "export":
        return WalletService(repository).export_phrase(args.target)

    if args.command == "tag":
        service = TagService(repository)
        if args.tag_command == "add":
            service.add(args.tags)
            return "Tags added successfully"
        if args.tag_command == "remove":
            service.remove(args.tags)
            return "Tags removed successfully"
        names = [str(tag) for tag in service.list()]
        if args.json:
            return json.dumps(names, indent=2)
        return "\n".join(["Tag"] + names)

    if args.command == "rpc":
        service = RpcService(repository)
        if args.rpc_command == "add":
            env = NetworkEnv.parse(args.env) if args.env else NetworkEnv.NONE
            service.add(args.url, args.alias, env)
            return "RPC server added successfully"
        if args.rpc_command == "remove":
            service.remove(args.target)
            return "RPC server removed successfully"
        env = None if args.env == "all" else NetworkEnv.parse(args.env)
        records = service.list(alias=args.alias, env=env)
        return _render([_rpc_row(r) for r in records], ("url", "alias", "env"), args.json)

    if args.command == "new-cipher":
        config = CipherService().create()
        return (f"CIPHER_KEY={config.key_hex}\n"
                f"CIPHER_NONCE={config.nonce_hex}")

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    repository = FileStoreRepository(args.store)
    try:
        output = run(args, repository)
    except WalletClientError as e:
        print(e.message, file=sys.stderr)
        logger.debug(f"Command failed: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
