"""
Parsing of user-supplied record selectors.

A selector is either a primary key or an alias. Primary-key parsing is tried
first; aliases can never look like an address or an absolute URL.
"""

from __future__ import annotations
from typing import Union

from ..runtime.address import SuiAddress
from ..runtime.errors import (
    InvalidAddressError,
    InvalidAliasOrAddressError,
    InvalidAliasOrUrlError,
    InvalidURLError,
    ValidationError,
)
from ..runtime.names import Alias
from ..runtime.url import RpcUrl

AliasOrAddress = Union[SuiAddress, Alias]
AliasOrUrl = Union[RpcUrl, Alias]


def parse_alias_or_address(text: str) -> AliasOrAddress:
    """
    Parse a wallet selector.

    Raises:
        InvalidAliasOrAddressError: If ``text`` is neither an address nor a valid alias
    """
    try:
        return SuiAddress(text)
    except InvalidAddressError:
        pass
    try:
        return Alias(text)
    except ValidationError as e:
        raise InvalidAliasOrAddressError(text) from e


def parse_alias_or_url(text: str) -> AliasOrUrl:
    """
    Parse an RPC server selector.

    Raises:
        InvalidAliasOrUrlError: If ``text`` is neither a URL nor a valid alias
    """
    try:
        return RpcUrl(text)
    except InvalidURLError:
        pass
    try:
        return Alias(text)
    except ValidationError as e:
        raise InvalidAliasOrUrlError(text) from e


__all__ = ["AliasOrAddress", "AliasOrUrl", "parse_alias_or_address", "parse_alias_or_url"]
