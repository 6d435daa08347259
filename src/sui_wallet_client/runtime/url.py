"""
RpcUrl Pydantic custom type for RPC endpoint URLs.
"""

from typing import Any
from urllib.parse import urlsplit

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import InvalidURLError


class RpcUrl:
    """Custom Pydantic type for absolute RPC endpoint URLs."""

    __slots__ = ("url",)

    def __init__(self, url: str):
        if not isinstance(url, str):
            raise InvalidURLError("RpcUrl must be a string")

        try:
            parts = urlsplit(url)
            # Accessing the port validates it
            parts.port
        except ValueError as e:
            raise InvalidURLError(f"Invalid URL: {url}", {"url": url}, e)

        if not parts.scheme or not parts.netloc or not parts.hostname:
            raise InvalidURLError(f"Invalid URL: {url}", {"url": url})
        if any(c.isspace() for c in url):
            raise InvalidURLError(f"Invalid URL: {url}", {"url": url})

        self.url = url

    @classmethod
    def parse(cls, url: str) -> "RpcUrl":
        return cls(url)

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"RpcUrl('{self.url}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RpcUrl):
            return self.url == other.url
        elif isinstance(other, str):
            return self.url == other
        return False

    def __lt__(self, other: "RpcUrl") -> bool:
        return self.url < str(other)

    def __hash__(self) -> int:
        return hash(self.url)

    @property
    def scheme(self) -> str:
        """Get the scheme portion of the URL."""
        return urlsplit(self.url).scheme

    @property
    def host(self) -> str:
        """Get the host portion of the URL."""
        return urlsplit(self.url).hostname or ""

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates the RpcUrl."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any, _info=None) -> "RpcUrl":
        """Validate and convert the input to an RpcUrl."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except InvalidURLError as e:
                raise ValueError(e.message) from e
        raise ValueError(f"Invalid RpcUrl: {value}")
