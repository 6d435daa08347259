"""
Network environment of an RPC endpoint.
"""

from __future__ import annotations
import functools
from enum import Enum

from ..runtime.errors import InvalidNetworkEnvError


@functools.total_ordering
class NetworkEnv(Enum):
    """Ordered Mainnet < Testnet < Devnet < Local < None."""

    MAINNET = "Mainnet"
    TESTNET = "Testnet"
    DEVNET = "Devnet"
    LOCAL = "Local"
    NONE = "None"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def parse(cls, text: str) -> NetworkEnv:
        """Case-insensitive; ``none`` and ``-`` both mean no environment."""
        key = text.strip().lower()
        if key == "-":
            return cls.NONE
        for env in cls:
            if env.value.lower() == key:
                return env
        raise InvalidNetworkEnvError(text)

    def __lt__(self, other):
        if not isinstance(other, NetworkEnv):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        if self is NetworkEnv.NONE:
            return "-"
        return self.value.lower()


_ORDER = [NetworkEnv.MAINNET, NetworkEnv.TESTNET, NetworkEnv.DEVNET, NetworkEnv.LOCAL, NetworkEnv.NONE]
