"""
Command-level operations over a store repository.
"""

from .wallet_service import WalletService
from .tag_service import TagService
from .rpc_service import RpcService
from .cipher_service import CipherService

__all__ = ["WalletService", "TagService", "RpcService", "CipherService"]
