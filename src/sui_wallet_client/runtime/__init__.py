"""Runtime value types, configuration and errors for the wallet client."""

from .errors import *
from .names import Alias, Tag
from .address import SuiAddress
from .url import RpcUrl
from .config import CipherConfig, default_store_path
