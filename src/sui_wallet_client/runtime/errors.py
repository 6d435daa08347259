"""
Sui Wallet Client Error Model

This module provides the error handling framework for the wallet store. Every
failure path of the store, the credential vault and the persistence layer is
reported as a distinct, inspectable error kind.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Iterable
from enum import IntEnum


class ErrorCode(IntEnum):
    """Wallet client error codes, grouped by category."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Validation errors (100-199)
    NAME_TOO_LONG = 100
    NAME_INVALID_CHARACTERS = 101
    INVALID_URL = 102
    INVALID_ADDRESS = 103
    INVALID_ALIAS_OR_ADDRESS = 104
    INVALID_ALIAS_OR_URL = 105
    INVALID_NETWORK_ENV = 106
    INVALID_MNEMONIC = 107

    # Conflict errors (200-299)
    PRIMARY_KEY_ALREADY_EXISTS = 200
    ALIAS_ALREADY_EXISTS = 201
    IMPORT_ADDRESS_MISMATCH = 202

    # Not found errors (300-399)
    KEY_NOT_FOUND = 300
    ALIAS_NOT_FOUND = 301
    MNEMONIC_NOT_AVAILABLE = 302

    # Cross-invariant errors (400-499)
    TAG_NOT_FOUND = 400

    # Cryptographic errors (500-599)
    KEY_MATERIAL_MISSING = 500
    INVALID_KEY_MATERIAL = 501
    CRYPTO_AUTHENTICATION_FAILED = 502
    CIPHERTEXT_DECODE_ERROR = 503
    KEY_GENERATION_FAILED = 504

    # Persistence errors (600-699)
    STORAGE_ERROR = 600
    DESERIALIZATION_ERROR = 601


class WalletClientError(Exception):
    """
    Base class for all wallet client errors.

    Carries a machine readable code next to the human readable message.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a wallet client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


# =============================================================================
# Validation
# =============================================================================

class ValidationError(WalletClientError):
    """Malformed user input (names, URLs, addresses, phrases)."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class NameTooLongError(ValidationError):
    """Alias or tag exceeds its length bound."""

    def __init__(self, max_length: int, value: str = ""):
        super().__init__(
            f"Name must be {max_length} characters or less",
            ErrorCode.NAME_TOO_LONG,
            {"maxLength": max_length, "value": value},
        )
        self.max_length = max_length


class NameInvalidCharactersError(ValidationError):
    """Alias or tag contains a character outside its allowed set."""

    def __init__(self, allowed: str, value: str = ""):
        super().__init__(
            f"Name must only contain {allowed}",
            ErrorCode.NAME_INVALID_CHARACTERS,
            {"allowed": allowed, "value": value},
        )
        self.allowed = allowed


class InvalidURLError(ValidationError):
    """Invalid RPC URL."""

    def __init__(self, message: str = "Invalid URL",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_URL, details, cause)


class InvalidAddressError(ValidationError):
    """Invalid chain address."""

    def __init__(self, message: str = "Invalid address",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS, details, cause)


class InvalidAliasOrAddressError(ValidationError):
    """Input is neither an address nor a valid alias."""

    def __init__(self, value: str):
        super().__init__(f"Invalid Alias or Address: {value}", ErrorCode.INVALID_ALIAS_OR_ADDRESS,
                         {"value": value})


class InvalidAliasOrUrlError(ValidationError):
    """Input is neither a URL nor a valid alias."""

    def __init__(self, value: str):
        super().__init__(f"Invalid Alias or URL: {value}", ErrorCode.INVALID_ALIAS_OR_URL,
                         {"value": value})


class InvalidNetworkEnvError(ValidationError):
    """Unknown network environment name."""

    def __init__(self, value: str):
        super().__init__(f"Unknown network env: {value}", ErrorCode.INVALID_NETWORK_ENV,
                         {"value": value})


class MnemonicError(ValidationError):
    """Mnemonic phrase failed BIP-39 validation."""

    def __init__(self, message: str = "Invalid mnemonic phrase", cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_MNEMONIC, None, cause)


# =============================================================================
# Conflicts
# =============================================================================

class ConflictError(WalletClientError):
    """A record collides with an existing one."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class PrimaryKeyAlreadyExistsError(ConflictError):
    """Primary key (address or URL) is already present."""

    def __init__(self, key: Any, kind: str = "Record", key_name: str = "key"):
        super().__init__(f"{kind} with {key_name} {key} already exists",
                         ErrorCode.PRIMARY_KEY_ALREADY_EXISTS, {"key": str(key)})
        self.key = key


class AliasAlreadyExistsError(ConflictError):
    """Alias is already claimed by a different record."""

    def __init__(self, alias: Any, kind: str = "Record"):
        super().__init__(f"{kind} with alias {alias} already exists",
                         ErrorCode.ALIAS_ALREADY_EXISTS, {"alias": str(alias)})
        self.alias = alias


class ImportAddressMismatchError(ConflictError):
    """Address given on import differs from the one derived from the phrase."""

    def __init__(self, expected: Any = None, derived: Any = None):
        super().__init__("Import address mismatch with private key from mnemonic",
                         ErrorCode.IMPORT_ADDRESS_MISMATCH,
                         {"expected": str(expected), "derived": str(derived)})


# =============================================================================
# Not found
# =============================================================================

class NotFoundError(WalletClientError):
    """A requested record or secret is absent."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class KeyNotFoundError(NotFoundError):
    """No record under the given primary key."""

    def __init__(self, key: Any, kind: str = "Record", key_name: str = "key"):
        super().__init__(f"{kind} with {key_name} {key} not found",
                         ErrorCode.KEY_NOT_FOUND, {"key": str(key)})
        self.key = key


class AliasNotFoundError(NotFoundError):
    """No record claims the given alias."""

    def __init__(self, alias: Any, kind: str = "Record"):
        super().__init__(f"{kind} with alias {alias} not found",
                         ErrorCode.ALIAS_NOT_FOUND, {"alias": str(alias)})
        self.alias = alias


class MnemonicNotAvailableError(NotFoundError):
    """Wallet holds no credential vault (watch-only import)."""

    def __init__(self, address: Any):
        super().__init__(f"No mnemonic available for wallet {address}",
                         ErrorCode.MNEMONIC_NOT_AVAILABLE, {"address": str(address)})
        self.address = address


# =============================================================================
# Cross-invariant
# =============================================================================

class InvariantError(WalletClientError):
    """A store-wide invariant would be violated."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class TagNotFoundError(InvariantError):
    """Wallet references tags that are not among the known tags."""

    def __init__(self, missing: Iterable[Any] = ()):
        names = sorted(str(tag) for tag in missing)
        message = "Tag not found"
        if names:
            message = f"Tag not found: {', '.join(names)}"
        super().__init__(message, ErrorCode.TAG_NOT_FOUND, {"missing": names})
        self.missing = names


# =============================================================================
# Cryptography
# =============================================================================

class CryptoError(WalletClientError):
    """Key material and AEAD failures."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class KeyMaterialMissingError(CryptoError):
    """Cipher key or nonce could not be resolved from configuration."""

    def __init__(self, message: str = "Cipher key and nonce not found",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.KEY_MATERIAL_MISSING, details)


class InvalidKeyMaterialError(CryptoError):
    """Cipher key or nonce is not valid hex of the required length."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_KEY_MATERIAL, details, cause)


class CryptoAuthenticationFailedError(CryptoError):
    """Ciphertext was not produced under this key, or was tampered with."""

    def __init__(self, message: str = "Ciphertext authentication failed",
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CRYPTO_AUTHENTICATION_FAILED, None, cause)


class CiphertextDecodeError(CryptoError):
    """Stored ciphertext is not valid hex."""

    def __init__(self, message: str = "Stored ciphertext is not valid hex",
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CIPHERTEXT_DECODE_ERROR, None, cause)


class KeyGenerationError(CryptoError):
    """Key pair generation or derivation failed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"Failed to generate new keypair: {message}",
                         ErrorCode.KEY_GENERATION_FAILED, None, cause)


# =============================================================================
# Persistence
# =============================================================================

class StorageError(WalletClientError):
    """Reading or writing the persisted store failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DeserializationError(StorageError):
    """Persisted document is corrupt or violates a store invariant."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.DESERIALIZATION_ERROR, details, cause)


__all__ = [
    "ErrorCode",
    "WalletClientError",
    "ValidationError",
    "NameTooLongError",
    "NameInvalidCharactersError",
    "InvalidURLError",
    "InvalidAddressError",
    "InvalidAliasOrAddressError",
    "InvalidAliasOrUrlError",
    "InvalidNetworkEnvError",
    "MnemonicError",
    "ConflictError",
    "PrimaryKeyAlreadyExistsError",
    "AliasAlreadyExistsError",
    "ImportAddressMismatchError",
    "NotFoundError",
    "KeyNotFoundError",
    "AliasNotFoundError",
    "MnemonicNotAvailableError",
    "InvariantError",
    "TagNotFoundError",
    "CryptoError",
    "KeyMaterialMissingError",
    "InvalidKeyMaterialError",
    "CryptoAuthenticationFailedError",
    "CiphertextDecodeError",
    "KeyGenerationError",
    "StorageError",
    "DeserializationError",
]
