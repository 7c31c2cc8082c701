"""
Exceptions raised while building Happ crypto links.

The default link operations catch every one of these and return None instead.
Only the opt-in raising variant (`encrypt_to_parts_or_raise`) lets them reach
the caller.
"""


class HappCryptoError(Exception):
    """Base exception for crypto link failures."""
    pass


class InvalidVersionError(HappCryptoError, ValueError):
    """Raised when a version tag is not one of the supported versions."""

    def __init__(self, version):
        super().__init__(f"Unsupported Happ crypto version: {version!r}")
        self.version = version


class CapacityExceededError(HappCryptoError, ValueError):
    """Raised when the plaintext is longer than PKCS#1 v1.5 allows for the key."""

    def __init__(self, plaintext_len: int, max_len: int):
        super().__init__(
            f"Plaintext is {plaintext_len} bytes; the key accepts at most {max_len} bytes."
        )
        self.plaintext_len = plaintext_len
        self.max_len = max_len


class KeyConfigurationError(HappCryptoError):
    """Raised when embedded or configured key material cannot be loaded."""
    pass


class EncryptionPrimitiveError(HappCryptoError, RuntimeError):
    """Raised when the RSA primitive fails or returns no ciphertext."""
    pass
