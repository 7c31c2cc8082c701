"""
RSA public-key encryption backends for Happ crypto links.

Defines the `RsaPublicEncryptor` interface, the production implementation
backed by the `cryptography` package (PKCS#1 v1.5 padding, RFC 8017 §7.2.1),
and a mock encryptor returning fixed ciphertext for tests.
"""
from abc import ABC, abstractmethod
from functools import lru_cache

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey
from cryptography.hazmat.primitives.serialization import load_pem_public_key

from .errors import CapacityExceededError, EncryptionPrimitiveError, KeyConfigurationError

# 0x00 || 0x02 || at least 8 non-zero random bytes || 0x00
PKCS1_V15_OVERHEAD_BYTES = 11


@lru_cache(maxsize=16)
def load_public_key(public_key_pem: str) -> RSAPublicKey:
    """
    Parses a PEM-encoded RSA public key.

    Parsed keys are cached per PEM string; the configuration table only ever
    holds a handful of keys.

    Raises:
        KeyConfigurationError: If the PEM is missing, malformed, or not an RSA key.
    """
    if not isinstance(public_key_pem, str) or not public_key_pem.strip():
        raise KeyConfigurationError("Public key PEM is empty.")
    try:
        key = load_pem_public_key(public_key_pem.encode("ascii"))
    except (ValueError, TypeError, UnicodeEncodeError, UnsupportedAlgorithm) as e:
        raise KeyConfigurationError(f"Could not load RSA public key: {e}") from e
    if not isinstance(key, RSAPublicKey):
        raise KeyConfigurationError(f"Expected an RSA public key, got {type(key).__name__}.")
    return key


class RsaPublicEncryptor(ABC):
    """
    Abstract interface for RSA public-key encryption with PKCS#1 v1.5 padding.
    """
    @abstractmethod
    def encrypt(self, plaintext: bytes, public_key_pem: str) -> bytes:
        """
        Encrypts plaintext under the given public key.

        Args:
            plaintext: Bytes to encrypt. Must fit the key's PKCS#1 v1.5 capacity.
            public_key_pem: PEM-encoded RSA public key.

        Returns:
            Ciphertext, exactly key_size / 8 bytes long.

        Raises:
            KeyConfigurationError: If the key cannot be loaded.
            CapacityExceededError: If the plaintext is too long for the key.
            EncryptionPrimitiveError: If the primitive fails for any other reason.
        """
        pass


class CryptographyRsaEncryptor(RsaPublicEncryptor):
    """
    Encrypts with the `cryptography` package. Padding bytes come from
    OpenSSL's CSPRNG, so identical inputs produce different ciphertexts.
    """
    def encrypt(self, plaintext: bytes, public_key_pem: str) -> bytes:
        if not isinstance(plaintext, bytes):
            raise TypeError("Plaintext must be bytes.")

        key = load_public_key(public_key_pem)
        max_len = key.key_size // 8 - PKCS1_V15_OVERHEAD_BYTES
        if len(plaintext) > max_len:
            raise CapacityExceededError(len(plaintext), max_len)

        try:
            ciphertext = key.encrypt(plaintext, padding.PKCS1v15())
        except Exception as e:
            raise EncryptionPrimitiveError(f"RSA PKCS#1 v1.5 encryption failed: {e}") from e

        if not ciphertext:
            raise EncryptionPrimitiveError("RSA encryption returned no ciphertext.")
        return ciphertext


class MockRsaEncryptor(RsaPublicEncryptor):
    """
    A mock encryptor for testing purposes.
    Returns the same ciphertext on every call and records what it was asked to encrypt.
    """
    def __init__(self, ciphertext: bytes = b"\xaa" * 512):
        if not isinstance(ciphertext, bytes):
            raise TypeError("ciphertext must be bytes.")
        self.ciphertext = ciphertext
        self.calls = []

    def encrypt(self, plaintext: bytes, public_key_pem: str) -> bytes:
        self.calls.append((plaintext, public_key_pem))
        return self.ciphertext
