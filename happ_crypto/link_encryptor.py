"""
Builds Happ crypto deep links.

The content (usually a subscription URL) is encrypted with the version's RSA
public key using PKCS#1 v1.5 padding, base64-encoded, and appended to the
version's deep link prefix:

    happ://crypt4/<base64 ciphertext>

Every failure (unknown version, content too long for the key, bad key
material, primitive failure) is collapsed into a single None result.
`encrypt_to_parts_or_raise` is the opt-in variant that raises instead.
"""
import base64
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .crypto_configs import CRYPTO_CONFIGS, DEFAULT_VERSION, CryptoConfig, get_crypto_config
from .errors import EncryptionPrimitiveError
from .rsa_encryptor import CryptographyRsaEncryptor, RsaPublicEncryptor


class HappCryptoResult(BaseModel):
    """Deep link prefix and base64 ciphertext of one encryption."""
    model_config = ConfigDict(frozen=True)

    deep_link: str = Field(..., description="Deep link prefix, e.g. 'happ://crypt4/'.")
    encrypted_content: str = Field(..., description="Base64 encoded RSA ciphertext.")

    @property
    def link(self) -> str:
        """The composed deep link: prefix followed directly by the ciphertext."""
        return self.deep_link + self.encrypted_content


class HappLinkEncryptor:
    """
    Encrypts content into Happ crypto links.

    Holds a read-only version table and an RSA backend; neither changes after
    construction, so one instance can be shared across threads.
    """
    def __init__(self,
                 configs: Optional[Mapping[str, CryptoConfig]] = None,
                 encryptor: Optional[RsaPublicEncryptor] = None):
        """
        Args:
            configs: Version table. Defaults to the embedded CRYPTO_CONFIGS.
            encryptor: RSA backend. Defaults to CryptographyRsaEncryptor.
        """
        self.configs = CRYPTO_CONFIGS if configs is None else configs
        self.encryptor = encryptor if encryptor is not None else CryptographyRsaEncryptor()

    def encrypt_to_parts_or_raise(self, content: str,
                                  version: str = DEFAULT_VERSION) -> HappCryptoResult:
        """
        Encrypts content and returns the prefix and ciphertext separately.

        Raises:
            InvalidVersionError: If version is not supported.
            CapacityExceededError: If the UTF-8 content is too long for the key.
            KeyConfigurationError: If the version's key cannot be loaded.
            EncryptionPrimitiveError: If the RSA primitive fails or returns nothing.
        """
        config = get_crypto_config(version, self.configs)
        if not isinstance(content, str):
            raise TypeError("Content must be a string.")

        ciphertext = self.encryptor.encrypt(content.encode("utf-8"), config.public_key)
        if not ciphertext:
            raise EncryptionPrimitiveError("RSA encryption returned no ciphertext.")

        return HappCryptoResult(
            deep_link=config.deep_link,
            encrypted_content=base64.b64encode(ciphertext).decode("ascii"),
        )

    def encrypt_to_parts(self, content: str,
                         version: str = DEFAULT_VERSION) -> Optional[HappCryptoResult]:
        """Encrypts content; returns the prefix/ciphertext pair, or None on any failure."""
        try:
            return self.encrypt_to_parts_or_raise(content, version)
        except Exception:
            return None

    def encrypt_to_composed_link(self, content: str,
                                 version: str = DEFAULT_VERSION) -> Optional[str]:
        """Encrypts content; returns 'happ://cryptN/<base64>', or None on any failure."""
        result = self.encrypt_to_parts(content, version)
        return result.link if result is not None else None

    def create_happ_crypto_link(self, content: str, version: str = DEFAULT_VERSION,
                                as_link: bool = False):
        """
        Flag form of the two named operations.

        Returns the composed link string when as_link is True, otherwise the
        HappCryptoResult pair. Returns None on any failure.
        """
        if as_link:
            return self.encrypt_to_composed_link(content, version)
        return self.encrypt_to_parts(content, version)


default_link_encryptor = HappLinkEncryptor()


def encrypt_to_parts(content: str, version: str = DEFAULT_VERSION) -> Optional[HappCryptoResult]:
    return default_link_encryptor.encrypt_to_parts(content, version)


def encrypt_to_composed_link(content: str, version: str = DEFAULT_VERSION) -> Optional[str]:
    return default_link_encryptor.encrypt_to_composed_link(content, version)


def encrypt_to_parts_or_raise(content: str, version: str = DEFAULT_VERSION) -> HappCryptoResult:
    return default_link_encryptor.encrypt_to_parts_or_raise(content, version)


def create_happ_crypto_link(content: str, version: str = DEFAULT_VERSION, as_link: bool = False):
    return default_link_encryptor.create_happ_crypto_link(content, version, as_link)
