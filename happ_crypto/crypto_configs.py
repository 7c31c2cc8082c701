"""
Static Happ crypto configuration: one public key and one deep link prefix per version.

The table is built once at import time and exposed as a read-only mapping.
Embedded keys can be replaced at process start by pointing
HAPP_CRYPTO_V<N>_PUBLIC_KEY_FILE (e.g. HAPP_CRYPTO_V4_PUBLIC_KEY_FILE) at a
PEM file; nothing changes the table after that. An override file that cannot
be read leaves that version with empty key material, so its links fail with
None (or KeyConfigurationError from the raising variant) while the other
versions keep working.
"""
import os
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidVersionError
from .public_keys import (
    HAPP_CRYPTO_V2_PUBLIC_KEY,
    HAPP_CRYPTO_V3_PUBLIC_KEY,
    HAPP_CRYPTO_V4_PUBLIC_KEY,
)
from .rsa_encryptor import PKCS1_V15_OVERHEAD_BYTES, load_public_key

HappCryptoVersion = Literal["v2", "v3", "v4"]

SUPPORTED_VERSIONS: Tuple[str, ...] = ("v2", "v3", "v4")
DEFAULT_VERSION: HappCryptoVersion = "v4"  # newest

PUBLIC_KEY_FILE_ENV_TEMPLATE = "HAPP_CRYPTO_{version}_PUBLIC_KEY_FILE"


class CryptoConfig(BaseModel):
    """Public key and deep link prefix for a single crypto link version."""
    model_config = ConfigDict(frozen=True)

    version: HappCryptoVersion = Field(..., description="Version tag, e.g. 'v4'.")
    public_key: str = Field(..., description="PEM-encoded RSA public key.")
    deep_link: str = Field(..., description="Deep link prefix, e.g. 'happ://crypt4/'.")


def _read_public_key(version: str, embedded_pem: str) -> str:
    """
    Returns the PEM override from the environment if one is set, else the embedded key.

    An unreadable override yields an empty string, which load_public_key rejects.
    """
    env_var = PUBLIC_KEY_FILE_ENV_TEMPLATE.format(version=version.upper())
    key_path = os.environ.get(env_var)
    if not key_path:
        return embedded_pem
    try:
        with open(key_path, "r", encoding="utf-8") as key_file:
            return key_file.read()
    except (OSError, UnicodeDecodeError):
        return ""


def _build_config(version: str, embedded_pem: str) -> CryptoConfig:
    return CryptoConfig(
        version=version,
        public_key=_read_public_key(version, embedded_pem),
        deep_link=f"happ://crypt{version[1:]}/",
    )


HAPP_CRYPTO_V2 = _build_config("v2", HAPP_CRYPTO_V2_PUBLIC_KEY)
HAPP_CRYPTO_V3 = _build_config("v3", HAPP_CRYPTO_V3_PUBLIC_KEY)
HAPP_CRYPTO_V4 = _build_config("v4", HAPP_CRYPTO_V4_PUBLIC_KEY)

CRYPTO_CONFIGS: Mapping[str, CryptoConfig] = MappingProxyType({
    "v2": HAPP_CRYPTO_V2,
    "v3": HAPP_CRYPTO_V3,
    "v4": HAPP_CRYPTO_V4,
})


def get_crypto_config(version: str,
                      configs: Optional[Mapping[str, CryptoConfig]] = None) -> CryptoConfig:
    """
    Resolves a version tag to its CryptoConfig.

    Args:
        version: Version tag ('v2', 'v3' or 'v4').
        configs: Table to resolve against. Defaults to CRYPTO_CONFIGS.

    Raises:
        InvalidVersionError: If the tag is not in the table.
    """
    table = CRYPTO_CONFIGS if configs is None else configs
    # Unhashable tags (lists, dicts) are just as unknown as misspelled ones.
    if not isinstance(version, str) or version not in table:
        raise InvalidVersionError(version)
    return table[version]


def max_plaintext_bytes(config: CryptoConfig) -> int:
    """
    Largest UTF-8 payload, in bytes, the config's key accepts under PKCS#1 v1.5.

    Raises:
        KeyConfigurationError: If the config's key cannot be loaded.
    """
    key = load_public_key(config.public_key)
    return key.key_size // 8 - PKCS1_V15_OVERHEAD_BYTES
