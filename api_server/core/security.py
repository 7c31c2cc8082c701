# api_server/core/security.py
from fastapi import Security, HTTPException, status, Depends
from fastapi.security.api_key import APIKeyHeader
import os
import secrets
from typing import Optional

# The server reads its expected key from HAPP_CRYPTO_API_KEY and falls back
# to a development default when the variable is unset.
SERVER_API_KEY_ENV_VAR = "HAPP_CRYPTO_API_KEY"
DEFAULT_DEV_API_KEY = "dev_happ_crypto_api_key"

API_KEY_NAME = "X-API-Key" # Custom header name for clients to send the key

# auto_error=False allows us to give custom messages for missing vs. invalid
api_key_header_auth = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_expected_api_key() -> str:
    """Read on every request so tests and deployments can change it without reimporting."""
    return os.environ.get(SERVER_API_KEY_ENV_VAR, DEFAULT_DEV_API_KEY)


async def get_api_key(api_key_header: Optional[str] = Security(api_key_header_auth)):
    """
    Dependency to validate the API key from the X-API-Key header.
    Compares the provided header against the server's expected key.
    """
    if api_key_header is None: # Header was missing
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated: X-API-Key header missing.",
        )
    if secrets.compare_digest(api_key_header.encode("utf-8"), get_expected_api_key().encode("utf-8")):
        return api_key_header
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key.",
    )

async def verify_api_key(api_key: str = Depends(get_api_key)):
    """Route-level guard; get_api_key raises before this runs if auth fails."""
    return True
