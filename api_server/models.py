# api_server/models.py
from pydantic import BaseModel, Field
from typing import Literal

# --- Common Base Models ---
class BaseRequest(BaseModel):
    """Base model for API requests, can be extended."""
    pass

class BaseResponse(BaseModel):
    """Base model for API responses, can be extended."""
    pass

# --- Crypto Link Models ---
class CryptoLinkRequest(BaseRequest):
    """Request model for building a Happ crypto link."""
    content: str = Field(
        ...,
        description="Plaintext to encrypt, usually a subscription URL. Its UTF-8 form must fit the key's PKCS#1 v1.5 capacity.",
        examples=["https://subscription.link.com/s/remnawavetop"]
    )
    version: Literal["v2", "v3", "v4"] = Field(
        "v4",
        description="Crypto link version; selects the public key and deep link prefix."
    )

class CryptoLinkResponse(BaseResponse):
    """Response model carrying both the composed link and its parts."""
    version: str = Field(..., examples=["v4"])
    link: str = Field(..., description="Composed deep link: deep_link followed by encrypted_content.")
    deep_link: str = Field(..., examples=["happ://crypt4/"])
    encrypted_content: str = Field(..., description="Base64 encoded RSA ciphertext.")

# Same shape the hosted Happ crypto API accepts and returns
class EncryptUrlRequest(BaseRequest):
    """Request model for the URL-only endpoint (always uses the newest version)."""
    url: str = Field(..., examples=["https://subscription.link.com/s/remnawavetop"])

class EncryptUrlResponse(BaseResponse):
    encrypted_link: str = Field(..., description="Composed happ://crypt4/ deep link.")

# --- Configuration Models ---
class CryptoConfigResponse(BaseResponse):
    """Read-only view of one version's static configuration."""
    version: str = Field(..., examples=["v4"])
    deep_link: str = Field(..., examples=["happ://crypt4/"])
    public_key: str = Field(..., description="PEM-encoded RSA public key.")
    max_plaintext_bytes: int = Field(..., description="Largest UTF-8 payload the key accepts.", examples=[501])

class GeneralErrorResponse(BaseModel): # For documenting error responses in OpenAPI
    """A generic error response model."""
    detail: str = Field(..., description="A human-readable description of the error.")
