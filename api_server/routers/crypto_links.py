# api_server/routers/crypto_links.py
from fastapi import APIRouter, Depends, HTTPException
import logging

from happ_crypto.link_encryptor import default_link_encryptor

from ..models import (
    CryptoLinkRequest, CryptoLinkResponse,
    EncryptUrlRequest, EncryptUrlResponse,
    GeneralErrorResponse
)
from ..core.security import verify_api_key

logger = logging.getLogger(__name__)

# The core never says why encryption failed, so neither does the API.
ENCRYPTION_FAILED_DETAIL = "Encryption failed."

router = APIRouter(
    tags=["Crypto Links"],
    dependencies=[Depends(verify_api_key)]
)

FAILURE_RESPONSES = {
    401: {"model": GeneralErrorResponse, "description": "Missing or invalid X-API-Key"},
    422: {"model": GeneralErrorResponse, "description": "Invalid request, or content could not be encrypted (e.g. too long for the key)"},
}


@router.post(
    "/crypto-link",
    response_model=CryptoLinkResponse,
    summary="Build a Happ crypto link",
    description="Encrypts `content` with the version's RSA public key (PKCS#1 v1.5) and returns the base64 ciphertext together with the composed happ://cryptN/ link.",
    responses=FAILURE_RESPONSES
)
async def api_create_crypto_link(request_data: CryptoLinkRequest):
    result = default_link_encryptor.encrypt_to_parts(request_data.content, request_data.version)
    if result is None:
        logger.warning("Crypto link encryption failed for version %s (%d content bytes)",
                       request_data.version, len(request_data.content.encode("utf-8")))
        raise HTTPException(status_code=422, detail=ENCRYPTION_FAILED_DETAIL)
    return CryptoLinkResponse(
        version=request_data.version,
        link=result.link,
        deep_link=result.deep_link,
        encrypted_content=result.encrypted_content,
    )


@router.post(
    "/encrypt",
    response_model=EncryptUrlResponse,
    summary="Encrypt a subscription URL",
    description="Takes `{\"url\": ...}` and returns `{\"encrypted_link\": ...}` built with the newest crypto version.",
    responses=FAILURE_RESPONSES
)
async def api_encrypt_url(request_data: EncryptUrlRequest):
    link = default_link_encryptor.encrypt_to_composed_link(request_data.url)
    if link is None:
        logger.warning("Subscription URL encryption failed (%d bytes)", len(request_data.url.encode("utf-8")))
        raise HTTPException(status_code=422, detail=ENCRYPTION_FAILED_DETAIL)
    return EncryptUrlResponse(encrypted_link=link)
