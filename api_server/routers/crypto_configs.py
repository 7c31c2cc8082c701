# api_server/routers/crypto_configs.py
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from happ_crypto.crypto_configs import CRYPTO_CONFIGS, SUPPORTED_VERSIONS, CryptoConfig, max_plaintext_bytes
from happ_crypto.errors import KeyConfigurationError

from ..core.security import verify_api_key
from ..models import CryptoConfigResponse, GeneralErrorResponse


router = APIRouter(
    prefix="/crypto-configs",
    tags=["Crypto Configuration"],
    dependencies=[Depends(verify_api_key)]
)

def _to_response(config: CryptoConfig) -> CryptoConfigResponse:
    try:
        capacity = max_plaintext_bytes(config)
    except KeyConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Key for {config.version} is unusable: {e}")
    return CryptoConfigResponse(
        version=config.version,
        deep_link=config.deep_link,
        public_key=config.public_key,
        max_plaintext_bytes=capacity,
    )

@router.get(
    "",
    response_model=List[CryptoConfigResponse],
    summary="List the public key and deep link prefix of every supported version."
)
async def api_list_crypto_configs():
    return [_to_response(CRYPTO_CONFIGS[version]) for version in SUPPORTED_VERSIONS]

@router.get(
    "/{version}",
    response_model=CryptoConfigResponse,
    summary="Get the public key and deep link prefix of one version.",
    responses={
        404: {"model": GeneralErrorResponse, "description": "Unsupported version"},
        500: {"model": GeneralErrorResponse, "description": "Configured key material is unusable"}
    }
)
async def api_get_crypto_config(version: str):
    config = CRYPTO_CONFIGS.get(version)
    if config is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unsupported version '{version}'. Expected one of: {', '.join(SUPPORTED_VERSIONS)}.")
    return _to_response(config)
