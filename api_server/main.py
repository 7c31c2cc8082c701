# api_server/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from happ_crypto.crypto_configs import CRYPTO_CONFIGS, SUPPORTED_VERSIONS, max_plaintext_bytes

from .routers import crypto_configs, crypto_links

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    # Startup: parse every configured key once so bad key material shows up in
    # the logs at boot instead of as anonymous 422s later.
    for version in SUPPORTED_VERSIONS:
        config = CRYPTO_CONFIGS[version]
        try:
            logger.info("Crypto link %s ready: prefix=%s, capacity=%d bytes",
                        version, config.deep_link, max_plaintext_bytes(config))
        except Exception as e:
            logger.error("Crypto link %s has unusable key material: %s", version, e)
    yield

# --- Initialize FastAPI app ---
app = FastAPI(
    title="Happ Crypto Link API",
    description="API for building Happ crypto deep links (happ://cryptN/) by RSA-encrypting subscription URLs.",
    version="0.1.0",
    lifespan=lifespan
)

# --- CORS Middleware Configuration ---
origins = [
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],    # Includes X-API-Key
)

app.include_router(crypto_links.router, prefix="/api/v1")
app.include_router(crypto_configs.router, prefix="/api/v1")


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "Welcome to the Happ Crypto Link API!"}

# To run this API server from the project root:
# 1. Optionally set HAPP_CRYPTO_API_KEY (and HAPP_CRYPTO_V<N>_PUBLIC_KEY_FILE to override keys).
# 2. Execute: uvicorn api_server.main:app --reload
