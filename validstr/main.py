"""validstr - validate and expand abbreviated option strings."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from validstr.core.builtin_registry import get_builtins
from validstr.core.logging import configure_logfire, instrument_fastapi
from validstr.interface import builtins  # noqa: F401  registers validatestring
from validstr.interface.router import router as validatestring_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    configure_logfire()
    logger.info("startup_complete", extra={"builtins": sorted(get_builtins())})
    yield


app = FastAPI(
    title="validstr",
    description="Validate and expand abbreviated option strings against a whitelist",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
instrument_fastapi(app)

# Register routers
app.include_router(validatestring_router)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "healthy"}, status_code=200)
