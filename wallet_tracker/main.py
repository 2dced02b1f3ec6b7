import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import health, wallet
from .config import settings
from .logging_config import setup_logging
from .middleware import PermissiveCORSMiddleware, RequestLoggingMiddleware
from .middleware.cors import CORS_HEADERS

setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Wallet Tracker API",
    description="Multi-chain wallet balances and transaction history",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Last added runs first: requests are logged, then CORS is applied
app.add_middleware(PermissiveCORSMiddleware)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework and validation errors as ``{"error": ...}``"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the middleware stack, so CORS headers are set here too
    logger.exception("Error handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=CORS_HEADERS,
    )


# Include routers
app.include_router(wallet.router, tags=["Wallet"])
app.include_router(health.router, tags=["Health"])


def run() -> None:
    import uvicorn

    logger.info("Wallet tracker backend listening on port %s", settings.port)
    uvicorn.run(
        "wallet_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
