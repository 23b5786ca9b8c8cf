"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.pnl_common.enums import CacheBackend
from src.pnl_common.errors import AppError
from src.pnl_common.http_client import close_http_client
from src.pnl_common.redis_client import close_redis, ping_redis
from src.pnl_common.response import error_response
from src.pnl_gateway.middleware.request_log import RequestLogMiddleware
from src.pnl_ledger.api.router import router as pnl_router

APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: apply log level, check Redis when it backs the cache. Shutdown: close pools."""
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("src").setLevel(settings.LOG_LEVEL)
    logging.getLogger("pnl").setLevel(settings.LOG_LEVEL)
    if CacheBackend(settings.PNL_CACHE_BACKEND) is CacheBackend.REDIS and not await ping_redis():
        logger.warning("Redis unreachable at startup; PnL cache will miss until it recovers")
    yield
    # Shutdown
    await close_http_client()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version=APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("request failed code=%d path=%s: %s", exc.code, request.url.path, exc.message)
    resp = error_response(exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error path=%s", request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_response("Internal server error").model_dump(),
    )


app.include_router(pnl_router)


@app.get("/health")
async def health() -> dict[str, str]:
    backend = CacheBackend(settings.PNL_CACHE_BACKEND)
    cache = backend.value
    if backend is CacheBackend.REDIS and not await ping_redis():
        cache = "redis-unreachable"
    return {"status": "ok", "version": APP_VERSION, "cache": cache}
