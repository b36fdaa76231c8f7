"""
Price Proxy Service
FastAPI application entry point

Run:
    uvicorn price_service.main:app --host 0.0.0.0 --port 3000
    python -m price_service.main
"""

import asyncio
import contextlib
import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from price_service import __version__
from price_service.config import PriceServiceSettings, settings as default_settings
from price_service.errors import register_error_handlers
from price_service.layers.acquisition import CoinGeckoProvider, PriceProvider, YahooFinanceProvider
from price_service.layers.cache import PriceCache
from price_service.layers.processing import ProcessingLayer
from price_service.routers import cache, health, prices
from price_service.services.price_service import PriceService

# ── Logging ───────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[PriceServiceSettings] = None,
    crypto_provider: Optional[PriceProvider] = None,
    equity_provider: Optional[PriceProvider] = None,
    clock: Callable[[], float] = time.monotonic,
) -> FastAPI:
    """Build the application with its cache and providers wired in"""
    settings = settings or default_settings

    price_cache = PriceCache(ttl_seconds=settings.CACHE_TTL, clock=clock)
    price_service = PriceService(
        cache=price_cache,
        crypto_provider=crypto_provider or CoinGeckoProvider(
            base_url=settings.COINGECKO_BASE_URL,
            vs_currency=settings.CRYPTO_VS_CURRENCY,
            api_key=settings.COINGECKO_API_KEY,
            timeout=settings.UPSTREAM_TIMEOUT,
        ),
        equity_provider=equity_provider or YahooFinanceProvider(),
        processing=ProcessingLayer(locale=settings.PRICE_LOCALE),
        crypto_currency=settings.CRYPTO_VS_CURRENCY,
    )

    # ── Lifespan ──────────────────────────────────────────
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info(f"🚀 Price Proxy Service v{__version__} starting")
        logger.info(f"   Listening : http://{settings.HOST}:{settings.PORT}")
        logger.info(f"   API docs  : http://{settings.HOST}:{settings.PORT}/api-docs")
        logger.info(f"   Cache TTL : {settings.CACHE_TTL}s (sweep every {settings.CACHE_CHECK_PERIOD}s)")
        logger.info("=" * 60)

        sweeper = asyncio.create_task(price_cache.run_sweeper(settings.CACHE_CHECK_PERIOD))

        yield

        logger.info("🔄 Price Proxy Service shutting down...")
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
        logger.info("✅ Price Proxy Service stopped")

    app = FastAPI(
        title="Stock and Crypto Price API",
        description="API for fetching stock and cryptocurrency prices",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api-docs",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.price_service = price_service

    # ── CORS ──────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # ── Request timing ────────────────────────────────────
    @app.middleware("http")
    async def add_process_time(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        response.headers["X-Process-Time"] = f"{(time.time() - start) * 1000:.1f}ms"
        return response

    register_error_handlers(app)

    # ── Routes ────────────────────────────────────────────
    app.include_router(prices.router)
    app.include_router(health.router)
    app.include_router(cache.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": "Price Proxy Service",
            "version": __version__,
            "docs": "/api-docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "price_service.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
