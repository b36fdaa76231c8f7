"""Health check routes"""

import time

from fastapi import APIRouter, Depends

from price_service import __version__
from price_service.layers.cache import PriceCache
from price_service.routers.deps import get_price_cache

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(cache: PriceCache = Depends(get_price_cache)):
    """Service health check"""
    return {
        "success": True,
        "data": {
            "status": "ok",
            "version": __version__,
            "timestamp": int(time.time()),
            "service": "Price Proxy Service",
            "cache": cache.stats(),
        },
        "message": "Service is running",
    }


@router.get("/healthz")
async def healthz():
    """Kubernetes liveness probe"""
    return {"status": "ok"}


@router.get("/readyz")
async def readyz():
    """Kubernetes readiness probe"""
    return {"ready": True}
