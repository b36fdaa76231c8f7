"""
Cache routes
GET  /api/cache/stats     - cache statistics
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from price_service.layers.cache import PriceCache
from price_service.routers.deps import get_price_cache

router = APIRouter(prefix="/api/cache", tags=["Cache"])


class CacheStatsResponse(BaseModel):
    success: bool = True
    data: Optional[Any] = None
    message: str = "success"


@router.get("/stats", response_model=CacheStatsResponse)
async def cache_stats(cache: PriceCache = Depends(get_price_cache)):
    """Key count and hit/miss counters"""
    return CacheStatsResponse(data=cache.stats())
