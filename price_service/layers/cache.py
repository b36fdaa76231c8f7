"""
Layer 2 – Cache layer
Fixed-TTL in-process store for price records.

Entries are visible only while now < expiry. Expired entries are dropped when
read and periodically by the background sweeper. There is no capacity bound
and nothing survives a process restart.
"""

import asyncio
import logging
import time
from typing import Callable, Dict, Optional, Tuple

from price_service.models.price import PriceRecord

logger = logging.getLogger(__name__)

CRYPTO_NAMESPACE = "crypto"
STOCK_NAMESPACE = "stock"


def make_key(namespace: str, subject_id: str) -> str:
    """Build a namespaced cache key, e.g. crypto-bitcoin / stock-AAPL"""
    return f"{namespace}-{subject_id}"


class PriceCache:
    """In-memory key → PriceRecord store with a single process-wide TTL"""

    def __init__(self, ttl_seconds: int = 60, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl = ttl_seconds
        self._clock = clock
        # key -> (expires_at, record)
        self._store: Dict[str, Tuple[float, PriceRecord]] = {}
        self._hits = 0
        self._misses = 0

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def get(self, key: str) -> Optional[PriceRecord]:
        entry = self._store.get(key)
        if entry is None:
            self._misses += 1
            return None

        expires_at, record = entry
        if self._clock() >= expires_at:
            self._store.pop(key, None)
            self._misses += 1
            logger.debug(f"Cache entry expired: {key}")
            return None

        self._hits += 1
        logger.debug(f"Cache hit: {key}")
        return record

    def set(self, key: str, record: PriceRecord) -> None:
        self._store[key] = (self._clock() + self._ttl, record)
        logger.debug(f"Cache write: {key} (ttl={self._ttl}s)")

    def sweep(self) -> int:
        """Physically remove expired entries, returning how many were dropped"""
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._store.items() if now >= expires_at]
        for key in expired:
            del self._store[key]
        if expired:
            logger.debug(f"Cache sweep removed {len(expired)} expired entries")
        return len(expired)

    def stats(self) -> dict:
        return {
            "keys": len(self._store),
            "hits": self._hits,
            "misses": self._misses,
            "ttl_seconds": self._ttl,
        }

    async def run_sweeper(self, interval: float) -> None:
        """Sweep expired entries every `interval` seconds until cancelled"""
        while True:
            await asyncio.sleep(interval)
            self.sweep()
