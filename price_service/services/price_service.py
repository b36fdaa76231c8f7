"""
Price lookup service
Combines the acquisition, cache and processing layers behind the two
request handlers: crypto spot price and stock quote.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from price_service.errors import NotFoundError, PriceServiceError, UpstreamError, ValidationError
from price_service.layers.acquisition import PriceProvider
from price_service.layers.cache import CRYPTO_NAMESPACE, STOCK_NAMESPACE, PriceCache, make_key
from price_service.layers.processing import ProcessingLayer
from price_service.models.price import PriceRecord

logger = logging.getLogger(__name__)

SOURCE_CACHE = "cache"
SOURCE_API = "api"


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class PriceService:
    """Cache-fronted price lookups"""

    def __init__(
        self,
        cache: PriceCache,
        crypto_provider: PriceProvider,
        equity_provider: PriceProvider,
        processing: Optional[ProcessingLayer] = None,
        crypto_currency: str = "USD",
        now: Callable[[], datetime] = _utcnow,
    ):
        self._cache = cache
        self._crypto = crypto_provider
        self._equity = equity_provider
        self._proc = processing or ProcessingLayer()
        self._crypto_currency = crypto_currency.upper()
        self._now = now

    @property
    def cache(self) -> PriceCache:
        return self._cache

    # ── Crypto ────────────────────────────────────────────

    async def get_crypto_price(self, coin_id: Optional[str]) -> Tuple[PriceRecord, str]:
        """
        Spot price for a coin, from cache when fresh

        Args:
            coin_id: CoinGecko coin id, e.g. "bitcoin" (case-insensitive)

        Returns:
            (record, source) where source is "cache" or "api"
        """
        coin_id = (coin_id or "").strip().lower()
        if not coin_id:
            raise ValidationError("Coin ID is required")

        key = make_key(CRYPTO_NAMESPACE, coin_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, SOURCE_CACHE

        try:
            quote = await self._crypto.fetch_price(coin_id)
        except NotFoundError as exc:
            raise NotFoundError("Coin not found") from exc
        except UpstreamError:
            raise
        except Exception as exc:
            logger.warning(f"{self._crypto.name} lookup failed for {coin_id}: {exc}")
            raise UpstreamError(detail=str(exc)) from exc

        record = self._proc.build_record(
            coin_id, quote, self._now(), currency=self._crypto_currency
        )
        self._cache.set(key, record)
        return record, SOURCE_API

    # ── Stocks ────────────────────────────────────────────

    async def get_stock_price(self, ticker: Optional[str]) -> Tuple[PriceRecord, str]:
        """
        Real-time quote for a ticker, from cache when fresh

        Unknown tickers are reported as UpstreamError: the equities provider
        does not tell "not found" apart from other failures.
        """
        ticker = (ticker or "").strip().upper()
        if not ticker:
            raise ValidationError("Ticker symbol is required")

        key = make_key(STOCK_NAMESPACE, ticker)
        cached = self._cache.get(key)
        if cached is not None:
            return cached, SOURCE_CACHE

        try:
            quote = await self._equity.fetch_price(ticker)
        except UpstreamError:
            raise
        except PriceServiceError as exc:
            raise UpstreamError(detail=exc.detail or exc.message) from exc
        except Exception as exc:
            logger.warning(f"{self._equity.name} lookup failed for {ticker}: {exc}")
            raise UpstreamError(detail=str(exc)) from exc

        record = self._proc.build_record(ticker, quote, self._now())
        self._cache.set(key, record)
        return record, SOURCE_API
