"""
Layer 1 – Acquisition layer
Upstream price providers (CoinGecko for crypto, Yahoo Finance for equities),
each normalizing its native response into a ProviderQuote.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from price_service.errors import NotFoundError, UpstreamError
from price_service.models.price import ProviderQuote

logger = logging.getLogger(__name__)


class PriceProvider(ABC):
    """Fetches the current price for a subject identifier"""

    name: str = "provider"

    @abstractmethod
    async def fetch_price(self, subject_id: str) -> ProviderQuote:
        """
        Return the current quote for `subject_id`

        Raises:
            NotFoundError: the provider reports no data (where it can tell)
            UpstreamError: any transport or provider-side failure
        """


# ── CoinGecko ─────────────────────────────────────────────

class CoinGeckoProvider(PriceProvider):
    """Crypto spot prices from the CoinGecko /simple/price endpoint"""

    name = "coingecko"

    def __init__(
        self,
        base_url: str = "https://api.coingecko.com/api/v3",
        vs_currency: str = "usd",
        api_key: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._vs_currency = vs_currency.lower()
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["x-cg-demo-api-key"] = self._api_key
        return headers

    async def _simple_price(self, coin_id: str) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers(),
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            resp = await client.get(
                "/simple/price",
                params={"ids": coin_id, "vs_currencies": self._vs_currency},
            )
            resp.raise_for_status()
            return resp.json()

    async def fetch_price(self, subject_id: str) -> ProviderQuote:
        try:
            data = await self._simple_price(subject_id)
        except httpx.HTTPStatusError as exc:
            logger.warning(f"CoinGecko returned {exc.response.status_code} for {subject_id}")
            raise UpstreamError(detail=f"CoinGecko responded with HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning(f"CoinGecko request failed for {subject_id}: {exc}")
            raise UpstreamError(detail=str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise UpstreamError(detail=f"Invalid CoinGecko response: {exc}") from exc

        if not isinstance(data, dict):
            raise UpstreamError(detail="Invalid CoinGecko response: expected an object")

        if subject_id not in data:
            raise NotFoundError("Coin not found")

        coin = data[subject_id]
        price = coin.get(self._vs_currency) if isinstance(coin, dict) else None
        if price is None:
            raise UpstreamError(detail=f"No {self._vs_currency.upper()} price for {subject_id}")

        return ProviderQuote(price=float(price), currency=self._vs_currency.upper())


# ── Yahoo Finance ─────────────────────────────────────────

class YahooFinanceProvider(PriceProvider):
    """
    Real-time equity quotes via yfinance

    Yahoo does not report a distinct "unknown symbol" condition, so every
    failure, including unknown tickers, surfaces as UpstreamError.
    """

    name = "yfinance"

    def _quote(self, ticker: str) -> Dict[str, Any]:
        import yfinance as yf
        return yf.Ticker(ticker).info or {}

    async def fetch_price(self, subject_id: str) -> ProviderQuote:
        try:
            info = await asyncio.to_thread(self._quote, subject_id)
        except Exception as exc:
            logger.warning(f"Yahoo Finance quote failed for {subject_id}: {exc}")
            raise UpstreamError(detail=str(exc) or exc.__class__.__name__) from exc

        price = info.get("regularMarketPrice")
        if price is None:
            raise UpstreamError(detail=f"Quote not found for symbol: {subject_id}")

        return ProviderQuote(
            price=float(price),
            currency=info.get("currency") or "USD",
            display_name=info.get("shortName"),
        )
