"""
Layer 3 – Processing layer
Turns raw provider quotes into the normalized PriceRecord served to clients.
"""

import decimal
import logging
from datetime import datetime, timezone
from typing import Optional

from babel.numbers import format_decimal

from price_service.models.price import PriceRecord, ProviderQuote

logger = logging.getLogger(__name__)


def format_price(value: float, locale: str = "en_US") -> str:
    """
    Format a price with the locale's grouping separators

    Uses the locale's default decimal pattern (up to three fraction digits),
    e.g. 65000 → "65,000", 1234.5678 → "1,234.568" for en_US. Rounds the
    exact binary value half away from zero, so 1.0625 → "1.063".
    """
    with decimal.localcontext() as ctx:
        ctx.rounding = decimal.ROUND_HALF_UP
        return format_decimal(decimal.Decimal(value), locale=locale)


def utc_now_iso(now: Optional[datetime] = None) -> str:
    """UTC timestamp in ISO-8601 with millisecond precision and a Z suffix"""
    now = now or datetime.now(tz=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProcessingLayer:
    """Builds PriceRecords from provider quotes"""

    def __init__(self, locale: str = "en_US"):
        self._locale = locale

    def build_record(
        self,
        subject_id: str,
        quote: ProviderQuote,
        fetched_at: datetime,
        currency: Optional[str] = None,
    ) -> PriceRecord:
        """
        Normalize a quote into a PriceRecord

        Args:
            subject_id: case-normalized coin id or ticker
            quote: raw quote from the provider adapter
            fetched_at: time the quote was obtained
            currency: overrides the quote's currency when given
        """
        return PriceRecord(
            subject_id=subject_id,
            price=format_price(quote.price, self._locale),
            currency=currency or quote.currency,
            display_name=quote.display_name,
            fetched_at=utc_now_iso(fetched_at),
        )
