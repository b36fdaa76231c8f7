"""Price data models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProviderQuote(BaseModel):
    """Raw quote returned by an upstream provider adapter"""
    model_config = ConfigDict(frozen=True)

    price: float
    currency: str
    display_name: Optional[str] = None


class PriceRecord(BaseModel):
    """
    Normalized price record, the value stored in the cache

    Immutable: a refresh replaces the whole record.
    """
    model_config = ConfigDict(frozen=True)

    subject_id: str
    price: str
    currency: str
    display_name: Optional[str] = None
    fetched_at: str


# ── HTTP payloads ─────────────────────────────────────────

class CryptoPriceResponse(BaseModel):
    source: str
    coinId: str
    price: str
    currency: str
    time: str

    @classmethod
    def from_record(cls, record: PriceRecord, source: str) -> "CryptoPriceResponse":
        return cls(
            source=source,
            coinId=record.subject_id,
            price=record.price,
            currency=record.currency,
            time=record.fetched_at,
        )


class StockPriceResponse(BaseModel):
    source: str
    ticker: str
    name: Optional[str] = None
    price: str
    currency: str
    time: str

    @classmethod
    def from_record(cls, record: PriceRecord, source: str) -> "StockPriceResponse":
        return cls(
            source=source,
            ticker=record.subject_id,
            name=record.display_name,
            price=record.price,
            currency=record.currency,
            time=record.fetched_at,
        )


class ErrorBody(BaseModel):
    error: str
    detail: Optional[str] = None
