"""
Price routes
GET /crypto?coinId=   - cryptocurrency spot price (USD)
GET /stocks?ticker=   - real-time stock quote
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from price_service.models.price import CryptoPriceResponse, ErrorBody, StockPriceResponse
from price_service.routers.deps import get_price_service
from price_service.services.price_service import PriceService

router = APIRouter(tags=["Prices"])


@router.get(
    "/crypto",
    response_model=CryptoPriceResponse,
    summary="Get cryptocurrency price",
    responses={
        400: {"model": ErrorBody, "description": "Missing coinId parameter"},
        404: {"model": ErrorBody, "description": "Coin not found"},
        500: {"model": ErrorBody, "description": "Server error"},
    },
)
async def get_crypto_price(
    coinId: Optional[str] = Query(
        default=None, description="Cryptocurrency ID (e.g., bitcoin, ethereum)"
    ),
    svc: PriceService = Depends(get_price_service),
):
    """Retrieve the current price of a cryptocurrency"""
    record, source = await svc.get_crypto_price(coinId)
    return CryptoPriceResponse.from_record(record, source)


@router.get(
    "/stocks",
    response_model=StockPriceResponse,
    summary="Get stock price",
    responses={
        400: {"model": ErrorBody, "description": "Missing ticker parameter"},
        500: {"model": ErrorBody, "description": "Server error"},
    },
)
async def get_stock_price(
    ticker: Optional[str] = Query(
        default=None, description="Stock ticker symbol (e.g., AAPL, GOOGL)"
    ),
    svc: PriceService = Depends(get_price_service),
):
    """Retrieve the current price of a stock"""
    record, source = await svc.get_stock_price(ticker)
    return StockPriceResponse.from_record(record, source)
