"""Dependency injection: services constructed by the application factory"""

from fastapi import Request

from price_service.layers.cache import PriceCache
from price_service.services.price_service import PriceService


def get_price_service(request: Request) -> PriceService:
    return request.app.state.price_service


def get_price_cache(request: Request) -> PriceCache:
    return request.app.state.price_service.cache
