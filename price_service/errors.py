"""Price service exceptions and their JSON error handlers."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PriceServiceError(Exception):
    """Base exception carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ValidationError(PriceServiceError):
    """A required query parameter is missing."""

    status_code = 400


class NotFoundError(PriceServiceError):
    """The provider has no data for the requested subject."""

    status_code = 404


class UpstreamError(PriceServiceError):
    """Transport or provider-side failure talking to an upstream source."""

    status_code = 500

    def __init__(self, message: str = "Failed to fetch data", detail: Optional[str] = None):
        super().__init__(message, detail=detail)


def register_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on the FastAPI app."""

    @app.exception_handler(PriceServiceError)
    async def handle_price_service_error(_request: Request, exc: PriceServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)},
        )
