"""
Price service configuration
All settings are read from environment variables (or a local .env file)
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PriceServiceSettings(BaseSettings):
    """Price service settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Server ────────────────────────────────────────────
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    DEBUG: bool = Field(default=False)
    ALLOWED_ORIGINS: List[str] = Field(
        default_factory=lambda: ["*"]
    )

    # ── Cache ─────────────────────────────────────────────
    CACHE_TTL: int = Field(default=60, gt=0)             # seconds, applies to every entry
    CACHE_CHECK_PERIOD: int = Field(default=600, gt=0)   # background sweep interval

    # ── Formatting ────────────────────────────────────────
    PRICE_LOCALE: str = Field(default="en_US")

    # ── Upstream providers ────────────────────────────────
    CRYPTO_VS_CURRENCY: str = Field(default="usd")
    COINGECKO_BASE_URL: str = Field(default="https://api.coingecko.com/api/v3")
    COINGECKO_API_KEY: str = Field(default="")
    UPSTREAM_TIMEOUT: float = Field(default=10.0)

    # ── Logging ───────────────────────────────────────────
    LOG_LEVEL: str = Field(default="INFO")


@lru_cache
def get_settings() -> PriceServiceSettings:
    """Process-wide settings (singleton)"""
    return PriceServiceSettings()


settings = get_settings()
