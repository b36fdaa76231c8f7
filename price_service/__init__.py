"""
Price Proxy Service
Cryptocurrency and equity spot prices behind a short-lived in-memory cache

Layers:
  Acquisition  → upstream provider adapters (CoinGecko / Yahoo Finance)
  Cache        → fixed-TTL in-process price cache
  Processing   → price formatting and record normalization
"""

__version__ = "1.0.0"
