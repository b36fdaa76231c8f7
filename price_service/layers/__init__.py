"""
Data flow layers
  Layer 1 – Acquisition  : upstream price providers
  Layer 2 – Cache        : fixed-TTL in-memory cache
  Layer 3 – Processing   : formatting and normalization
"""
