"""
Ingestion layer — normalization of upstream provider payloads into engine inputs.

Submodules:
  coingecko — CoinGecko ``/coins/{id}``, ``/coins/markets`` and
              ``market_chart`` JSON → MarketSnapshot / PriceSeries

Fetching is the caller's job; this package only reads payloads that are
already on disk or in memory.
"""
