"""
Shared pytest fixtures for the Cryptal test suite.

Provides:
  - Sample ``MarketSnapshot`` objects (strong, empty).
  - ``make_series``: factory turning a list of prices into a daily ``PriceSeries``.
  - Sample CoinGecko payload dicts for ingestion and CLI tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from cryptal.models.market import MarketSnapshot, PricePoint, PriceSeries

_START = datetime(2024, 9, 1, tzinfo=timezone.utc)


# ── Snapshots ─────────────────────────────────────────────────────────────────

@pytest.fixture
def strong_snapshot() -> MarketSnapshot:
    """Every dimension in its top band: 25 + 20 + 20 + 15 + 15 = 95."""
    return MarketSnapshot(
        market_cap=2e9,
        volume_24h=3e8,
        dev_commits_4w=60,
        community_score=80,
        ath_change_pct=-10,
    )


@pytest.fixture
def empty_snapshot() -> MarketSnapshot:
    """No optional data: only development (0 commits) and ATH (0%) can fire."""
    return MarketSnapshot()


# ── Price series ──────────────────────────────────────────────────────────────

def build_series(prices: list[float]) -> PriceSeries:
    return PriceSeries(
        points=[
            PricePoint(timestamp=_START + timedelta(days=i), price=p)
            for i, p in enumerate(prices)
        ]
    )


@pytest.fixture
def make_series() -> Callable[[list[float]], PriceSeries]:
    """Factory: ``make_series([100.0, 101.0, ...])`` → one point per day."""
    return build_series


@pytest.fixture
def rising_series() -> PriceSeries:
    """40 strictly increasing daily prices 1.0 … 40.0."""
    return build_series([float(i) for i in range(1, 41)])


# ── CoinGecko payloads ────────────────────────────────────────────────────────

@pytest.fixture
def coin_details_payload() -> dict:
    """Trimmed ``/coins/bitcoin`` response with INR and USD quotes."""
    return {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "community_score": 80.0,
        "market_data": {
            "market_cap": {"inr": 2e9, "usd": 5e8},
            "total_volume": {"inr": 3e8, "usd": 1e7},
            "ath_change_percentage": {"inr": -10.0, "usd": -55.0},
        },
        "developer_data": {"commit_count_4_weeks": 60},
    }


@pytest.fixture
def market_chart_payload() -> dict:
    """``market_chart`` response: 12 rising daily prices in epoch ms."""
    day_ms = 86_400_000
    base = 1_725_148_800_000  # 2024-09-01T00:00:00Z
    return {
        "prices": [[base + i * day_ms, 100.0 + i] for i in range(12)],
        "market_caps": [],
        "total_volumes": [],
    }
