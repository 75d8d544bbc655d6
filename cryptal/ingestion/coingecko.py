"""
CoinGecko payload normalization — maps already-downloaded API responses onto
engine inputs. No network I/O happens here; fetching belongs to the caller.

Supported payloads::

    /coins/{id}                 → snapshot_from_coin_details()
      {
        "id": "bitcoin",
        "community_score": 71.2,
        "market_data": {
          "market_cap":            {"inr": 1.1e15, ...},
          "total_volume":          {"inr": 3.0e13, ...},
          "ath_change_percentage": {"inr": -12.4, ...}
        },
        "developer_data": {"commit_count_4_weeks": 84}
      }

    /coins/markets (one row)    → snapshot_from_markets_row()
      {"id": "bitcoin", "market_cap": ..., "total_volume": ...,
       "ath_change_percentage": ...}

    /coins/{id}/market_chart    → series_from_market_chart()
      {"prices": [[1717200000000, 5712345.6], ...]}

Missing keys become ``None`` on the snapshot so the scorer can skip the
affected dimension instead of scoring a fabricated zero.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional

from cryptal.models.market import MarketSnapshot, PriceSeries

logger = logging.getLogger(__name__)


class PayloadError(ValueError):
    """Raised when a payload file cannot be read as the expected JSON shape.

    Attributes:
        path: File that failed to load.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid payload {path}: {reason}")


def load_json_payload(path: Path) -> dict[str, Any]:
    """Read a UTF-8 JSON object from ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        PayloadError: If the content is not UTF-8, not valid JSON, or not a
            JSON object.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise PayloadError(path, f"not UTF-8 text ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise PayloadError(path, f"malformed JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise PayloadError(path, f"expected a JSON object, got {type(data).__name__}")
    return data


def snapshot_from_coin_details(
    payload: dict[str, Any],
    vs_currency: str = "inr",
) -> MarketSnapshot:
    """Build a ``MarketSnapshot`` from a ``/coins/{id}`` response.

    Args:
        payload:     Parsed JSON response.
        vs_currency: Quote currency key inside the per-currency dicts.

    Returns:
        MarketSnapshot with ``None`` for every field the payload lacks.
    """
    market_data = payload.get("market_data") or {}
    developer_data = payload.get("developer_data") or {}

    return MarketSnapshot(
        market_cap=_currency_value(market_data.get("market_cap"), vs_currency),
        volume_24h=_currency_value(market_data.get("total_volume"), vs_currency),
        dev_commits_4w=developer_data.get("commit_count_4_weeks"),
        community_score=payload.get("community_score"),
        ath_change_pct=_currency_value(
            market_data.get("ath_change_percentage"), vs_currency
        ),
    )


def snapshot_from_markets_row(row: dict[str, Any]) -> MarketSnapshot:
    """Build a ``MarketSnapshot`` from one ``/coins/markets`` row.

    Market rows carry no developer or community data, so those dimensions
    fall back to their documented defaults / unknown.
    """
    return MarketSnapshot(
        market_cap=row.get("market_cap"),
        volume_24h=row.get("total_volume"),
        ath_change_pct=row.get("ath_change_percentage"),
    )


def series_from_market_chart(payload: dict[str, Any]) -> Optional[PriceSeries]:
    """Build a ``PriceSeries`` from a ``market_chart`` response.

    Points with a missing or non-positive price, and points whose timestamp
    does not advance past the previous kept point, are dropped with a warning.

    Returns:
        PriceSeries, or ``None`` when the payload has no ``prices`` array.
    """
    raw = payload.get("prices")
    if raw is None:
        return None

    pairs: list[tuple[float, float]] = []
    dropped = 0
    for entry in raw:
        try:
            ts, price = float(entry[0]), float(entry[1])
        except (TypeError, ValueError, IndexError):
            dropped += 1
            continue
        if not (math.isfinite(price) and price > 0) or (pairs and ts <= pairs[-1][0]):
            dropped += 1
            continue
        pairs.append((ts, price))

    if dropped:
        logger.warning(
            "Dropped %d invalid or out-of-order price point(s) from market_chart payload",
            dropped,
        )
    return PriceSeries.from_pairs(pairs)


def snapshot_from_payload(
    payload: dict[str, Any],
    vs_currency: str = "inr",
) -> MarketSnapshot:
    """Dispatch on payload shape.

    ``market_data`` key → coin details; ``total_volume`` or
    ``ath_change_percentage`` key → markets row; anything else is validated
    as an engine-native ``MarketSnapshot`` dict.
    """
    if "market_data" in payload:
        return snapshot_from_coin_details(payload, vs_currency)
    if "total_volume" in payload or "ath_change_percentage" in payload:
        return snapshot_from_markets_row(payload)
    return MarketSnapshot.model_validate(payload)


def series_from_payload(payload: dict[str, Any]) -> Optional[PriceSeries]:
    """``prices`` key → market_chart; ``points`` key → native ``PriceSeries``."""
    if "points" in payload:
        return PriceSeries.model_validate(payload)
    return series_from_market_chart(payload)


def check_history_coverage(series: PriceSeries, history_days: int) -> bool:
    """Warn when ``series`` spans fewer days than the configured window.

    The window is measured from the first to the last timestamp, so a
    ``market_chart?days=30`` response (31 daily points) covers 30 days.

    Returns:
        True if the series covers at least ``history_days`` days.
    """
    if len(series) < 2:
        covered = 0.0
    else:
        span = series.points[-1].timestamp - series.points[0].timestamp
        covered = span.total_seconds() / 86_400

    if covered < history_days:
        logger.warning(
            "Price history covers %.1f day(s), fewer than the configured %d; "
            "ma30 and support/resistance use the shorter window",
            covered, history_days,
        )
        return False
    return True


def _currency_value(values: Any, vs_currency: str) -> Any:
    # Raw value; MarketSnapshot validation rejects non-numeric entries.
    if not isinstance(values, dict):
        return None
    return values.get(vs_currency.lower())
