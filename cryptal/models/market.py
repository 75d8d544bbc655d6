"""
Market input models — the snapshot and price history an assessment is built from.

``MarketSnapshot`` carries the fundamental fields. Optional fields are
explicitly ``None`` when the upstream provider did not report them; only
``dev_commits_4w`` and ``ath_change_pct`` have documented defaults (``0``)
and are coerced from ``None``.

``MarketSnapshot.volume_ratio`` is undefined (``None``) when the market cap is
zero, so the volume factor is skipped for such assets. This intentionally
differs from the Cryptal dashboard, which divided by zero there and awarded
the top volume band to any asset with a zero cap and non-zero volume.

``PriceSeries`` is an ordered sequence of ``PricePoint`` with strictly
increasing timestamps.

All models are frozen (immutable) after construction. Inputs are built fresh
for each analysis call and are never mutated by the engine.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _check_finite(v: Optional[float], field: str) -> Optional[float]:
    if v is not None and not math.isfinite(v):
        raise ValueError(f"{field} must be a finite number, got {v}.")
    return v


class MarketSnapshot(BaseModel):
    """Fundamental market data for one asset at one point in time.

    Attributes:
        market_cap: Market capitalization in the quote currency, or ``None``.
        volume_24h: 24-hour traded volume in the quote currency, or ``None``.
        dev_commits_4w: Commits in the last four weeks; ``None`` → ``0``.
        community_score: Provider community score in [0, 100], or ``None``.
        ath_change_pct: Percent distance from the all-time high (usually
            negative); ``None`` → ``0.0``.
    """

    model_config = ConfigDict(frozen=True)

    market_cap: Optional[float] = None
    volume_24h: Optional[float] = None
    dev_commits_4w: int = 0
    community_score: Optional[float] = None
    ath_change_pct: float = 0.0

    @field_validator("dev_commits_4w", mode="before")
    @classmethod
    def default_commits(cls, v: object) -> object:
        return 0 if v is None else v

    @field_validator("ath_change_pct", mode="before")
    @classmethod
    def default_ath_change(cls, v: object) -> object:
        return 0.0 if v is None else v

    @field_validator("market_cap", "volume_24h")
    @classmethod
    def validate_amount(cls, v: Optional[float], info) -> Optional[float]:
        _check_finite(v, info.field_name)
        if v is not None and v < 0:
            raise ValueError(f"{info.field_name} must be non-negative.")
        return v

    @field_validator("dev_commits_4w")
    @classmethod
    def validate_commits(cls, v: int) -> int:
        if v < 0:
            raise ValueError("dev_commits_4w must be non-negative.")
        return v

    @field_validator("community_score")
    @classmethod
    def validate_community_score(cls, v: Optional[float]) -> Optional[float]:
        _check_finite(v, "community_score")
        if v is not None and not 0.0 <= v <= 100.0:
            raise ValueError(f"community_score must be in [0, 100], got {v}.")
        return v

    @field_validator("ath_change_pct")
    @classmethod
    def validate_ath_change(cls, v: float) -> float:
        return _check_finite(v, "ath_change_pct")

    @property
    def volume_ratio(self) -> Optional[float]:
        """24h volume / market cap; ``None`` unless both are known and cap > 0.

        A zero cap yields ``None`` rather than an infinite ratio.
        """
        if self.volume_24h is None or not self.market_cap:
            return None
        return self.volume_24h / self.market_cap


class PricePoint(BaseModel):
    """One observed price.

    Attributes:
        timestamp: Observation time (UTC recommended).
        price: Strictly positive price in the quote currency.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    price: float

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: float) -> float:
        _check_finite(v, "price")
        if v <= 0:
            raise ValueError(f"price must be > 0, got {v}.")
        return v


class PriceSeries(BaseModel):
    """Chronologically ordered price history for one asset.

    Attributes:
        points: Price points with strictly increasing timestamps.
    """

    model_config = ConfigDict(frozen=True)

    points: list[PricePoint]

    @model_validator(mode="after")
    def validate_ordering(self) -> "PriceSeries":
        for prev, cur in zip(self.points, self.points[1:]):
            if cur.timestamp <= prev.timestamp:
                raise ValueError(
                    f"Timestamps must be strictly increasing: "
                    f"{cur.timestamp.isoformat()} follows {prev.timestamp.isoformat()}."
                )
        return self

    def __len__(self) -> int:
        return len(self.points)

    @property
    def prices(self) -> list[float]:
        return [p.price for p in self.points]

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[Union[datetime, int, float], float]],
    ) -> "PriceSeries":
        """Build a series from ``(timestamp, price)`` pairs.

        Numeric timestamps are interpreted as epoch milliseconds (UTC), the
        unit used by the CoinGecko ``market_chart`` endpoint.
        """
        points = [
            PricePoint(timestamp=_to_datetime(ts), price=price)
            for ts, price in pairs
        ]
        return cls(points=points)


def _to_datetime(ts: Union[datetime, int, float]) -> datetime:
    if isinstance(ts, datetime):
        return ts
    return datetime.fromtimestamp(ts / 1000.0, tz=timezone.utc)
