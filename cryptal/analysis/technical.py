"""
Technical analysis: trend, volatility, and support/resistance from a price series.

Steps
-----
1.  Reject series shorter than ``MIN_POINTS`` (10) with ``InsufficientDataError``.
    Below that size any trend or volatility figure is meaningless.
2.  ``ma7``  = mean of the last ``min(7, n)`` prices.
    ``ma30`` = mean of the last ``min(30, n)`` prices.
    Short series degrade to "all available points", never fail.
3.  ``recent_trend`` = BULLISH iff last price > ma7, else BEARISH.
    ``long_trend``   = UPTREND  iff ma7 > ma30,      else DOWNTREND.
    Ties resolve to the bearish side on both comparisons.
4.  Log returns ``r[i] = ln(p[i] / p[i-1])``; ``volatility_pct`` is the
    sample standard deviation (n-1 denominator) × 100, or 0.0 with fewer
    than two returns.
5.  ``volatility_tier`` = HIGH if > 10, MODERATE if > 5, else LOW.
6.  ``support`` / ``resistance`` = min / max of the last ``min(30, n)`` prices.

Prices are guaranteed positive by ``PricePoint`` validation, so every log
return is finite.
"""

from __future__ import annotations

import math

from cryptal.models.assessment import TechnicalAssessment
from cryptal.models.market import PriceSeries
from cryptal.taxonomy.risk_taxonomy import LongTrend, RecentTrend, VolatilityTier

MIN_POINTS = 10
SHORT_WINDOW = 7
LONG_WINDOW = 30

HIGH_VOLATILITY_PCT = 10.0
MODERATE_VOLATILITY_PCT = 5.0


class InsufficientDataError(ValueError):
    """Raised when a price series is too short for technical analysis.

    Attributes:
        n_points:   Length of the rejected series.
        min_points: Minimum length required.
    """

    def __init__(self, n_points: int, min_points: int = MIN_POINTS) -> None:
        self.n_points   = n_points
        self.min_points = min_points
        super().__init__(
            f"Insufficient data for technical analysis: {n_points} price point(s), "
            f"at least {min_points} required."
        )


def analyze_technicals(series: PriceSeries) -> TechnicalAssessment:
    """Compute the technical summary of ``series``.

    Args:
        series: Chronologically ordered price history.

    Returns:
        TechnicalAssessment for the series.

    Raises:
        InsufficientDataError: If ``len(series) < MIN_POINTS``.
    """
    prices = series.prices
    if len(prices) < MIN_POINTS:
        raise InsufficientDataError(len(prices))

    current = prices[-1]
    ma7 = moving_average(prices, SHORT_WINDOW)
    ma30 = moving_average(prices, LONG_WINDOW)

    recent_trend = RecentTrend.BULLISH if current > ma7 else RecentTrend.BEARISH
    long_trend = LongTrend.UPTREND if ma7 > ma30 else LongTrend.DOWNTREND

    volatility = volatility_pct(prices)

    return TechnicalAssessment(
        recent_trend=recent_trend,
        long_trend=long_trend,
        volatility_pct=volatility,
        volatility_tier=classify_volatility(volatility),
        ma7=ma7,
        ma30=ma30,
        support=min(prices[-LONG_WINDOW:]),
        resistance=max(prices[-LONG_WINDOW:]),
        current_price=current,
        n_points=len(prices),
    )


def moving_average(prices: list[float], window: int) -> float:
    """Mean of the last ``min(window, len(prices))`` prices."""
    tail = prices[-window:]
    return sum(tail) / len(tail)


def log_returns(prices: list[float]) -> list[float]:
    return [math.log(cur / prev) for prev, cur in zip(prices, prices[1:])]


def volatility_pct(prices: list[float]) -> float:
    """Sample standard deviation of log returns, in percent.

    Returns 0.0 when fewer than two returns are available.
    """
    returns = log_returns(prices)
    n = len(returns)
    if n < 2:
        return 0.0
    mean = sum(returns) / n
    variance = sum((r - mean) ** 2 for r in returns) / (n - 1)
    return math.sqrt(variance) * 100.0


def classify_volatility(volatility: float) -> VolatilityTier:
    if volatility > HIGH_VOLATILITY_PCT:
        return VolatilityTier.HIGH
    if volatility > MODERATE_VOLATILITY_PCT:
        return VolatilityTier.MODERATE
    return VolatilityTier.LOW
