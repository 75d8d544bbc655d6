"""
Risk and trend taxonomy for crypto asset assessments.

Four small enums describe every assessment the engine produces:
  - ``RiskTier``        — coarse fundamental risk level (from the 0–100 score).
  - ``VolatilityTier``  — dispersion of recent log returns.
  - ``RecentTrend``     — last price vs. short moving average.
  - ``LongTrend``       — short moving average vs. long moving average.

``FactorCategory`` names the five fundamental dimensions in evaluation order.

Display metadata (labels, hex colors, verdict paragraphs) is kept here as
plain lookups so the engine stays free of rendering code while still giving a
UI everything it needs::

    from cryptal.taxonomy.risk_taxonomy import RiskTier, risk_color

    risk_color(RiskTier.LOW)   # "#059669"

This module has NO imports from any other ``cryptal`` package.
"""

from enum import StrEnum


class RiskTier(StrEnum):
    """Fundamental risk classification derived from the total score."""

    LOW = "LOW"
    """Score >= 80."""

    MEDIUM = "MEDIUM"
    """Score 60–79."""

    HIGH = "HIGH"
    """Score 40–59."""

    VERY_HIGH = "VERY_HIGH"
    """Score below 40."""


class VolatilityTier(StrEnum):
    """Classification of log-return standard deviation (percent)."""

    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class RecentTrend(StrEnum):
    """Short-term direction: last price against the 7-point mean."""

    BULLISH = "BULLISH"
    BEARISH = "BEARISH"


class LongTrend(StrEnum):
    """Longer-term direction: 7-point mean against the 30-point mean."""

    UPTREND = "UPTREND"
    DOWNTREND = "DOWNTREND"


class FactorCategory(StrEnum):
    """Fundamental scoring dimensions, declared in evaluation order."""

    MARKET_CAP = "market_cap"
    VOLUME_RATIO = "volume_ratio"
    DEVELOPMENT = "development_activity"
    COMMUNITY = "community_engagement"
    ATH_DISTANCE = "ath_distance"


# ── Display lookups ───────────────────────────────────────────────────────────

GREEN = "#059669"
AMBER = "#d97706"
ORANGE = "#f97316"
RED = "#dc2626"

_RISK_LABELS: dict[RiskTier, str] = {
    RiskTier.LOW:       "LOW RISK",
    RiskTier.MEDIUM:    "MEDIUM RISK",
    RiskTier.HIGH:      "HIGH RISK",
    RiskTier.VERY_HIGH: "VERY HIGH RISK",
}

_RISK_COLORS: dict[RiskTier, str] = {
    RiskTier.LOW:       GREEN,
    RiskTier.MEDIUM:    AMBER,
    RiskTier.HIGH:      ORANGE,
    RiskTier.VERY_HIGH: RED,
}

_TREND_COLORS: dict[RecentTrend, str] = {
    RecentTrend.BULLISH: GREEN,
    RecentTrend.BEARISH: RED,
}

# Overall fundamental verdict per tier, verbatim from the Cryptal dashboard.
RISK_SUMMARIES: dict[RiskTier, str] = {
    RiskTier.LOW: (
        "Based on strong fundamentals including high market cap, solid volume, active "
        "development, and growing community, this asset appears to be a safe long-term "
        "investment."
    ),
    RiskTier.MEDIUM: (
        "Fundamentals are mixed. Some strengths exist, but there are also areas of "
        "concern. Consider investing cautiously and monitor developments closely."
    ),
    RiskTier.HIGH: (
        "Multiple weaknesses in fundamentals suggest caution. The asset may have "
        "speculative appeal, but risks outweigh the potential rewards for most investors."
    ),
    RiskTier.VERY_HIGH: (
        "Poor fundamentals across multiple dimensions. Investment is highly speculative "
        "and suitable only for those with high risk tolerance and deep understanding of "
        "the space."
    ),
}


def risk_label(tier: RiskTier) -> str:
    """Human-readable label, e.g. ``"VERY HIGH RISK"``."""
    return _RISK_LABELS[RiskTier(tier)]


def risk_color(tier: RiskTier) -> str:
    """Hex display color for a risk tier."""
    return _RISK_COLORS[RiskTier(tier)]


def trend_color(trend: RecentTrend) -> str:
    """Hex display color for a recent trend (green up, red down)."""
    return _TREND_COLORS[RecentTrend(trend)]


def risk_summary(tier: RiskTier) -> str:
    """Verdict paragraph shown under the fundamental score."""
    return RISK_SUMMARIES[RiskTier(tier)]
