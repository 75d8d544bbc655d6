"""
Fundamental scoring: converts a MarketSnapshot into a 0–100 score, a risk
tier, and an ordered list of factor explanations.

Score formula (additive, maximum 95)
------------------------------------
Each dimension is evaluated independently; within a dimension, bands are
checked top-to-bottom with a strict ``>`` and the first match wins.

    Dimension          Input                     Bands (threshold → points)
    ----------------   -----------------------   -----------------------------------
    market cap         market_cap                > 1e9 → 25, > 1e8 → 15, else 5
    volume / cap       volume_24h / market_cap   > 0.10 → 20, > 0.03 → 10, else 3
    development        dev_commits_4w            > 50 → 20, > 10 → 10, else 2
    community          community_score           > 70 → 15, > 30 → 8, else 3
    ATH distance       ath_change_pct            > -20 → 15, > -50 → 10, > -80 → 5, else 2

Missing inputs
--------------
A dimension whose input is ``None`` is skipped: no factor, no points. The
volume ratio additionally needs a non-zero market cap. ``dev_commits_4w``
and ``ath_change_pct`` are never ``None`` (the snapshot defaults them to 0),
so those two dimensions always fire.

Risk tier (closed at the top)
-----------------------------
    score >= 80 → LOW,  >= 60 → MEDIUM,  >= 40 → HIGH,  else VERY_HIGH
"""

from __future__ import annotations

import logging
from typing import Optional

from cryptal.analysis.narratives import factor_narrative
from cryptal.models.assessment import FundamentalAssessment, FundamentalFactor
from cryptal.models.market import MarketSnapshot
from cryptal.taxonomy.risk_taxonomy import FactorCategory, RiskTier

logger = logging.getLogger(__name__)

# (lower bound, points, narrative band); ``None`` bound = catch-all.
Band = tuple[Optional[float], int, str]

SCORING_BANDS: dict[FactorCategory, list[Band]] = {
    FactorCategory.MARKET_CAP: [
        (1e9,  25, "large"),
        (1e8,  15, "moderate"),
        (None,  5, "small"),
    ],
    FactorCategory.VOLUME_RATIO: [
        (0.10, 20, "high"),
        (0.03, 10, "moderate"),
        (None,  3, "low"),
    ],
    FactorCategory.DEVELOPMENT: [
        (50,   20, "active"),
        (10,   10, "moderate"),
        (None,  2, "inactive"),
    ],
    FactorCategory.COMMUNITY: [
        (70,   15, "strong"),
        (30,    8, "moderate"),
        (None,  3, "minimal"),
    ],
    FactorCategory.ATH_DISTANCE: [
        (-20,  15, "near"),
        (-50,  10, "moderate"),
        (-80,   5, "significant"),
        (None,  2, "far"),
    ],
}

# Minimum score (inclusive) for each tier, best tier first.
RISK_TIER_FLOORS: list[tuple[int, RiskTier]] = [
    (80, RiskTier.LOW),
    (60, RiskTier.MEDIUM),
    (40, RiskTier.HIGH),
]


def score_fundamentals(snapshot: MarketSnapshot) -> FundamentalAssessment:
    """Score a market snapshot.

    Never raises for a valid ``MarketSnapshot``: dimensions with missing
    inputs are skipped rather than defaulted.

    Args:
        snapshot: Fundamental inputs for one asset.

    Returns:
        FundamentalAssessment whose ``factors`` follow evaluation order
        (market cap, volume ratio, development, community, ATH distance).
    """
    inputs: list[tuple[FactorCategory, Optional[float]]] = [
        (FactorCategory.MARKET_CAP,   snapshot.market_cap),
        (FactorCategory.VOLUME_RATIO, snapshot.volume_ratio),
        (FactorCategory.DEVELOPMENT,  snapshot.dev_commits_4w),
        (FactorCategory.COMMUNITY,    snapshot.community_score),
        (FactorCategory.ATH_DISTANCE, snapshot.ath_change_pct),
    ]

    factors: list[FundamentalFactor] = []
    for category, value in inputs:
        if value is None:
            logger.debug("Skipping %s factor: input not available", category.value)
            continue
        factors.append(evaluate_factor(category, value))

    total = sum(f.points_awarded for f in factors)
    return FundamentalAssessment(
        total_score=total,
        risk_tier=classify_risk(total),
        factors=factors,
    )


def evaluate_factor(category: FactorCategory, value: float) -> FundamentalFactor:
    """Match ``value`` against the bands of one dimension (first match wins)."""
    for bound, points, band in SCORING_BANDS[category]:
        if bound is None or value > bound:
            return FundamentalFactor(
                category=category,
                points_awarded=points,
                narrative=factor_narrative(category, band),
            )
    # Every band list ends with a catch-all.
    raise AssertionError(f"No catch-all band configured for {category}")


def classify_risk(total_score: int) -> RiskTier:
    """Map a total score to its risk tier (boundaries are inclusive)."""
    for floor, tier in RISK_TIER_FLOORS:
        if total_score >= floor:
            return tier
    return RiskTier.VERY_HIGH
