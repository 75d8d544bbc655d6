"""
Recommendation synthesis: combines a fundamental score and the recent
technical trend into ordered, actionable suggestions.

Rules (evaluated in order, each appends exactly one suggestion)
---------------------------------------------------------------
    1. Horizon   : score >= 70 → long-term (HODL)
                   score >= 40 → medium-term with risk management
                   otherwise   → high risk, experienced traders only
    2. Entry     : BULLISH → buying opportunity
                   BEARISH → wait for a better entry point
    3. Capital   : always "never invest more than you can afford to lose"

The disclaimer is returned in its own field, never inside ``suggestions``.
"""

from __future__ import annotations

from typing import Union

from cryptal.analysis import narratives
from cryptal.models.assessment import FundamentalAssessment, Recommendation
from cryptal.taxonomy.risk_taxonomy import RecentTrend

LONG_TERM_MIN_SCORE = 70
MEDIUM_TERM_MIN_SCORE = 40


def synthesize(
    fundamental:     FundamentalAssessment,
    technical_trend: Union[RecentTrend, str],
) -> Recommendation:
    """Build the recommendation for one asset.

    Args:
        fundamental:     Output of ``score_fundamentals()``.
        technical_trend: ``RecentTrend`` (or its string value) from the
                         technical assessment.

    Returns:
        Recommendation with three suggestions and the disclaimer.
    """
    return Recommendation(
        suggestions=[
            horizon_suggestion(fundamental.total_score),
            entry_suggestion(RecentTrend(technical_trend)),
            narratives.CAPITAL_PRESERVATION,
        ],
        disclaimer=narratives.DISCLAIMER,
    )


def horizon_suggestion(total_score: int) -> str:
    if total_score >= LONG_TERM_MIN_SCORE:
        return narratives.HORIZON_LONG_TERM
    if total_score >= MEDIUM_TERM_MIN_SCORE:
        return narratives.HORIZON_MEDIUM_TERM
    return narratives.HORIZON_HIGH_RISK


def entry_suggestion(trend: RecentTrend) -> str:
    if trend is RecentTrend.BULLISH:
        return narratives.ENTRY_FAVORABLE
    return narratives.ENTRY_WAIT
