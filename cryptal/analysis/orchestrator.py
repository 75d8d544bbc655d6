"""
Per-asset orchestration: runs the three engine components in dependency
order and bundles the results.

    score_fundamentals(snapshot)        ─┐
    analyze_technicals(series)  (opt.)  ─┼─> synthesize(fundamental, trend)
                                         │
                                         └─> AssetAssessment

The components never call each other; this module is the caller. When the
technical analysis is unavailable (no series, or ``InsufficientDataError``)
the entry-timing suggestion falls back to the BEARISH branch, the same
"wait for a better entry" advice the dashboard has always shown in that case.
"""

from __future__ import annotations

import logging
from typing import Optional

from cryptal.analysis import narratives
from cryptal.analysis.fundamental import score_fundamentals
from cryptal.analysis.synthesizer import synthesize
from cryptal.analysis.technical import InsufficientDataError, analyze_technicals
from cryptal.models.assessment import AssetAssessment, TechnicalAssessment
from cryptal.models.market import MarketSnapshot, PriceSeries
from cryptal.taxonomy.risk_taxonomy import RecentTrend

logger = logging.getLogger(__name__)


def assess_asset(
    snapshot: MarketSnapshot,
    series:   Optional[PriceSeries] = None,
    *,
    asset_id: Optional[str] = None,
) -> AssetAssessment:
    """Produce the full assessment for one asset.

    Args:
        snapshot: Fundamental inputs.
        series:   Price history, or ``None`` to skip technical analysis.
        asset_id: Optional provider coin id carried into the output.

    Returns:
        AssetAssessment. ``technical`` is ``None`` and ``technical_note``
        explains why when the price history is missing or too short.
    """
    label = asset_id or "<asset>"
    ctx = {"asset_id": asset_id}

    fundamental = score_fundamentals(snapshot)
    logger.info(
        "%s: fundamental score %d (%s), %d factor(s)",
        label, fundamental.total_score, fundamental.risk_tier.value, len(fundamental.factors),
        extra=ctx,
    )

    technical: Optional[TechnicalAssessment] = None
    technical_note: Optional[str] = None
    if series is None:
        technical_note = narratives.NO_HISTORY_NOTE
        logger.info(
            "%s: no price history supplied; technical analysis skipped", label, extra=ctx
        )
    else:
        try:
            technical = analyze_technicals(series)
        except InsufficientDataError as exc:
            technical_note = narratives.INSUFFICIENT_DATA_NOTE
            logger.warning("%s: %s", label, exc, extra=ctx)
        else:
            logger.info(
                "%s: trend %s / %s, volatility %.2f%% (%s)",
                label,
                technical.recent_trend.value,
                technical.long_trend.value,
                technical.volatility_pct,
                technical.volatility_tier.value,
                extra=ctx,
            )

    trend = technical.recent_trend if technical is not None else RecentTrend.BEARISH
    recommendation = synthesize(fundamental, trend)

    return AssetAssessment(
        asset_id=asset_id,
        fundamental=fundamental,
        technical=technical,
        technical_note=technical_note,
        recommendation=recommendation,
    )
