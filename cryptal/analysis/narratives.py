"""
Static text catalog for assessments.

Factor and suggestion sentences live here, separate from the branch logic
in ``fundamental.py`` and ``synthesizer.py``. The per-tier verdict paragraphs
sit with the other tier display lookups in ``taxonomy/risk_taxonomy.py``.

FACTOR_NARRATIVES : (FactorCategory, band) -> explanation for one scored factor.
Suggestion texts  : horizon, entry timing, capital preservation, disclaimer.

Texts are reproduced verbatim from the Cryptal dashboard so that output stays
comparable with what users have already seen.
"""

from __future__ import annotations

from cryptal.taxonomy.risk_taxonomy import FactorCategory

# ── Fundamental factor narratives ─────────────────────────────────────────────

FACTOR_NARRATIVES: dict[tuple[FactorCategory, str], str] = {
    (FactorCategory.MARKET_CAP, "large"): (
        "This cryptocurrency has a large market capitalization, indicating strong "
        "adoption and institutional interest. This suggests a relatively stable investment."
    ),
    (FactorCategory.MARKET_CAP, "moderate"): (
        "The asset has a moderate market cap, indicating some level of adoption but "
        "may still be subject to high volatility and manipulation."
    ),
    (FactorCategory.MARKET_CAP, "small"): (
        "This is a small-cap cryptocurrency with limited liquidity and higher risk. "
        "It may offer high reward potential but should only be considered by "
        "experienced traders."
    ),
    (FactorCategory.VOLUME_RATIO, "high"): (
        "High trading volume relative to market cap indicates strong investor interest "
        "and healthy liquidity. This makes it easier to enter or exit positions without "
        "significant price slippage."
    ),
    (FactorCategory.VOLUME_RATIO, "moderate"): (
        "Moderate trading volume suggests decent liquidity, but investors should remain "
        "cautious as it may not support large trades easily."
    ),
    (FactorCategory.VOLUME_RATIO, "low"): (
        "Low trading volume compared to market cap indicates poor liquidity. This "
        "increases the risk of price manipulation and difficulty in exiting positions "
        "quickly."
    ),
    (FactorCategory.DEVELOPMENT, "active"): (
        "Active development over the past month shows strong commitment from the core "
        "team. Frequent updates often lead to better security, new features, and "
        "long-term sustainability."
    ),
    (FactorCategory.DEVELOPMENT, "moderate"): (
        "Development activity is ongoing, though at a moderate pace. The project appears "
        "maintained but lacks rapid innovation."
    ),
    (FactorCategory.DEVELOPMENT, "inactive"): (
        "Very little or no recent development activity detected. This could signal lack "
        "of interest or abandonment of the project, which increases investment risk."
    ),
    (FactorCategory.COMMUNITY, "strong"): (
        "Strong community engagement across social media platforms and forums. A "
        "passionate user base can drive adoption, provide feedback, and help sustain "
        "interest in the project."
    ),
    (FactorCategory.COMMUNITY, "moderate"): (
        "Community presence is visible but not overwhelming. There's room for growth in "
        "terms of awareness and grassroots support."
    ),
    (FactorCategory.COMMUNITY, "minimal"): (
        "Minimal community involvement. Lack of public interest reduces the likelihood "
        "of widespread adoption and support during critical periods."
    ),
    (FactorCategory.ATH_DISTANCE, "near"): (
        "Currently near all-time high levels, suggesting strong investor confidence and "
        "positive momentum. This could indicate a bullish phase, though caution is "
        "advised about entering at elevated prices."
    ),
    (FactorCategory.ATH_DISTANCE, "moderate"): (
        "Trading moderately below all-time highs. The asset may be consolidating or "
        "undergoing a correction. Could represent a good buying opportunity depending "
        "on other fundamentals."
    ),
    (FactorCategory.ATH_DISTANCE, "significant"): (
        "Significantly below all-time highs. This may suggest underlying issues such as "
        "loss of confidence, regulatory problems, or failure to deliver on promises."
    ),
    (FactorCategory.ATH_DISTANCE, "far"): (
        "Far below all-time highs. Recovery is uncertain and would likely require major "
        "improvements or external catalysts. High-risk investment."
    ),
}


# ── Recommendation texts ──────────────────────────────────────────────────────

HORIZON_LONG_TERM = "Suitable for long-term investment (HODL strategy)"
HORIZON_MEDIUM_TERM = "⚖️ Consider for medium-term investment with risk management"
HORIZON_HIGH_RISK = "⚠️ High-risk investment - only for experienced traders"

ENTRY_FAVORABLE = "Technical indicators suggest buying opportunity"
ENTRY_WAIT = "Consider waiting for better entry points"

CAPITAL_PRESERVATION = "Never invest more than you can afford to lose"

DISCLAIMER = (
    "This is not financial advice. Cryptocurrency investments are subject to "
    "market risks."
)

INSUFFICIENT_DATA_NOTE = "Insufficient data for technical analysis"
NO_HISTORY_NOTE = "No price history supplied"


def factor_narrative(category: FactorCategory, band: str) -> str:
    """Look up the explanation for one scored factor.

    Raises:
        KeyError: If ``(category, band)`` is not in the catalog.
    """
    return FACTOR_NARRATIVES[(FactorCategory(category), band)]
