"""
Assessment output models.

``FundamentalAssessment`` — weighted 0–100 score, risk tier, and the ordered
factor explanations that produced it.

``TechnicalAssessment`` — trend, volatility, and support/resistance levels
derived from a price series.

``Recommendation`` — ordered suggestions plus a disclaimer that is kept in
its own field so a UI can style it differently.

``AssetAssessment`` — the bundle produced by the orchestration helper.

All models are frozen and serialize to plain JSON with
``model_dump(mode="json")``. Display metadata (labels, colors, verdict text)
is exposed through ``computed_field`` so it travels with the JSON without
being stored state.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator

from cryptal.taxonomy.risk_taxonomy import (
    FactorCategory,
    LongTrend,
    RecentTrend,
    RiskTier,
    VolatilityTier,
)
from cryptal.taxonomy import risk_taxonomy


class FundamentalFactor(BaseModel):
    """One evaluated fundamental dimension.

    Attributes:
        category: Which dimension was scored.
        points_awarded: Points contributed to the total score.
        narrative: Fixed explanation text for the matched band.
    """

    model_config = ConfigDict(frozen=True)

    category: FactorCategory
    points_awarded: int
    narrative: str

    @field_validator("points_awarded")
    @classmethod
    def validate_points(cls, v: int) -> int:
        if v < 0:
            raise ValueError("points_awarded must be non-negative.")
        return v


class FundamentalAssessment(BaseModel):
    """Fundamental score with its explanation.

    Attributes:
        total_score: Sum of ``points_awarded`` over ``factors`` (0–100).
        risk_tier: Tier derived from ``total_score``.
        factors: Scored dimensions in evaluation order (not score order).
    """

    model_config = ConfigDict(frozen=True)

    total_score: int
    risk_tier: RiskTier
    factors: list[FundamentalFactor] = []

    @field_validator("total_score")
    @classmethod
    def validate_total_score(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"total_score must be in [0, 100], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_score_matches_factors(self) -> "FundamentalAssessment":
        awarded = sum(f.points_awarded for f in self.factors)
        if awarded != self.total_score:
            raise ValueError(
                f"total_score ({self.total_score}) must equal the sum of "
                f"factor points ({awarded})."
            )
        return self

    @computed_field
    @property
    def risk_label(self) -> str:
        return risk_taxonomy.risk_label(self.risk_tier)

    @computed_field
    @property
    def risk_color(self) -> str:
        return risk_taxonomy.risk_color(self.risk_tier)

    @computed_field
    @property
    def summary(self) -> str:
        return risk_taxonomy.risk_summary(self.risk_tier)


class TechnicalAssessment(BaseModel):
    """Trend and volatility summary of a price series.

    Attributes:
        recent_trend: BULLISH if the last price is above ``ma7``.
        long_trend: UPTREND if ``ma7`` is above ``ma30``.
        volatility_pct: Sample std of log returns, in percent.
        volatility_tier: Coarse bucket of ``volatility_pct``.
        ma7: Mean of the last (up to) 7 prices.
        ma30: Mean of the last (up to) 30 prices.
        support: Lowest price in the last (up to) 30 points.
        resistance: Highest price in the last (up to) 30 points.
        current_price: Last price of the series.
        n_points: Length of the analysed series.
    """

    model_config = ConfigDict(frozen=True)

    recent_trend: RecentTrend
    long_trend: LongTrend
    volatility_pct: float
    volatility_tier: VolatilityTier
    ma7: float
    ma30: float
    support: float
    resistance: float
    current_price: float
    n_points: int

    @model_validator(mode="after")
    def validate_levels(self) -> "TechnicalAssessment":
        if self.support > self.resistance:
            raise ValueError(
                f"support ({self.support}) must be <= resistance ({self.resistance})."
            )
        if self.volatility_pct < 0:
            raise ValueError("volatility_pct must be non-negative.")
        return self

    @computed_field
    @property
    def trend_color(self) -> str:
        return risk_taxonomy.trend_color(self.recent_trend)


class Recommendation(BaseModel):
    """Synthesized, ordered suggestions plus a disclaimer.

    Attributes:
        suggestions: Horizon, entry-timing and capital-preservation advice,
            in that order.
        disclaimer: Fixed not-financial-advice notice.
    """

    model_config = ConfigDict(frozen=True)

    suggestions: list[str]
    disclaimer: str

    @field_validator("disclaimer")
    @classmethod
    def validate_disclaimer(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("disclaimer must not be empty.")
        return v


class AssetAssessment(BaseModel):
    """Everything the dashboard shows for one asset.

    Attributes:
        asset_id: Optional provider coin id (e.g. ``"bitcoin"``).
        fundamental: Fundamental score and factors.
        technical: Technical summary, or ``None`` when unavailable.
        technical_note: Why ``technical`` is ``None``; ``None`` otherwise.
        recommendation: Synthesized suggestions.
    """

    model_config = ConfigDict(frozen=True)

    asset_id: Optional[str] = None
    fundamental: FundamentalAssessment
    technical: Optional[TechnicalAssessment] = None
    technical_note: Optional[str] = None
    recommendation: Recommendation
