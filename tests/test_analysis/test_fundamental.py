"""
Tests for cryptal/analysis/fundamental.py.

What we test
------------
score_fundamentals():
  - All top bands → 95 / LOW.
  - Empty snapshot → only development + ATH factors fire (2 + 15 = 17).
  - Each dimension's band edges are strict (value == threshold drops a band).
  - Missing market cap skips both market-cap and volume-ratio factors.
  - Zero market cap skips the volume ratio.
  - Factor order is evaluation order, not score order.
  - total_score equals the sum of factor points.
  - Idempotent.

classify_risk():
  - Boundaries closed at the top: 80 LOW, 79 MEDIUM, 60 MEDIUM, 59 HIGH,
    40 HIGH, 39 VERY_HIGH.
"""

from __future__ import annotations

import pytest

from cryptal.analysis.fundamental import (
    SCORING_BANDS,
    classify_risk,
    evaluate_factor,
    score_fundamentals,
)
from cryptal.analysis.narratives import FACTOR_NARRATIVES
from cryptal.models.market import MarketSnapshot
from cryptal.taxonomy.risk_taxonomy import FactorCategory, RiskTier


def _points(snapshot: MarketSnapshot, category: FactorCategory) -> int | None:
    for f in score_fundamentals(snapshot).factors:
        if f.category == category:
            return f.points_awarded
    return None


# ── Whole-snapshot behaviour ──────────────────────────────────────────────────

class TestScoreFundamentals:
    def test_all_top_bands_give_95_low(self, strong_snapshot):
        result = score_fundamentals(strong_snapshot)
        assert result.total_score == 95
        assert result.risk_tier == RiskTier.LOW
        assert [f.points_awarded for f in result.factors] == [25, 20, 20, 15, 15]

    def test_empty_snapshot_scores_only_defaulted_dimensions(self, empty_snapshot):
        result = score_fundamentals(empty_snapshot)
        assert [f.category for f in result.factors] == [
            FactorCategory.DEVELOPMENT,
            FactorCategory.ATH_DISTANCE,
        ]
        assert result.total_score == 2 + 15
        assert result.risk_tier == RiskTier.VERY_HIGH

    def test_factor_order_is_evaluation_order(self):
        snap = MarketSnapshot(
            market_cap=5e7,          # 5
            volume_24h=1e7,          # ratio 0.2 → 20
            dev_commits_4w=100,      # 20
            community_score=10,      # 3
            ath_change_pct=-90,      # 2
        )
        result = score_fundamentals(snap)
        assert [f.category for f in result.factors] == list(FactorCategory)
        assert [f.points_awarded for f in result.factors] == [5, 20, 20, 3, 2]

    def test_total_equals_sum_of_factor_points(self, strong_snapshot):
        result = score_fundamentals(strong_snapshot)
        assert result.total_score == sum(f.points_awarded for f in result.factors)

    def test_missing_market_cap_skips_cap_and_ratio(self):
        snap = MarketSnapshot(volume_24h=5e8, community_score=50)
        cats = [f.category for f in score_fundamentals(snap).factors]
        assert FactorCategory.MARKET_CAP not in cats
        assert FactorCategory.VOLUME_RATIO not in cats
        assert FactorCategory.COMMUNITY in cats

    def test_missing_volume_skips_ratio_only(self):
        snap = MarketSnapshot(market_cap=2e9)
        cats = [f.category for f in score_fundamentals(snap).factors]
        assert FactorCategory.MARKET_CAP in cats
        assert FactorCategory.VOLUME_RATIO not in cats

    def test_zero_market_cap_skips_ratio(self):
        snap = MarketSnapshot(market_cap=0.0, volume_24h=1e6)
        result = score_fundamentals(snap)
        assert _points(snap, FactorCategory.MARKET_CAP) == 5
        assert _points(snap, FactorCategory.VOLUME_RATIO) is None
        assert result.total_score == 5 + 2 + 15

    def test_missing_community_skips_factor(self):
        snap = MarketSnapshot(market_cap=2e9, volume_24h=3e8, dev_commits_4w=60)
        assert _points(snap, FactorCategory.COMMUNITY) is None

    def test_narratives_come_from_catalog(self, strong_snapshot):
        for f in score_fundamentals(strong_snapshot).factors:
            assert f.narrative in FACTOR_NARRATIVES.values()

    def test_idempotent(self, strong_snapshot):
        first = score_fundamentals(strong_snapshot)
        second = score_fundamentals(strong_snapshot)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()


# ── Band edges ────────────────────────────────────────────────────────────────

class TestMarketCapBands:
    @pytest.mark.parametrize(
        "cap, expected",
        [(2e9, 25), (1e9 + 1, 25), (1e9, 15), (1e8 + 1, 15), (1e8, 5), (0.0, 5)],
    )
    def test_bands(self, cap, expected):
        assert _points(MarketSnapshot(market_cap=cap), FactorCategory.MARKET_CAP) == expected


class TestVolumeRatioBands:
    @pytest.mark.parametrize(
        "volume, expected",
        [(2e8, 20), (1e8, 10), (5e7, 10), (3e7, 3), (0.0, 3)],
    )
    def test_bands_against_1e9_cap(self, volume, expected):
        snap = MarketSnapshot(market_cap=1e9, volume_24h=volume)
        assert _points(snap, FactorCategory.VOLUME_RATIO) == expected


class TestDevelopmentBands:
    @pytest.mark.parametrize(
        "commits, expected",
        [(51, 20), (50, 10), (11, 10), (10, 2), (0, 2)],
    )
    def test_bands(self, commits, expected):
        snap = MarketSnapshot(dev_commits_4w=commits)
        assert _points(snap, FactorCategory.DEVELOPMENT) == expected

    def test_none_commits_default_to_zero(self):
        snap = MarketSnapshot(dev_commits_4w=None)
        assert _points(snap, FactorCategory.DEVELOPMENT) == 2


class TestCommunityBands:
    @pytest.mark.parametrize(
        "score, expected",
        [(100, 15), (70.5, 15), (70, 8), (30.5, 8), (30, 3), (0, 3)],
    )
    def test_bands(self, score, expected):
        snap = MarketSnapshot(community_score=score)
        assert _points(snap, FactorCategory.COMMUNITY) == expected


class TestAthDistanceBands:
    @pytest.mark.parametrize(
        "pct, expected",
        [
            (5.0, 15), (0.0, 15), (-19.9, 15),
            (-20.0, 10), (-49.9, 10),
            (-50.0, 5), (-79.9, 5),
            (-80.0, 2), (-99.0, 2),
        ],
    )
    def test_bands(self, pct, expected):
        snap = MarketSnapshot(ath_change_pct=pct)
        assert _points(snap, FactorCategory.ATH_DISTANCE) == expected


class TestEvaluateFactor:
    def test_every_band_has_a_narrative(self):
        for category, bands in SCORING_BANDS.items():
            for _, _, band in bands:
                assert (category, band) in FACTOR_NARRATIVES

    def test_every_band_list_ends_with_catch_all(self):
        for bands in SCORING_BANDS.values():
            assert bands[-1][0] is None

    def test_returns_fixed_narrative(self):
        factor = evaluate_factor(FactorCategory.MARKET_CAP, 5e9)
        assert factor.narrative.startswith(
            "This cryptocurrency has a large market capitalization"
        )


# ── Risk tiers ────────────────────────────────────────────────────────────────

class TestClassifyRisk:
    @pytest.mark.parametrize(
        "score, tier",
        [
            (100, RiskTier.LOW),
            (80, RiskTier.LOW),
            (79, RiskTier.MEDIUM),
            (60, RiskTier.MEDIUM),
            (59, RiskTier.HIGH),
            (40, RiskTier.HIGH),
            (39, RiskTier.VERY_HIGH),
            (0, RiskTier.VERY_HIGH),
        ],
    )
    def test_boundaries(self, score, tier):
        assert classify_risk(score) == tier
