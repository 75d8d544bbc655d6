"""Tests for cryptal.reporting.formatters."""

from __future__ import annotations

from cryptal.analysis import narratives
from cryptal.analysis.fundamental import score_fundamentals
from cryptal.analysis.orchestrator import assess_asset
from cryptal.analysis.synthesizer import synthesize
from cryptal.analysis.technical import analyze_technicals
from cryptal.reporting.formatters import (
    format_asset_report,
    format_fundamental,
    format_money,
    format_recommendation,
    format_technical,
)
from cryptal.taxonomy.risk_taxonomy import RecentTrend


# ── format_money ──────────────────────────────────────────────────────────────


def test_format_money_default_symbol() -> None:
    """Rupee symbol, thousands separators, two decimals."""
    assert format_money(1234567.891) == "₹1,234,567.89"


def test_format_money_custom_symbol() -> None:
    assert format_money(0.5, "$") == "$0.50"


# ── format_fundamental ────────────────────────────────────────────────────────


def test_format_fundamental_header(strong_snapshot) -> None:
    """Score and risk label with its color appear on their own lines."""
    text = format_fundamental(score_fundamentals(strong_snapshot))
    lines = text.split("\n")
    assert lines[0] == "== Fundamental Analysis =="
    assert "  Score:      95/100" in lines
    assert "  Risk Level: LOW RISK (#059669)" in lines


def test_format_fundamental_lists_factor_points(strong_snapshot) -> None:
    """Each factor is a bullet prefixed with its points."""
    text = format_fundamental(score_fundamentals(strong_snapshot))
    for points in (25, 20, 15):
        assert f"[+{points}]" in text
    assert text.count("  - [+") == 5


def test_format_fundamental_includes_verdict(empty_snapshot) -> None:
    text = format_fundamental(score_fundamentals(empty_snapshot))
    assert "VERY HIGH RISK (#dc2626)" in text
    assert "Recommendation:" in text
    assert "Poor fundamentals" in text


# ── format_technical ──────────────────────────────────────────────────────────


def test_format_technical_values(rising_series) -> None:
    """Trend with color, volatility tier, and money-formatted levels."""
    text = format_technical(analyze_technicals(rising_series))
    assert "Current Trend:    BULLISH (#059669)" in text
    assert "Long-term Trend:  UPTREND" in text
    assert "Resistance Level: ₹40.00" in text
    assert "Support Level:    ₹11.00" in text


def test_format_technical_currency_symbol(rising_series) -> None:
    text = format_technical(analyze_technicals(rising_series), currency_symbol="$")
    assert "$40.00" in text
    assert "₹" not in text


def test_format_technical_unavailable_shows_note() -> None:
    text = format_technical(None, narratives.INSUFFICIENT_DATA_NOTE)
    assert text.split("\n") == [
        "== Technical Analysis ==",
        f"  {narratives.INSUFFICIENT_DATA_NOTE}",
    ]


def test_format_technical_unavailable_without_note() -> None:
    assert "unavailable" in format_technical(None)


# ── format_recommendation ─────────────────────────────────────────────────────


def test_format_recommendation(strong_snapshot) -> None:
    """Suggestions as bullets, disclaimer last and separated."""
    rec = synthesize(score_fundamentals(strong_snapshot), RecentTrend.BEARISH)
    text = format_recommendation(rec)
    assert f"  - {narratives.HORIZON_LONG_TERM}" in text
    assert f"  - {narratives.ENTRY_WAIT}" in text
    assert f"  - {narratives.CAPITAL_PRESERVATION}" in text
    assert text.rstrip().split("\n\n")[-1].lstrip().startswith("Disclaimer:")


# ── format_asset_report ───────────────────────────────────────────────────────


def test_format_asset_report_sections(strong_snapshot, rising_series) -> None:
    report = assess_asset(strong_snapshot, rising_series, asset_id="bitcoin")
    text = format_asset_report(report)
    assert text.startswith("Assessment: bitcoin\n===================")
    assert text.index("== Fundamental Analysis ==") < text.index("== Technical Analysis ==")
    assert text.index("== Technical Analysis ==") < text.index("== Investment Suggestions ==")


def test_format_asset_report_without_id(empty_snapshot) -> None:
    text = format_asset_report(assess_asset(empty_snapshot))
    assert text.startswith("Assessment\n==========")
    assert narratives.NO_HISTORY_NOTE in text
