"""
ASCII terminal formatters for the ``cryptal analyze --format text`` report.

All formatters accept assessment models and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``). Tier colors are
printed as hex codes next to the label rather than as terminal escapes, so
the output is identical when piped to a file.

Example::

  == Fundamental Analysis ==
    Score:      95/100
    Risk Level: LOW RISK (#059669)
    - This cryptocurrency has a large market capitalization, ...
    Recommendation:
      Based on strong fundamentals including ...
"""

from __future__ import annotations

import textwrap
from typing import Optional

from cryptal.models.assessment import (
    AssetAssessment,
    FundamentalAssessment,
    Recommendation,
    TechnicalAssessment,
)

_WRAP = 76


def format_money(value: float, currency_symbol: str = "₹") -> str:
    """``1234567.891`` → ``"₹1,234,567.89"``."""
    return f"{currency_symbol}{value:,.2f}"


def _bullet(text: str, indent: int = 2) -> str:
    pad = " " * indent
    return textwrap.fill(
        text, width=_WRAP, initial_indent=f"{pad}- ", subsequent_indent=f"{pad}  "
    )


def format_fundamental(assessment: FundamentalAssessment) -> str:
    """Render score, risk level, factor narratives, and the tier verdict."""
    lines = [
        "== Fundamental Analysis ==",
        f"  Score:      {assessment.total_score}/100",
        f"  Risk Level: {assessment.risk_label} ({assessment.risk_color})",
    ]
    for factor in assessment.factors:
        lines.append(_bullet(f"[+{factor.points_awarded}] {factor.narrative}"))
    lines.append("  Recommendation:")
    lines.append(
        textwrap.fill(
            assessment.summary, width=_WRAP, initial_indent="    ", subsequent_indent="    "
        )
    )
    return "\n".join(lines)


def format_technical(
    assessment: Optional[TechnicalAssessment],
    note: Optional[str] = None,
    currency_symbol: str = "₹",
) -> str:
    """Render trend, volatility, averages, and support/resistance.

    When ``assessment`` is ``None`` the section shows ``note`` instead.
    """
    lines = ["== Technical Analysis =="]
    if assessment is None:
        lines.append(f"  {note or 'Technical analysis unavailable'}")
        return "\n".join(lines)

    def money(value: float) -> str:
        return format_money(value, currency_symbol)

    lines.extend(
        [
            f"  Current Trend:    {assessment.recent_trend.value} ({assessment.trend_color})",
            f"  Long-term Trend:  {assessment.long_trend.value}",
            f"  Volatility:       {assessment.volatility_tier.value} "
            f"({assessment.volatility_pct:.2f}%)",
            f"  7-day Average:    {money(assessment.ma7)}",
            f"  30-day Average:   {money(assessment.ma30)}",
            f"  Support Level:    {money(assessment.support)}",
            f"  Resistance Level: {money(assessment.resistance)}",
        ]
    )
    return "\n".join(lines)


def format_recommendation(recommendation: Recommendation) -> str:
    """Render suggestions as bullets followed by the disclaimer line."""
    lines = ["== Investment Suggestions =="]
    lines.extend(_bullet(s) for s in recommendation.suggestions)
    lines.append("")
    lines.append(
        textwrap.fill(
            f"Disclaimer: {recommendation.disclaimer}",
            width=_WRAP,
            initial_indent="  ",
            subsequent_indent="  ",
        )
    )
    return "\n".join(lines)


def format_asset_report(report: AssetAssessment, currency_symbol: str = "₹") -> str:
    """Full text report for one asset: header + the three sections."""
    title = f"Assessment: {report.asset_id}" if report.asset_id else "Assessment"
    sections = [
        title,
        "=" * len(title),
        format_fundamental(report.fundamental),
        format_technical(report.technical, report.technical_note, currency_symbol),
        format_recommendation(report.recommendation),
    ]
    return "\n\n".join(sections)
