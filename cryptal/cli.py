"""
Cryptal — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action.
  5. Report result to stdout.

Install and run::

    pip install -e .
    cryptal --help
    cryptal validate-config
    cryptal analyze --snapshot data/bitcoin.json --prices data/bitcoin_chart.json
    cryptal analyze --snapshot data/bitcoin.json --format text
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="cryptal",
    help="Cryptal — explainable crypto asset risk assessment.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from cryptal.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; debug mode forces DEBUG level."""
    from cryptal.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


def _load_payload_or_exit(path_str: str, what: str) -> dict:
    from cryptal.ingestion.coingecko import PayloadError, load_json_payload

    path = Path(path_str)
    if not path.exists():
        typer.echo(f"[ERROR] {what} file not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return load_json_payload(path)
    except (PayloadError, OSError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("analyze")
def analyze(
    snapshot_file: str = typer.Option(
        ...,
        "--snapshot",
        "-s",
        help="JSON market snapshot (CoinGecko /coins/{id}, a /coins/markets row, "
             "or a native MarketSnapshot object).",
    ),
    prices_file: Optional[str] = typer.Option(
        None,
        "--prices",
        "-p",
        help="JSON price history (CoinGecko market_chart or native PriceSeries). "
             "Omit to skip technical analysis.",
    ),
    asset_id: Optional[str] = typer.Option(
        None,
        "--asset-id",
        help="Asset label for the report (defaults to the payload 'id').",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: json or text (default from config).",
    ),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON assessment to this file instead of stdout.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Assess one asset: fundamental score, technical trend, and suggestions.

    Technical analysis needs at least 10 price points; shorter histories are
    reported as insufficient and the suggestions fall back to waiting for a
    better entry point.
    """
    from pydantic import ValidationError

    from cryptal.analysis.orchestrator import assess_asset
    from cryptal.ingestion.coingecko import (
        check_history_coverage,
        series_from_payload,
        snapshot_from_payload,
    )
    from cryptal.reporting.export import assessment_to_dict, assessment_to_json, export_to_json
    from cryptal.reporting.formatters import format_asset_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    fmt = (output_format or config.report.default_format).lower()
    if fmt not in ("json", "text"):
        typer.echo(f"[ERROR] Unsupported format '{fmt}'. Use json or text.", err=True)
        raise typer.Exit(code=1)

    snapshot_payload = _load_payload_or_exit(snapshot_file, "Snapshot")
    prices_payload = _load_payload_or_exit(prices_file, "Prices") if prices_file else None

    try:
        snapshot = snapshot_from_payload(snapshot_payload, config.report.vs_currency)
        series = series_from_payload(prices_payload) if prices_payload is not None else None
    except ValidationError as exc:
        typer.echo(f"[ERROR] Input validation failed:\n{exc}", err=True)
        raise typer.Exit(code=1)

    if series is not None:
        check_history_coverage(series, config.ingestion.history_days)

    label = asset_id or snapshot_payload.get("id")
    report = assess_asset(
        snapshot, series, asset_id=str(label) if label is not None else None
    )

    if output_path:
        written = export_to_json(
            assessment_to_dict(report), Path(output_path), indent=config.report.json_indent
        )
        typer.echo(f"[OK] Assessment written to {written}")
        return

    if fmt == "text":
        typer.echo(format_asset_report(report, config.report.currency_symbol))
    else:
        typer.echo(assessment_to_json(report, indent=config.report.json_indent))


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Quote currency:   {config.report.vs_currency} ({config.report.currency_symbol})")
    typer.echo(f"  Output format:    {config.report.default_format}")
    typer.echo(f"  History window:   {config.ingestion.history_days}d")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
