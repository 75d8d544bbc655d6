"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``CRYPTAL_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The analysis engine itself takes no configuration: its thresholds are part of
the scoring contract. ``AppConfig`` only governs the CLI shell around it
(logging, report output, payload currency).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class ReportConfig(BaseModel):
    """How assessments are rendered by the CLI."""

    model_config = ConfigDict(frozen=True)

    vs_currency: str = "inr"
    currency_symbol: str = "₹"
    json_indent: int = 2
    default_format: str = "json"

    @field_validator("vs_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("vs_currency must not be empty.")
        return v.strip().lower()

    @field_validator("json_indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"json_indent must be >= 0, got {v}.")
        return v

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid = {"json", "text"}
        if v.lower() not in valid:
            raise ValueError(f"default_format must be one of {sorted(valid)}, got '{v}'.")
        return v.lower()


class IngestionConfig(BaseModel):
    """Upstream history window.

    The engine never fetches; ``history_days`` is how much history the
    upstream provider should be asked for (30 days of daily closes covers
    the 30-point window used for ``ma30`` and support/resistance).
    ``cryptal analyze`` warns when a supplied series spans fewer days.
    """

    model_config = ConfigDict(frozen=True)

    history_days: int = 30

    @field_validator("history_days")
    @classmethod
    def validate_history_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"history_days must be >= 1, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    report: ReportConfig = ReportConfig()
    ingestion: IngestionConfig = IngestionConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent, built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        default_path = root / "config" / "default.toml"
        if default_path.exists():
            raw = _read_toml(default_path)
            config_path = default_path
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        raw = _read_toml(config_path)

    # Also merge local.toml if present (gitignored local overrides)
    if config_path is not None:
        local_config_path = config_path.parent / "local.toml"
        if local_config_path.exists():
            raw = _deep_merge(raw, _read_toml(local_config_path))

    # 3. Apply CRYPTAL_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply CRYPTAL_* env vars to the raw config dict.

    Supported overrides:
      CRYPTAL_LOG_LEVEL  → raw["logging"]["level"]
      CRYPTAL_CURRENCY   → raw["report"]["vs_currency"]
      CRYPTAL_DEBUG      → raw["debug"]
    """
    if log_level := os.environ.get("CRYPTAL_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if currency := os.environ.get("CRYPTAL_CURRENCY"):
        raw.setdefault("report", {})["vs_currency"] = currency

    if debug := os.environ.get("CRYPTAL_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        report=ReportConfig(**raw.get("report", {})),
        ingestion=IngestionConfig(**raw.get("ingestion", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
