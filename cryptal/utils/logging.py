"""
Logging setup for the Cryptal CLI.

Call ``configure_logging(config, debug=...)`` once at CLI entry, before any
payload is read. Library modules only use ``logging.getLogger(__name__)``.

Console output goes to stderr: ``cryptal analyze`` prints its JSON report on
stdout and that stream must stay parseable.

``debug=True`` (``AppConfig.debug`` / ``CRYPTAL_DEBUG``) lowers the level to
DEBUG regardless of ``[logging] level``; the scorer then reports every
skipped factor.

JSON format (``json_format = true`` in config/default.toml [logging]) emits one
object per line. Per-asset records carry the asset id passed through
``extra=``::

    {"ts": "2026-02-24T15:00:00Z", "level": "INFO",
     "logger": "cryptal.analysis.orchestrator", "msg": "...", "asset_id": "bitcoin"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cryptal.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, plus any ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(extra_fields(record))
        return json.dumps(payload, default=str, ensure_ascii=False)


def extra_fields(record: logging.LogRecord) -> dict:
    """Fields attached to ``record`` through ``extra=``."""
    return {
        key: val
        for key, val in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


def resolve_level(config: "LoggingConfig", debug: bool = False) -> int:
    if debug:
        return logging.DEBUG
    return getattr(logging, config.level.upper(), logging.INFO)


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Configure the root logger.

    Args:
        config: ``[logging]`` section of ``AppConfig``.
        debug:  Force DEBUG level (``AppConfig.debug``).
    """
    level = resolve_level(config, debug)
    formatter: logging.Formatter = (
        _JsonFormatter()
        if config.json_format
        else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
