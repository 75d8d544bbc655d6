"""
JSON export helpers for assessment output.

``assessment_to_dict()`` is the single serialization path: it uses pydantic's
JSON mode so enums become their string values and derived display fields
(``risk_label``, ``risk_color``, ``summary``, ``trend_color``) are included.
Nothing engine-specific leaks into the output; it is plain JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def assessment_to_dict(model: BaseModel) -> dict[str, Any]:
    """Serialize any assessment model to JSON-compatible primitives."""
    return model.model_dump(mode="json")


def assessment_to_json(model: BaseModel, indent: int = 2) -> str:
    return json.dumps(assessment_to_dict(model), indent=indent or None, ensure_ascii=False)


def export_to_json(
    data: dict | list,
    path: Path,
    indent: int = 2,
) -> Path:
    """Write ``data`` to a pretty-printed UTF-8 JSON file.

    Args:
        data:   Dict or list to serialise.
        path:   Destination file path (parent dirs created if missing).
        indent: JSON indent; 0 writes compact output.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=indent or None, default=str, ensure_ascii=False),
        encoding="utf-8",
    )
    return path
