"""JSON rendering of engine results.

Machine-readable output for charting tools and pipelines. Rendered to a
string only: results are never written to disk.
"""

from __future__ import annotations

import json

from pydantic import BaseModel

from core.domain.models import Triangle


def render_json(model: BaseModel) -> str:
    """Serialize a result model as stable, indented JSON."""

    payload = model.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def render_triangle_json(triangle: Triangle) -> str:
    return json.dumps(triangle) + "\n"
