"""
Serialization Utilities

Reads canvas descriptions into an in-memory surface and writes layout
plans out as JSON.

Canvas format:

    {
        "container": {"id": "canvas", "left": 0, "top": 0, "width": 800},
        "elements": [
            {"id": "hero", "top": 0, "left": 20, "width": 300, "height": 120,
             "style": {"position": "absolute", "width": "300px"}}
        ]
    }

Element ids must be unique; "style" is optional and holds inline
presentation attributes (an explicit width/height there becomes the
element's original size).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from flexflow_toolkit.flow.directives import LayoutPlan
from flexflow_toolkit.surfaces.memory import MemorySurface

DEFAULT_CONTAINER_ID = "canvas"


class SerializationError(ValueError):
    """Raised when canvas data is malformed."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


# ─────────────────────────────────────────────────────────────────────────────
# Canvas Loading
# ─────────────────────────────────────────────────────────────────────────────

def _number(data: dict[str, Any], key: str, path: str, default: float | None = None) -> float:
    value = data.get(key, default)
    if value is None:
        raise SerializationError(f"missing required field {key!r}", path=path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SerializationError(f"{key} must be a number, got {value!r}", path=f"{path}.{key}")
    return value


def surface_from_dict(data: dict[str, Any]) -> tuple[MemorySurface, str]:
    """
    Build a MemorySurface from canvas data.

    Args:
        data: Canvas dictionary (see module docstring)

    Returns:
        (surface, container_id)

    Raises:
        SerializationError: If required fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise SerializationError("canvas must be a JSON object")

    container_data = data.get("container", {})
    if not isinstance(container_data, dict):
        raise SerializationError("container must be an object", path="container")
    container_id = str(container_data.get("id", DEFAULT_CONTAINER_ID))

    surface = MemorySurface()
    surface.add_container(
        container_id,
        width=_number(container_data, "width", "container"),
        left=_number(container_data, "left", "container", default=0),
        top=_number(container_data, "top", "container", default=0),
    )

    elements = data.get("elements", [])
    if not isinstance(elements, list):
        raise SerializationError("elements must be a list", path="elements")

    for index, element in enumerate(elements):
        path = f"elements[{index}]"
        if not isinstance(element, dict):
            raise SerializationError("element must be an object", path=path)
        if "id" not in element:
            raise SerializationError("missing required field 'id'", path=path)
        style = element.get("style", {})
        if not isinstance(style, dict):
            raise SerializationError("style must be an object", path=f"{path}.style")
        width = _number(element, "width", path)
        height = _number(element, "height", path)
        if width < 0 or height < 0:
            raise SerializationError("width and height must be non-negative", path=path)
        top = _number(element, "top", path)
        left = _number(element, "left", path)
        try:
            surface.add_node(
                container_id,
                str(element["id"]),
                top=top,
                left=left,
                width=width,
                height=height,
                style={str(k): str(v) for k, v in style.items()},
            )
        except ValueError as e:
            raise SerializationError(str(e), path=f"{path}.id") from e

    return surface, container_id


def load_canvas(path: Path) -> tuple[MemorySurface, str]:
    """
    Load a canvas JSON file into a MemorySurface.

    Raises:
        SerializationError: If the file is not valid JSON or not a valid canvas
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SerializationError(f"invalid JSON: {e.msg} (line {e.lineno})", path=str(path)) from e
    return surface_from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Plan Export
# ─────────────────────────────────────────────────────────────────────────────

def plan_to_json(plan: LayoutPlan, indent: int = 2) -> str:
    """Serialize a layout plan to a JSON string."""
    return json.dumps(plan.to_dict(), indent=indent)


def save_plan(plan: LayoutPlan, path: Path) -> Path:
    """Write a layout plan to disk, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(plan_to_json(plan), encoding="utf-8")
    return path
