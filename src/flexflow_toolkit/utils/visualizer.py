"""
Module: utils.visualizer

Purpose:
    Debug visualization for row grouping. Draws every element box in its
    row's color together with the row envelope, to help diagnose why
    elements did or did not end up in the same row.

Key Functions:
    - visualize_rows(): Create debug image with row overlays
    - save_debug_overlay(): Save visualization to disk

Dependencies:
    - PIL: Image drawing
    - core.models: FlexRow

Used By:
    - cli: --debug-image option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from flexflow_toolkit.core.models import FlexRow
from flexflow_toolkit.flow.config import FlowConfig
from flexflow_toolkit.flow.metrics import row_gap

logger = logging.getLogger(__name__)

# Visualization constants
ROW_COLORS = [
    (230, 57, 70, 180),     # Red
    (29, 53, 87, 180),      # Navy
    (42, 157, 143, 180),    # Teal
    (244, 162, 97, 180),    # Orange
    (131, 56, 236, 180),    # Purple
]
ENVELOPE_ALPHA = 40
LABEL_BG_COLOR = (0, 0, 0, 200)
LABEL_TEXT_COLOR = (255, 255, 255)
BOX_LINE_WIDTH = 2
PADDING = 20


def _canvas_size(rows: Sequence[FlexRow], origin: Tuple[float, float]) -> Tuple[int, int]:
    """Smallest canvas that fits every element plus padding."""
    if not rows:
        return (PADDING * 2, PADDING * 2)
    ox, oy = origin
    right = max(el.right for row in rows for el in row.elements)
    bottom = max(row.bottom for row in rows)
    return (int(right - ox) + PADDING * 2, int(bottom - oy) + PADDING * 2)


def visualize_rows(
    rows: Sequence[FlexRow],
    size: Optional[Tuple[int, int]] = None,
    origin: Tuple[float, float] = (0, 0),
    config: Optional[FlowConfig] = None,
) -> Image.Image:
    """
    Draw rows as colored boxes on a white canvas.

    Each row gets one color. The row envelope is shaded across the full
    canvas width and labeled "R<n> gap=<g>".

    Args:
        rows: Rows from group_into_rows()
        size: Canvas size (default: fit all elements)
        origin: Container (left, top) subtracted from element coordinates
        config: Used for the row-gap fallback shown in labels

    Returns:
        RGB image with overlays

    Example:
        >>> img = visualize_rows(rows)
        >>> img.save("rows.png")
    """
    config = config or FlowConfig()
    width, height = size or _canvas_size(rows, origin)
    ox, oy = origin[0] - PADDING, origin[1] - PADDING

    image = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    overlay = Image.new("RGBA", image.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)
    font = ImageFont.load_default()

    for index, row in enumerate(rows):
        color = ROW_COLORS[index % len(ROW_COLORS)]
        draw.rectangle(
            (0, row.top - oy, width - 1, row.bottom - oy),
            fill=color[:3] + (ENVELOPE_ALPHA,),
        )
        for element in row.elements:
            draw.rectangle(
                (element.left - ox, element.top - oy, element.right - ox, element.bottom - oy),
                outline=color,
                width=BOX_LINE_WIDTH,
            )
        gap = row_gap(row.elements, default=config.default_row_gap, round_result=config.round_row_gap)
        _draw_label(draw, (2, max(0, row.top - oy)), f"R{index} gap={gap}", font)

    image = Image.alpha_composite(image, overlay)
    return image.convert("RGB")


def _draw_label(
    draw: ImageDraw.ImageDraw,
    position: Tuple[float, float],
    text: str,
    font: ImageFont.ImageFont,
) -> None:
    x, y = position
    text_bbox = draw.textbbox((0, 0), text, font=font)
    text_width = text_bbox[2] - text_bbox[0]
    text_height = text_bbox[3] - text_bbox[1]
    draw.rectangle((x, y, x + text_width + 4, y + text_height + 4), fill=LABEL_BG_COLOR)
    draw.text((x + 2, y + 2), text, fill=LABEL_TEXT_COLOR, font=font)


def save_debug_overlay(
    rows: Sequence[FlexRow],
    output_path: Path,
    origin: Tuple[float, float] = (0, 0),
    config: Optional[FlowConfig] = None,
) -> Path:
    """
    Create and save a row visualization.

    Returns:
        Path to saved image
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    visualize_rows(rows, origin=origin, config=config).save(output_path)
    logger.debug(f"Saved row overlay: {output_path}")
    return output_path
