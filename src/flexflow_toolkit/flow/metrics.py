"""
Module: flow.metrics

Purpose:
    Spacing metrics that reproduce a row's original arrangement once it is
    rendered as a flow layout. All functions are pure and never mutate
    their inputs.

Key Functions:
    - row_gap(): Average positive horizontal gap inside a row
    - left_offset(): Indentation of a row relative to its container
    - element_margin_top(): Vertical stagger of an element inside its row
    - vertical_gap(): Spacing between two consecutive rows

Dependencies:
    - core.models: PositionedElement, FlexRow

Used By:
    - flow.directives: Builds row and element directives
"""

from __future__ import annotations

import math
from typing import Sequence

from flexflow_toolkit.core.models import FlexRow, PositionedElement

from .config import DEFAULT_ROW_GAP


def _round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves rounding up."""
    return math.floor(value + 0.5)


def row_gap(
    elements: Sequence[PositionedElement],
    default: float = DEFAULT_ROW_GAP,
    round_result: bool = True,
) -> float:
    """
    Average of the positive gaps between horizontally consecutive elements.

    A gap is next.left - previous.right. Touching or overlapping pairs
    contribute nothing. When no positive gap exists (single element, or
    everything overlaps) the default is returned instead.

    Args:
        elements: Row members
        default: Fallback gap
        round_result: Round the average to a whole unit

    Returns:
        Gap to use between row members

    Example:
        >>> row_gap([a, b])  # a spans 0-100, b spans 150-250
        50
    """
    ordered = sorted(elements, key=lambda el: el.left)
    gaps = [
        current.left - previous.right
        for previous, current in zip(ordered, ordered[1:])
        if current.left - previous.right > 0
    ]
    if not gaps:
        return default

    average = sum(gaps) / len(gaps)
    return _round_half_up(average) if round_result else average


def left_offset(elements: Sequence[PositionedElement], container_left: float) -> float:
    """
    Indentation that puts the row's first element back at its original x.

    Args:
        elements: Row members ordered by left
        container_left: Left edge of the container in the same coordinate
            space as the element geometry

    Raises:
        ValueError: If elements is empty
    """
    if not elements:
        raise ValueError("left_offset requires at least one element")
    return elements[0].left - container_left


def element_margin_top(elements: Sequence[PositionedElement], element: PositionedElement) -> float:
    """
    Distance from the topmost member of the row down to this element.

    Preserves intra-row vertical stagger when the row renders with its
    members aligned to the top.
    """
    row_top = min(el.top for el in elements)
    return element.top - row_top


def vertical_gap(previous_row: FlexRow, current_row: FlexRow) -> float:
    """
    Space between the bottom of one row and the top of the next.

    Negative when the rows' envelopes overlap; clamping is left to the
    caller.
    """
    previous_bottom = max(el.bottom for el in previous_row.elements)
    current_top = min(el.top for el in current_row.elements)
    return current_top - previous_bottom
