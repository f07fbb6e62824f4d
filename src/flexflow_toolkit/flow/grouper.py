"""
Module: flow.grouper

Purpose:
    Cluster positioned elements into ordered rows by vertical proximity.

Key Functions:
    - group_into_rows(): Main grouping function

Algorithm:
    1. Sort a working copy by top (stable, equal tops ordered by bottom)
    2. Walk the sorted elements, comparing each with the one before it
    3. An element joins the open row if it starts before the previous
       element's bottom plus the tolerance
    4. Otherwise close the open row and start a new one
    5. Always close the final row

Dependencies:
    - core.models: PositionedElement, FlexRow

Used By:
    - flow.session: initialize() and mode transitions
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from flexflow_toolkit.core.models import FlexRow, PositionedElement

logger = logging.getLogger(__name__)


def group_into_rows(
    elements: Iterable[PositionedElement],
    tolerance: float,
) -> List[FlexRow]:
    """
    Group elements into rows ordered top to bottom.

    The input is never reordered; grouping works on its own sorted copy.
    Proximity compares against the previous element in top order, not the
    row envelope, so a tall element can pull a later one into its row.

    Args:
        elements: Elements in any order (may be empty)
        tolerance: Maximum gap between one element's bottom and the next
            element's top for them to share a row

    Returns:
        Rows ordered by top, each with members ordered by left.
        Empty input yields an empty list.

    Raises:
        ValueError: If tolerance is negative

    Example:
        >>> rows = group_into_rows(elements, tolerance=10)
        >>> [len(row) for row in rows]
        [2, 1]
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative: {tolerance}")

    # A plain stable sort on top would let input order pick which of two
    # equal-top boxes a later element is compared against, so equal tops
    # are ordered by bottom. Only exact (top, bottom) ties keep input order.
    working = sorted(elements, key=lambda el: (el.top, el.bottom))
    if not working:
        return []

    rows: List[FlexRow] = []
    current: List[PositionedElement] = [working[0]]

    for previous, element in zip(working, working[1:]):
        if element.top < previous.bottom + tolerance:
            current.append(element)
        else:
            rows.append(FlexRow.from_elements(current))
            current = [element]

    rows.append(FlexRow.from_elements(current))

    logger.debug(
        f"Grouped {len(working)} elements into {len(rows)} rows "
        f"(tolerance={tolerance}, sizes={[len(r) for r in rows]})"
    )
    return rows
