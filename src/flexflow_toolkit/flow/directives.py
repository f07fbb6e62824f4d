"""
Module: flow.directives

Purpose:
    Turn grouped rows into renderer-neutral layout directives. This is
    where the mode-dependent sizing policy lives: expanded rows keep
    original sizes and offsets, compact rows stack full-width elements
    with a fixed aspect ratio.

Key Functions:
    - build_layout_plan(): Main entry point

Key Classes:
    - ElementDirective: Sizing for one element
    - RowDirective: Flex line with its members
    - ContainerDirective: Outer column container
    - LayoutPlan: Complete output for one conversion

Dependencies:
    - flow.metrics: Spacing metrics
    - flow.config: Gap constants

Used By:
    - flow.session.LayoutSession.convert()
    - surfaces.memory.MemorySurface.apply_plan()
    - utils.serialization: Plan export
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional, Sequence

from flexflow_toolkit.core.models import FlexRow, PositionedElement

from .config import FlowConfig
from .metrics import element_margin_top, left_offset, row_gap, vertical_gap
from .mode import LayoutMode

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class ElementDirective:
    """
    How one element is sized inside its row.

    Attributes:
        handle: Element handle on the rendering surface
        width: Width style ("120px", "100%")
        height: Height style ("40px", "auto")
        margin_top: Stagger below the row top (expanded mode only)
        aspect_ratio: "w/h" of the measured geometry (compact mode only)
    """

    handle: Hashable
    width: str
    height: str
    margin_top: Optional[float] = None
    aspect_ratio: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"handle": str(self.handle), "width": self.width, "height": self.height}
        if self.margin_top is not None:
            d["margin_top"] = self.margin_top
        if self.aspect_ratio is not None:
            d["aspect_ratio"] = self.aspect_ratio
        return d


@dataclass(frozen=True)
class RowDirective:
    """
    One flex line.

    Attributes:
        direction: "row" (expanded) or "column" (compact)
        gap: Gap between members
        elements: Member directives in the order they must be appended
        left_offset: Left padding reproducing the row's original x (expanded only)
        margin_top: Space above the row; None for the first row
        wrap: Whether members may wrap onto further lines
        full_width: Whether the row spans the whole container
    """

    direction: str
    gap: float
    elements: tuple[ElementDirective, ...]
    left_offset: Optional[float] = None
    margin_top: Optional[float] = None
    wrap: bool = False
    full_width: bool = False

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "direction": self.direction,
            "gap": self.gap,
            "wrap": self.wrap,
            "full_width": self.full_width,
            "elements": [e.to_dict() for e in self.elements],
        }
        if self.left_offset is not None:
            d["left_offset"] = self.left_offset
        if self.margin_top is not None:
            d["margin_top"] = self.margin_top
        return d


@dataclass(frozen=True)
class ContainerDirective:
    """Outer container: a top-aligned column of rows."""

    gap: float
    direction: str = "column"
    align_items: str = "flex-start"
    width: str = "100%"
    overflow_x: str = "hidden"

    def to_dict(self) -> dict[str, Any]:
        return {
            "direction": self.direction,
            "gap": self.gap,
            "align_items": self.align_items,
            "width": self.width,
            "overflow_x": self.overflow_x,
        }


@dataclass(frozen=True)
class LayoutPlan:
    """
    Complete flow layout for one container (immutable).

    Example:
        >>> plan = build_layout_plan(rows, LayoutMode.EXPANDED, 0, FlowConfig())
        >>> plan.row_count
        2
    """

    mode: LayoutMode
    container: ContainerDirective
    rows: tuple[RowDirective, ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def handles(self) -> list:
        """All element handles in render order."""
        return [e.handle for row in self.rows for e in row.elements]

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "container": self.container.to_dict(),
            "rows": [r.to_dict() for r in self.rows],
        }


def build_element_directive(
    row_elements: Sequence[PositionedElement],
    element: PositionedElement,
    mode: LayoutMode,
) -> ElementDirective:
    """Apply the sizing policy for one element."""
    if mode.is_compact:
        geometry = element.geometry
        return ElementDirective(
            handle=element.handle,
            width="100%",
            height="auto",
            aspect_ratio=f"{_format_number(geometry.width)}/{_format_number(geometry.height)}",
        )
    return ElementDirective(
        handle=element.handle,
        width=element.original_size.width,
        height=element.original_size.height,
        margin_top=element_margin_top(row_elements, element),
    )


def build_row_directive(
    row: FlexRow,
    previous: Optional[FlexRow],
    mode: LayoutMode,
    container_left: float,
    config: FlowConfig,
) -> RowDirective:
    """Build the directive for one row, including its gap to the previous row."""
    elements = tuple(build_element_directive(row.elements, el, mode) for el in row.elements)

    margin_top = None
    if previous is not None:
        gap = vertical_gap(previous, row)
        if gap < 0:
            logger.warning(f"Rows overlap vertically by {-gap} (row top={row.top}); passing negative gap through")
        margin_top = min(gap, config.compact_vertical_gap_max) if mode.is_compact else gap

    if mode.is_compact:
        return RowDirective(
            direction="column",
            gap=config.compact_row_gap,
            elements=elements,
            margin_top=margin_top,
            full_width=True,
        )
    return RowDirective(
        direction="row",
        gap=row_gap(row.elements, default=config.default_row_gap, round_result=config.round_row_gap),
        elements=elements,
        left_offset=left_offset(row.elements, container_left),
        margin_top=margin_top,
        wrap=True,
    )


def build_layout_plan(
    rows: Sequence[FlexRow],
    mode: LayoutMode,
    container_left: float,
    config: FlowConfig,
) -> LayoutPlan:
    """
    Convert grouped rows into a layout plan for the given mode.

    Metrics are computed here, when rows are rendered, never stored on
    the rows themselves.

    Args:
        rows: Rows from group_into_rows()
        mode: Active layout mode
        container_left: Container left edge for row offsets
        config: Spacing constants

    Returns:
        LayoutPlan preserving row and element order
    """
    directives: List[RowDirective] = []
    previous: Optional[FlexRow] = None
    for row in rows:
        directives.append(build_row_directive(row, previous, mode, container_left, config))
        previous = row

    logger.debug(f"Built {mode.value} plan with {len(directives)} rows")
    return LayoutPlan(
        mode=mode,
        container=ContainerDirective(gap=config.container_gap(mode)),
        rows=tuple(directives),
    )
