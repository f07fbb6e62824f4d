"""
Module: flow.config

Purpose:
    Configuration for flow conversion. Defines proximity tolerances, the
    responsive breakpoint and the spacing constants emitted in layout
    directives.

Key Classes:
    - FlowConfig: Immutable flow configuration

Dependencies:
    - dataclasses (std)
    - flow.mode: LayoutMode

Used By:
    - flow.session: Tolerance selection
    - flow.responsive: Breakpoint
    - flow.directives: Gap constants
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from .mode import LayoutMode


# Container widths at or below this are compact. A single value is used for
# both the initial mode and resize transitions.
DEFAULT_COMPACT_THRESHOLD = 450
DEFAULT_ROW_GAP = 10


@dataclass(frozen=True)
class FlowConfig:
    """
    Configuration for flow conversion (immutable).

    Attributes:
        expanded_tolerance: Proximity tolerance in expanded mode
        compact_tolerance: Proximity tolerance in compact mode (wider, so
            more elements fold into a single vertical stack)
        compact_threshold: Container width at or below which the layout is compact
        default_row_gap: Row gap used when a row has no positive gaps
        compact_row_gap: Gap between stacked elements in compact rows
        compact_vertical_gap_max: Upper clamp for inter-row gaps in compact mode
        expanded_container_gap: Container-level gap in expanded mode
        compact_container_gap: Container-level gap in compact mode
        round_row_gap: Round averaged row gaps to whole units

    Example:
        >>> config = FlowConfig()
        >>> config.tolerance_for(LayoutMode.COMPACT)
        20
        >>> config.mode_for_width(450)
        <LayoutMode.COMPACT: 'compact'>
    """

    # Grouping
    expanded_tolerance: float = 10
    compact_tolerance: float = 20

    # Breakpoint
    compact_threshold: float = DEFAULT_COMPACT_THRESHOLD

    # Spacing
    default_row_gap: float = DEFAULT_ROW_GAP
    compact_row_gap: float = 8
    compact_vertical_gap_max: float = 16
    expanded_container_gap: float = 10
    compact_container_gap: float = 8

    # Behavior
    round_row_gap: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool):
                continue
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative: {value}")

    def tolerance_for(self, mode: LayoutMode) -> float:
        """Proximity tolerance used when grouping in the given mode."""
        return self.compact_tolerance if mode.is_compact else self.expanded_tolerance

    def container_gap(self, mode: LayoutMode) -> float:
        """Gap between rows at container level in the given mode."""
        return self.compact_container_gap if mode.is_compact else self.expanded_container_gap

    def mode_for_width(self, width: float) -> LayoutMode:
        """Map a container width onto a layout mode."""
        return LayoutMode.COMPACT if width <= self.compact_threshold else LayoutMode.EXPANDED
