"""
Module: flow.mode

Purpose:
    Two-state enum for the responsive layout mode. Passed explicitly into
    every mode-dependent computation instead of being read from shared
    state.

Key Classes:
    - LayoutMode: EXPANDED (wide container) or COMPACT (narrow container)

Used By:
    - flow.config: Tolerance and gap lookup
    - flow.responsive: Mode transitions
    - flow.directives: Sizing policy
"""

from enum import Enum


class LayoutMode(Enum):
    """
    Responsive layout mode, analogous to a desktop/mobile breakpoint.

    Attributes:
        EXPANDED: Elements keep their original size and rows keep their
                  horizontal gaps and offsets.
        COMPACT: Elements stack vertically at full container width with
                 a fixed aspect ratio.

    Example:
        >>> LayoutMode("compact") is LayoutMode.COMPACT
        True
    """

    EXPANDED = "expanded"
    COMPACT = "compact"

    @property
    def is_compact(self) -> bool:
        return self is LayoutMode.COMPACT
