"""
Module: rows

Purpose:
    FlexRow - a cluster of positioned elements that will render as one
    horizontal flex line.

Key Classes:
    - FlexRow: Ordered, non-empty row with its vertical envelope

Dependencies:
    - core.models.geometry: PositionedElement

Used By:
    - flow.grouper: Produces rows
    - flow.metrics: Reads row members
    - flow.directives: Converts rows to layout directives
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .geometry import PositionedElement


@dataclass(frozen=True)
class FlexRow:
    """
    A row of elements sorted left-to-right (immutable).

    Attributes:
        elements: Members ordered ascending by left edge
        top: Minimum top among members
        bottom: Maximum bottom among members

    Invariants:
        - elements is never empty
        - elements is non-decreasing in left

    Example:
        >>> row = FlexRow.from_elements([b, a])  # a.left < b.left
        >>> row.elements == (a, b)
        True
    """

    elements: tuple[PositionedElement, ...]
    top: float
    bottom: float

    def __post_init__(self) -> None:
        """Validate row on construction."""
        if not self.elements:
            raise ValueError("FlexRow must contain at least one element")
        if self.bottom < self.top:
            raise ValueError(f"bottom must be >= top: {self.bottom} < {self.top}")

    @classmethod
    def from_elements(cls, members: Iterable[PositionedElement]) -> FlexRow:
        """Sort members by left (stable) and compute the row envelope."""
        ordered = tuple(sorted(members, key=lambda el: el.left))
        if not ordered:
            raise ValueError("FlexRow must contain at least one element")
        return cls(
            elements=ordered,
            top=min(el.top for el in ordered),
            bottom=max(el.bottom for el in ordered),
        )

    @property
    def height(self) -> float:
        """Height of the row envelope."""
        return self.bottom - self.top

    @property
    def handles(self) -> tuple:
        """Element handles in row order."""
        return tuple(el.handle for el in self.elements)

    def __len__(self) -> int:
        return len(self.elements)
