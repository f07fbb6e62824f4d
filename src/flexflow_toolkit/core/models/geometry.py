"""
Module: geometry

Purpose:
    Immutable per-element geometry captured at analysis time. Every derived
    edge and center is computed once when the snapshot is taken and never
    recomputed during a grouping pass.

Key Classes:
    - ElementGeometry: Axis-aligned rectangle in container coordinates
    - OriginalSize: Pre-conversion size strings (explicit or measured)
    - PositionedElement: Handle + geometry + original size

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - core.models.rows.FlexRow
    - flow.grouper: Row clustering
    - flow.metrics: Spacing metrics
    - surfaces.memory: Geometry provider
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Hashable, Optional


@dataclass(frozen=True, slots=True)
class ElementGeometry:
    """
    Rectangle of one element in the coordinate space of its container.

    Build with from_rect() so the derived fields are consistent; the
    constructor validates them when called directly.

    Attributes:
        top: Y-coordinate of the top edge
        bottom: top + height
        left: X-coordinate of the left edge
        right: left + width
        width: Measured width
        height: Measured height
        center_x: Horizontal midpoint
        center_y: Vertical midpoint

    Invariants:
        - width >= 0 and height >= 0
        - bottom == top + height, right == left + width
        - center_x/center_y are the rectangle midpoints

    Example:
        >>> geom = ElementGeometry.from_rect(top=10, left=20, width=100, height=50)
        >>> geom.bottom, geom.right
        (60, 120)
        >>> geom.center_y
        35.0
    """

    top: float
    bottom: float
    left: float
    right: float
    width: float
    height: float
    center_x: float
    center_y: float

    def __post_init__(self) -> None:
        """Validate derived edges on construction."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0: {self.height}")
        if not math.isclose(self.bottom, self.top + self.height):
            raise ValueError(f"bottom must equal top + height: {self.bottom} != {self.top} + {self.height}")
        if not math.isclose(self.right, self.left + self.width):
            raise ValueError(f"right must equal left + width: {self.right} != {self.left} + {self.width}")
        if not math.isclose(self.center_x, self.left + self.width / 2):
            raise ValueError(f"center_x must be the horizontal midpoint: {self.center_x}")
        if not math.isclose(self.center_y, self.top + self.height / 2):
            raise ValueError(f"center_y must be the vertical midpoint: {self.center_y}")

    @classmethod
    def from_rect(cls, top: float, left: float, width: float, height: float) -> ElementGeometry:
        """Snapshot a rectangle, computing edges and centers once."""
        return cls(
            top=top,
            bottom=top + height,
            left=left,
            right=left + width,
            width=width,
            height=height,
            center_x=left + width / 2,
            center_y=top + height / 2,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize the source rectangle (derived fields are recomputed on load)."""
        return {"top": self.top, "left": self.left, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> ElementGeometry:
        """Deserialize from a dict with top, left, width, height."""
        return cls.from_rect(
            top=data["top"],
            left=data["left"],
            width=data["width"],
            height=data["height"],
        )

    def __repr__(self) -> str:
        return f"ElementGeometry(top={self.top}, left={self.left}, {self.width}x{self.height})"


def _px(value: float) -> str:
    """Format a measured length the way inline styles report it."""
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value}px"


@dataclass(frozen=True, slots=True)
class OriginalSize:
    """
    Size an element had before conversion, as style strings.

    Explicitly-set sizes are kept verbatim ("50%", "12rem"); otherwise
    the measured size is recorded in pixels so expanded-mode flow does
    not change the element's visual size.

    Example:
        >>> geom = ElementGeometry.from_rect(0, 0, 120, 40)
        >>> OriginalSize.resolve("", "", geom)
        OriginalSize(width='120px', height='40px')
        >>> OriginalSize.resolve("50%", "", geom).width
        '50%'
    """

    width: str
    height: str

    @classmethod
    def resolve(
        cls,
        explicit_width: Optional[str],
        explicit_height: Optional[str],
        geometry: ElementGeometry,
    ) -> OriginalSize:
        """Prefer explicit sizes, fall back to the measured geometry."""
        return cls(
            width=explicit_width or _px(geometry.width),
            height=explicit_height or _px(geometry.height),
        )

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class PositionedElement:
    """
    One canvas child at analysis time.

    The handle is an opaque reference owned by the caller (a node on the
    rendering surface). It is carried through grouping untouched and is
    what style appliers and mementos are keyed by.

    Attributes:
        handle: Rendering-surface node reference
        geometry: Snapshot of the element's rectangle
        original_size: Size to restore in expanded mode

    Example:
        >>> el = PositionedElement.capture("hero", top=0, left=0, width=100, height=50)
        >>> el.top, el.bottom
        (0, 50)
    """

    handle: Hashable
    geometry: ElementGeometry
    original_size: OriginalSize

    @classmethod
    def capture(
        cls,
        handle: Hashable,
        top: float,
        left: float,
        width: float,
        height: float,
        explicit_width: Optional[str] = None,
        explicit_height: Optional[str] = None,
    ) -> PositionedElement:
        """Take a snapshot of one element from its raw rectangle."""
        geometry = ElementGeometry.from_rect(top=top, left=left, width=width, height=height)
        return cls(
            handle=handle,
            geometry=geometry,
            original_size=OriginalSize.resolve(explicit_width, explicit_height, geometry),
        )

    # Shortcuts used heavily by grouping and metrics

    @property
    def top(self) -> float:
        return self.geometry.top

    @property
    def bottom(self) -> float:
        return self.geometry.bottom

    @property
    def left(self) -> float:
        return self.geometry.left

    @property
    def right(self) -> float:
        return self.geometry.right

    def to_dict(self) -> dict[str, Any]:
        return {
            "handle": str(self.handle),
            **self.geometry.to_dict(),
            "original_size": self.original_size.to_dict(),
        }
