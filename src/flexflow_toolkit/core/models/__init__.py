"""
Core Models Package

Immutable data models shared by the flow pipeline.

All models are frozen dataclasses: geometry is captured once per analysis
pass and rows are rebuilt wholesale rather than updated, so nothing in a
grouping pass can observe a half-modified snapshot.
"""

from .geometry import ElementGeometry, OriginalSize, PositionedElement
from .rows import FlexRow
from .memento import StyleMemento

__all__ = [
    "ElementGeometry",
    "OriginalSize",
    "PositionedElement",
    "FlexRow",
    "StyleMemento",
]
