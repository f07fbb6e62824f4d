"""
Module: memento

Purpose:
    Snapshot of the presentation attributes an element had before it was
    converted to flow layout, so a conversion can be reverted exactly.

Key Classes:
    - StyleMemento: Position, size, margin and display as style strings

Used By:
    - flow.session.LayoutSession: Captured in initialize(), consumed by reset()
    - surfaces.memory.MemorySurface: Reads and restores mementos
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Mapping


@dataclass(frozen=True, slots=True)
class StyleMemento:
    """
    Pre-conversion inline style of one element (immutable).

    An empty string means the attribute was not set inline, which is
    what a restore writes back.

    Example:
        >>> memento = StyleMemento.from_style({"position": "absolute", "width": "80px"})
        >>> memento.height
        ''
    """

    position: str = ""
    width: str = ""
    height: str = ""
    margin: str = ""
    display: str = ""

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        """Names of the style attributes a memento covers."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_style(cls, style: Mapping[str, str]) -> StyleMemento:
        """Capture the covered attributes from a style mapping; others are ignored."""
        return cls(**{name: style.get(name, "") for name in cls.attribute_names()})

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> StyleMemento:
        return cls.from_style(data)
