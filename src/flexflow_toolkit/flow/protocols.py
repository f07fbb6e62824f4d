"""
Module: flow.protocols

Purpose:
    Structural interfaces for the collaborators a layout session drives:
    where geometry comes from, where directives go, and who reports
    container resizes.

Key Classes:
    - GeometryProvider: Snapshot children and their current styles
    - StyleApplier: Apply layout plans and restore mementos
    - WidthNotifier: Deliver container width changes

Used By:
    - flow.session.LayoutSession
    - surfaces.memory.MemorySurface: Reference implementation of all three
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Hashable, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexflow_toolkit.core.models import PositionedElement, StyleMemento
    from .directives import LayoutPlan


WidthListener = Callable[[float], None]


@runtime_checkable
class GeometryProvider(Protocol):
    """Supplies geometry for the direct children of a container."""

    def positioned_elements(self, container: Hashable) -> List[PositionedElement]:
        """Children in document order, geometry in container coordinates."""
        ...

    def capture_memento(self, handle: Hashable) -> StyleMemento:
        """Current inline presentation attributes of one child."""
        ...

    def container_left(self, container: Hashable) -> float:
        """Left edge of the container in the children's coordinate space."""
        ...


@runtime_checkable
class StyleApplier(Protocol):
    """Applies layout output to the rendering surface."""

    def apply_plan(self, container: Hashable, plan: LayoutPlan) -> None:
        """Lay the container out as the plan describes, keeping its order."""
        ...

    def restore(self, container: Hashable, handle: Hashable, memento: StyleMemento) -> None:
        """Restore one element's memento and append it back to the container."""
        ...

    def clear(self, container: Hashable) -> None:
        """Detach all children from the container before a restore."""
        ...


@runtime_checkable
class WidthNotifier(Protocol):
    """Delivers container width changes one at a time."""

    def subscribe(self, container: Hashable, listener: WidthListener) -> None:
        ...

    def unsubscribe(self, container: Hashable, listener: WidthListener) -> None:
        ...

