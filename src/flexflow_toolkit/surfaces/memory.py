"""
Module: surfaces.memory

Purpose:
    In-memory rendering surface. Holds containers and nodes with inline
    style dictionaries and implements every collaborator a LayoutSession
    needs, so conversions can be planned and inspected without a real
    renderer (tests, the CLI, headless code generation).

Key Classes:
    - SurfaceNode: One child with its design-time rectangle and style
    - SurfaceContainer: Container with child order and row wrappers
    - MemorySurface: GeometryProvider + StyleApplier + WidthNotifier

Dependencies:
    - core.models: PositionedElement, StyleMemento
    - flow.directives: LayoutPlan

Used By:
    - cli: Planning from canvas JSON
    - utils.serialization: Canvas loading
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional

from flexflow_toolkit.core.models import PositionedElement, StyleMemento
from flexflow_toolkit.flow.directives import ContainerDirective, ElementDirective, LayoutPlan, RowDirective
from flexflow_toolkit.flow.protocols import WidthListener

logger = logging.getLogger(__name__)


# Style keys written by apply_plan() that a memento does not cover.
# The surface keeps each node's own values for them from before its first
# plan and restore() puts those back.
FLOW_ONLY_ELEMENT_KEYS = ("flex-shrink", "min-width", "max-width", "margin-top", "aspect-ratio")


def _px(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value}px"


@dataclass
class SurfaceNode:
    """
    A child element on the surface.

    The rectangle is the design-time position in container coordinates;
    it is what positioned_elements() reports regardless of the current
    style.
    """

    handle: Hashable
    top: float
    left: float
    width: float
    height: float
    style: Dict[str, str] = field(default_factory=dict)


@dataclass
class SurfaceContainer:
    """
    A container and what is currently attached to it.

    Attributes:
        children: Element handles in render order
        rows: Row wrapper styles and their member handles (empty when
            the container is not converted)
    """

    handle: Hashable
    width: float
    left: float = 0
    top: float = 0
    style: Dict[str, str] = field(default_factory=dict)
    children: List[Hashable] = field(default_factory=list)
    rows: List[tuple[Dict[str, str], List[Hashable]]] = field(default_factory=list)


class MemorySurface:
    """
    Dictionary-backed rendering surface.

    Example:
        >>> surface = MemorySurface()
        >>> surface.add_container("canvas", width=800)
        >>> surface.add_node("canvas", "a", top=0, left=0, width=100, height=50)
        >>> [el.handle for el in surface.positioned_elements("canvas")]
        ['a']
    """

    def __init__(self) -> None:
        self._containers: Dict[Hashable, SurfaceContainer] = {}
        self._nodes: Dict[Hashable, SurfaceNode] = {}
        self._listeners: Dict[Hashable, List[WidthListener]] = {}
        self._flow_key_backups: Dict[Hashable, Dict[str, str]] = {}

    # ─────────────────────────────────────────────────────────────────────────
    # Building
    # ─────────────────────────────────────────────────────────────────────────

    def add_container(self, handle: Hashable, width: float, left: float = 0, top: float = 0) -> SurfaceContainer:
        if handle in self._containers:
            raise ValueError(f"Container already exists: {handle!r}")
        container = SurfaceContainer(handle=handle, width=width, left=left, top=top)
        self._containers[handle] = container
        return container

    def add_node(
        self,
        container: Hashable,
        handle: Hashable,
        top: float,
        left: float,
        width: float,
        height: float,
        style: Optional[Dict[str, str]] = None,
    ) -> SurfaceNode:
        if handle in self._nodes:
            raise ValueError(f"Node already exists: {handle!r}")
        node = SurfaceNode(handle=handle, top=top, left=left, width=width, height=height, style=dict(style or {}))
        self._nodes[handle] = node
        self.container(container).children.append(handle)
        return node

    def container(self, handle: Hashable) -> SurfaceContainer:
        try:
            return self._containers[handle]
        except KeyError:
            raise KeyError(f"Unknown container: {handle!r}") from None

    def node(self, handle: Hashable) -> SurfaceNode:
        try:
            return self._nodes[handle]
        except KeyError:
            raise KeyError(f"Unknown node: {handle!r}") from None

    def children(self, container: Hashable) -> List[Hashable]:
        """Handles currently attached to the container, in render order."""
        return list(self.container(container).children)

    # ─────────────────────────────────────────────────────────────────────────
    # GeometryProvider
    # ─────────────────────────────────────────────────────────────────────────

    def positioned_elements(self, container: Hashable) -> List[PositionedElement]:
        elements = []
        for handle in self.container(container).children:
            node = self._nodes[handle]
            elements.append(
                PositionedElement.capture(
                    handle,
                    top=node.top,
                    left=node.left,
                    width=node.width,
                    height=node.height,
                    explicit_width=node.style.get("width"),
                    explicit_height=node.style.get("height"),
                )
            )
        return elements

    def capture_memento(self, handle: Hashable) -> StyleMemento:
        return StyleMemento.from_style(self.node(handle).style)

    def container_left(self, container: Hashable) -> float:
        return self.container(container).left

    # ─────────────────────────────────────────────────────────────────────────
    # StyleApplier
    # ─────────────────────────────────────────────────────────────────────────

    def apply_plan(self, container: Hashable, plan: LayoutPlan) -> None:
        target = self.container(container)
        target.style.update(_container_style(plan.container))
        target.rows = []
        target.children = []
        for row in plan.rows:
            members = []
            for directive in row.elements:
                self._apply_element(directive)
                members.append(directive.handle)
            target.rows.append((_row_style(row), members))
            target.children.extend(members)
        logger.debug(f"Applied {plan.mode.value} plan to {container!r}: {len(target.children)} elements")

    def clear(self, container: Hashable) -> None:
        target = self.container(container)
        target.children = []
        target.rows = []

    def restore(self, container: Hashable, handle: Hashable, memento: StyleMemento) -> None:
        node = self.node(handle)
        for key in FLOW_ONLY_ELEMENT_KEYS:
            node.style.pop(key, None)
        node.style.update(self._flow_key_backups.pop(handle, {}))
        for key, value in memento.to_dict().items():
            if value:
                node.style[key] = value
            else:
                node.style.pop(key, None)
        self.container(container).children.append(handle)

    def _apply_element(self, directive: ElementDirective) -> None:
        style = self.node(directive.handle).style
        if directive.handle not in self._flow_key_backups:
            self._flow_key_backups[directive.handle] = {
                key: style[key] for key in FLOW_ONLY_ELEMENT_KEYS if key in style
            }
        for key in FLOW_ONLY_ELEMENT_KEYS:
            style.pop(key, None)
        style.update({"position": "static", "margin": "0", "flex-shrink": "0"})
        style["width"] = directive.width
        style["height"] = directive.height
        if directive.aspect_ratio is not None:
            style["max-width"] = "100%"
            style["aspect-ratio"] = directive.aspect_ratio
        else:
            style["min-width"] = "0"
        if directive.margin_top is not None:
            style["margin-top"] = _px(directive.margin_top)

    # ─────────────────────────────────────────────────────────────────────────
    # WidthNotifier
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, container: Hashable, listener: WidthListener) -> None:
        self._listeners.setdefault(container, []).append(listener)

    def unsubscribe(self, container: Hashable, listener: WidthListener) -> None:
        listeners = self._listeners.get(container, [])
        if listener in listeners:
            listeners.remove(listener)

    def resize(self, container: Hashable, width: float) -> None:
        """Change a container's width and notify listeners one at a time."""
        self.container(container).width = width
        for listener in list(self._listeners.get(container, [])):
            listener(width)


def _container_style(directive: ContainerDirective) -> Dict[str, str]:
    return {
        "display": "flex",
        "flex-direction": directive.direction,
        "gap": _px(directive.gap),
        "align-items": directive.align_items,
        "width": directive.width,
        "overflow-x": directive.overflow_x,
    }


def _row_style(row: RowDirective) -> Dict[str, str]:
    style = {
        "display": "flex",
        "align-items": "flex-start",
        "flex-direction": row.direction,
        "gap": _px(row.gap),
    }
    if row.wrap:
        style.update({"flex-wrap": "wrap", "min-width": "0", "flex-grow": "1"})
    if row.full_width:
        style["width"] = "100%"
    if row.left_offset is not None:
        style["padding-left"] = _px(row.left_offset)
    if row.margin_top is not None:
        style["margin-top"] = _px(row.margin_top)
    return style
