"""
Module: flow.session

Purpose:
    Orchestrate one conversion cycle for a container.
    Capture → Group → Convert → (resize → regroup → convert)* → Reset

Key Classes:
    - LayoutSession: Owns captured geometry, rows and style mementos
    - FlowError: Base exception for flow conversion
    - SessionError: Session used out of order
    - MementoNotFoundError: Reset found an element with no memento

Dependencies:
    - flow.grouper: Row clustering
    - flow.directives: Layout plan construction
    - flow.responsive: Mode transitions
    - flow.protocols: Collaborator interfaces

Used By:
    - cli: Command line planning
    - Embedding design tools
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Hashable, List, Optional, Sequence

from flexflow_toolkit.core.models import FlexRow, OriginalSize, PositionedElement, StyleMemento

from .config import FlowConfig
from .directives import LayoutPlan, build_layout_plan
from .grouper import group_into_rows
from .mode import LayoutMode
from .protocols import GeometryProvider, StyleApplier, WidthNotifier
from .responsive import ModeChange, ResponsiveModeController

logger = logging.getLogger(__name__)


class FlowError(Exception):
    """Error during flow conversion."""
    pass


class SessionError(FlowError):
    """Session operation called in an invalid state."""
    pass


class MementoNotFoundError(SessionError):
    """An element being reset has no captured memento."""

    def __init__(self, handle: Hashable):
        super().__init__(f"No style memento captured for element {handle!r}")
        self.handle = handle


class LayoutSession:
    """
    One container's conversion from absolute positioning to flow layout.

    Two element sequences are kept apart: the capture order, which is what
    reset() restores, and the working list handed to the grouper, which is
    free to be reordered. Within one cycle a memento is captured the first
    time initialize() sees a handle and never overwritten, so re-analysing
    a converted container cannot clobber its pre-conversion styles. reset()
    ends the cycle and forgets every memento; the next initialize() reads
    the container afresh.

    Attributes:
        container: Handle of the container being converted
        config: Flow configuration

    Example:
        >>> session = LayoutSession("canvas", width=1024)
        >>> session.initialize(surface, notifier=surface)
        >>> plan = session.convert(surface)
        >>> surface.resize("canvas", 400)  # re-lays out in compact mode
        >>> session.reset(surface)
    """

    def __init__(
        self,
        container: Hashable,
        config: Optional[FlowConfig] = None,
        width: Optional[float] = None,
    ):
        self.container = container
        self.config = config or FlowConfig()
        self._controller = ResponsiveModeController(self.config, initial_width=width)

        self._provider: Optional[GeometryProvider] = None
        self._notifier: Optional[WidthNotifier] = None
        self._applier: Optional[StyleApplier] = None

        self._capture_order: List[Hashable] = []
        self._mementos: Dict[Hashable, StyleMemento] = {}
        self._elements: tuple[PositionedElement, ...] = ()
        self._rows: List[FlexRow] = []
        self._converted = False

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def mode(self) -> LayoutMode:
        return self._controller.mode

    @property
    def is_initialized(self) -> bool:
        return self._provider is not None

    @property
    def is_converted(self) -> bool:
        return self._converted

    @property
    def elements(self) -> tuple[PositionedElement, ...]:
        """Latest geometry snapshot in provider (document) order."""
        return self._elements

    @property
    def rows(self) -> List[FlexRow]:
        """Rows from the latest grouping pass."""
        self._require_initialized("rows")
        return list(self._rows)

    @property
    def capture_order(self) -> List[Hashable]:
        """Handles in the order they were first captured."""
        return list(self._capture_order)

    def memento_for(self, handle: Hashable) -> StyleMemento:
        """Captured memento for a handle."""
        try:
            return self._mementos[handle]
        except KeyError:
            raise MementoNotFoundError(handle) from None

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def initialize(
        self,
        provider: GeometryProvider,
        notifier: Optional[WidthNotifier] = None,
    ) -> List[FlexRow]:
        """
        Capture mementos and geometry, then group into rows.

        Args:
            provider: Source of child geometry and styles
            notifier: Optional source of container width changes

        Returns:
            Rows for the current mode
        """
        self._provider = provider
        self._capture(provider, record_mementos=True)
        self._regroup()

        if notifier is not None and notifier is not self._notifier:
            self._stop_observing()
            notifier.subscribe(self.container, self.on_width_change)
            self._notifier = notifier

        logger.info(
            f"Initialized session for {self.container!r}: "
            f"{len(self._elements)} elements in {len(self._rows)} rows ({self.mode.value})"
        )
        return list(self._rows)

    def convert(
        self,
        applier: StyleApplier,
        rows: Optional[Sequence[FlexRow]] = None,
    ) -> LayoutPlan:
        """
        Hand a layout plan for the rows to the style applier.

        Args:
            applier: Applies the plan to the rendering surface
            rows: Rows to convert (default: the session's current rows)

        Returns:
            The plan that was applied

        Raises:
            SessionError: If called before initialize()
        """
        self._require_initialized("convert")
        plan = build_layout_plan(
            self._rows if rows is None else rows,
            self.mode,
            self._provider.container_left(self.container),
            self.config,
        )
        applier.apply_plan(self.container, plan)
        self._applier = applier
        self._converted = True

        logger.info(f"Converted {self.container!r} to {plan.row_count} {self.mode.value} rows")
        return plan

    def reset(self, applier: StyleApplier) -> None:
        """
        Restore every element's memento in original capture order.

        Every memento is looked up before anything is restored, so a
        missing one leaves the surface untouched. On success the session
        returns to its uninitialized state.

        Raises:
            SessionError: If called before initialize()
            MementoNotFoundError: If a current element has no memento
        """
        self._require_initialized("reset")

        for element in self._elements:
            self.memento_for(element.handle)

        current = {el.handle for el in self._elements}
        order = [h for h in self._capture_order if h in current]
        restores = [(handle, self._mementos[handle]) for handle in order]

        applier.clear(self.container)
        for handle, memento in restores:
            applier.restore(self.container, handle, memento)

        self._stop_observing()
        self._provider = None
        self._applier = None
        self._converted = False
        self._mementos.clear()
        self._capture_order.clear()
        self._elements = ()
        self._rows = []
        logger.info(f"Reset {len(restores)} elements in {self.container!r}")

    def on_width_change(self, width: float) -> Optional[ModeChange]:
        """
        Handle a container width notification.

        On a mode transition the whole pipeline re-runs against freshly
        captured geometry and, if the container is converted, the new plan
        is applied with the last-used applier.

        Returns:
            ModeChange if the mode flipped, otherwise None
        """
        change = self._controller.notify(width)
        if change is None or not self.is_initialized:
            return change

        self._capture(self._provider, record_mementos=False)
        self._regroup()
        if self._converted and self._applier is not None:
            self.convert(self._applier)
        return change

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _capture(self, provider: GeometryProvider, record_mementos: bool) -> None:
        # Mementos are only taken by initialize(); a handle first seen on a
        # resize has none and makes reset() raise MementoNotFoundError.
        elements = []
        for element in provider.positioned_elements(self.container):
            if element.handle not in self._mementos:
                if not record_mementos:
                    elements.append(element)
                    continue
                self._mementos[element.handle] = provider.capture_memento(element.handle)
                self._capture_order.append(element.handle)
            else:
                # Converted elements report flow sizes; keep the pre-conversion ones.
                memento = self._mementos[element.handle]
                element = replace(
                    element,
                    original_size=OriginalSize.resolve(memento.width, memento.height, element.geometry),
                )
            elements.append(element)
        self._elements = tuple(elements)

    def _regroup(self) -> None:
        self._rows = group_into_rows(list(self._elements), self.config.tolerance_for(self.mode))

    def _stop_observing(self) -> None:
        if self._notifier is not None:
            self._notifier.unsubscribe(self.container, self.on_width_change)
            self._notifier = None

    def _require_initialized(self, operation: str) -> None:
        if self._provider is None:
            raise SessionError(f"{operation}() called before initialize()")
