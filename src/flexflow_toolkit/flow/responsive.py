"""
Module: flow.responsive

Purpose:
    Track the active layout mode from container width notifications and
    report when the grouping pipeline must be re-run.

Key Classes:
    - ModeChange: Command emitted on a mode transition
    - ResponsiveModeController: Two-state expanded/compact machine

Dependencies:
    - flow.config: FlowConfig breakpoint
    - flow.mode: LayoutMode

Used By:
    - flow.session.LayoutSession: Width-change handling
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import FlowConfig
from .mode import LayoutMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModeChange:
    """
    A mode transition that requires a full re-layout against current geometry.

    Attributes:
        previous: Mode before the notification
        current: Mode after the notification
        width: Container width that caused the transition
    """

    previous: LayoutMode
    current: LayoutMode
    width: float


class ResponsiveModeController:
    """
    Expanded/compact state machine driven by width notifications.

    Transitions are evaluated only when notify() is called. Repeated
    notifications that land in the current mode produce nothing, so
    resizing within a mode never triggers a re-layout.

    Example:
        >>> controller = ResponsiveModeController(FlowConfig(), initial_width=1024)
        >>> controller.mode
        <LayoutMode.EXPANDED: 'expanded'>
        >>> controller.notify(800) is None
        True
        >>> controller.notify(400).current
        <LayoutMode.COMPACT: 'compact'>
    """

    def __init__(self, config: FlowConfig, initial_width: Optional[float] = None):
        self._config = config
        if initial_width is None:
            self._mode = LayoutMode.EXPANDED
        else:
            self._mode = config.mode_for_width(initial_width)
        self._last_width = initial_width

    @property
    def mode(self) -> LayoutMode:
        return self._mode

    @property
    def last_width(self) -> Optional[float]:
        """Width from the most recent notification (or construction)."""
        return self._last_width

    def notify(self, width: float) -> Optional[ModeChange]:
        """
        Handle a container width change.

        Args:
            width: New container width

        Returns:
            ModeChange if the mode flipped, otherwise None
        """
        self._last_width = width
        new_mode = self._config.mode_for_width(width)
        if new_mode is self._mode:
            return None

        change = ModeChange(previous=self._mode, current=new_mode, width=width)
        self._mode = new_mode
        logger.info(f"Layout mode {change.previous.value} -> {change.current.value} at width {width}")
        return change
