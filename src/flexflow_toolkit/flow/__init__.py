"""
Module: flow

Purpose:
    Convert absolutely positioned children into a grouped, row-based flow
    layout and keep it in step with the container's responsive mode.

Key Functions:
    - group_into_rows(): Cluster elements into rows by vertical proximity
    - row_gap(), left_offset(), element_margin_top(), vertical_gap(): Metrics
    - build_layout_plan(): Rows -> renderer-neutral directives

Key Classes:
    - FlowConfig: Tolerances, breakpoint and spacing constants
    - LayoutMode: EXPANDED / COMPACT
    - ResponsiveModeController: Width-driven mode transitions
    - LayoutSession: Orchestrates capture, conversion and reset

Used By:
    - cli: Command line planning
"""

from .config import FlowConfig
from .mode import LayoutMode
from .grouper import group_into_rows
from .metrics import row_gap, left_offset, element_margin_top, vertical_gap
from .responsive import ModeChange, ResponsiveModeController
from .directives import (
    ContainerDirective,
    ElementDirective,
    LayoutPlan,
    RowDirective,
    build_layout_plan,
)
from .protocols import GeometryProvider, StyleApplier, WidthNotifier
from .session import FlowError, LayoutSession, MementoNotFoundError, SessionError

__all__ = [
    # Config
    "FlowConfig",
    "LayoutMode",
    # Grouping and metrics
    "group_into_rows",
    "row_gap",
    "left_offset",
    "element_margin_top",
    "vertical_gap",
    # Responsive
    "ModeChange",
    "ResponsiveModeController",
    # Directives
    "ContainerDirective",
    "ElementDirective",
    "RowDirective",
    "LayoutPlan",
    "build_layout_plan",
    # Collaborators
    "GeometryProvider",
    "StyleApplier",
    "WidthNotifier",
    # Session
    "LayoutSession",
    "FlowError",
    "SessionError",
    "MementoNotFoundError",
]
