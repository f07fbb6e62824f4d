"""
Tests for surfaces.memory.MemorySurface.
"""

import pytest

from flexflow_toolkit.core.models import StyleMemento
from flexflow_toolkit.flow import FlowConfig, GeometryProvider, LayoutMode, StyleApplier, WidthNotifier
from flexflow_toolkit.flow import build_layout_plan, group_into_rows
from flexflow_toolkit.surfaces import MemorySurface


class TestMemorySurfaceBuilding:
    """Tests for container and node registration."""

    def test_when_built_then_implements_collaborator_protocols(self):
        surface = MemorySurface()
        assert isinstance(surface, GeometryProvider)
        assert isinstance(surface, StyleApplier)
        assert isinstance(surface, WidthNotifier)

    def test_add_node_when_duplicate_handle_then_raises_error(self, canvas_surface):
        with pytest.raises(ValueError, match="Node already exists"):
            canvas_surface.add_node("canvas", "hero", top=0, left=0, width=1, height=1)

    def test_container_when_unknown_then_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown container"):
            MemorySurface().container("missing")


class TestMemorySurfaceGeometry:
    """Tests for the geometry provider side."""

    def test_positioned_elements_when_explicit_width_then_original_size_kept(self, canvas_surface):
        elements = {el.handle: el for el in canvas_surface.positioned_elements("canvas")}
        assert elements["hero"].original_size.width == "600px"
        assert elements["hero"].original_size.height == "200px"
        assert elements["nav"].original_size.width == "200px"

    def test_positioned_elements_when_called_then_document_order(self, canvas_surface):
        handles = [el.handle for el in canvas_surface.positioned_elements("canvas")]
        assert handles == ["hero", "nav", "logo"]

    def test_capture_memento_when_called_then_reads_inline_style(self, canvas_surface):
        assert canvas_surface.capture_memento("logo") == StyleMemento(position="absolute", display="block")

    def test_container_left_when_offset_then_reported(self):
        surface = MemorySurface()
        surface.add_container("c", width=500, left=35)
        assert surface.container_left("c") == 35


class TestMemorySurfaceApplier:
    """Tests for the style applier side."""

    def _plan(self, surface, mode):
        rows = group_into_rows(surface.positioned_elements("canvas"), tolerance=10)
        return build_layout_plan(rows, mode, 0, FlowConfig())

    def test_apply_plan_when_expanded_then_row_wrappers_styled(self, canvas_surface):
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.EXPANDED))

        container = canvas_surface.container("canvas")
        row_style, members = container.rows[0]
        assert members == ["logo", "nav"]
        assert row_style["flex-direction"] == "row"
        assert row_style["flex-wrap"] == "wrap"
        assert row_style["gap"] == "50px"
        assert row_style["padding-left"] == "0px"
        assert container.style["flex-direction"] == "column"
        assert container.style["overflow-x"] == "hidden"

    def test_apply_plan_when_element_then_static_and_unshrinkable(self, canvas_surface):
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.EXPANDED))
        style = canvas_surface.node("logo").style
        assert style["position"] == "static"
        assert style["margin"] == "0"
        assert style["flex-shrink"] == "0"

    def test_apply_plan_when_switching_to_expanded_then_compact_keys_dropped(self, canvas_surface):
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.COMPACT))
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.EXPANDED))
        style = canvas_surface.node("hero").style
        assert "aspect-ratio" not in style
        assert "max-width" not in style

    def test_restore_when_called_then_flow_keys_removed_and_appended(self, canvas_surface):
        memento = canvas_surface.capture_memento("nav")
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.EXPANDED))
        canvas_surface.clear("canvas")

        canvas_surface.restore("canvas", "nav", memento)

        assert canvas_surface.node("nav").style == {"position": "absolute"}
        assert canvas_surface.children("canvas") == ["nav"]

    def test_restore_when_flow_keys_set_before_plan_then_put_back(self, canvas_surface):
        canvas_surface.node("nav").style.update({"max-width": "90%", "margin-top": "3px"})
        memento = canvas_surface.capture_memento("nav")
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.COMPACT))
        canvas_surface.apply_plan("canvas", self._plan(canvas_surface, LayoutMode.EXPANDED))
        canvas_surface.clear("canvas")

        canvas_surface.restore("canvas", "nav", memento)

        assert canvas_surface.node("nav").style == {
            "position": "absolute",
            "max-width": "90%",
            "margin-top": "3px",
        }


class TestMemorySurfaceNotifier:
    """Tests for the width notifier side."""

    def test_resize_when_subscribed_then_listener_called(self, canvas_surface):
        seen = []
        canvas_surface.subscribe("canvas", seen.append)
        canvas_surface.resize("canvas", 320)
        assert seen == [320]
        assert canvas_surface.container("canvas").width == 320

    def test_resize_when_unsubscribed_then_not_called(self, canvas_surface):
        seen = []
        canvas_surface.subscribe("canvas", seen.append)
        canvas_surface.unsubscribe("canvas", seen.append)
        canvas_surface.resize("canvas", 320)
        assert seen == []
