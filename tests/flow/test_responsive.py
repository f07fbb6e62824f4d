"""
Unit tests for the responsive mode controller.
"""

from flexflow_toolkit.flow import FlowConfig, LayoutMode, ResponsiveModeController


class TestResponsiveModeController:
    """Tests for ResponsiveModeController."""

    def test_init_when_no_width_then_expanded(self):
        assert ResponsiveModeController(FlowConfig()).mode is LayoutMode.EXPANDED

    def test_init_when_narrow_width_then_compact(self):
        assert ResponsiveModeController(FlowConfig(), initial_width=320).mode is LayoutMode.COMPACT

    def test_init_when_width_455_then_same_mode_as_notification(self):
        """Construction and notification use the same breakpoint."""
        controller = ResponsiveModeController(FlowConfig(), initial_width=455)
        assert controller.mode is LayoutMode.EXPANDED
        assert controller.notify(455) is None

    def test_notify_when_crossing_down_then_mode_change(self):
        # Arrange
        controller = ResponsiveModeController(FlowConfig(), initial_width=1024)

        # Act
        change = controller.notify(400)

        # Assert
        assert change is not None
        assert change.previous is LayoutMode.EXPANDED
        assert change.current is LayoutMode.COMPACT
        assert change.width == 400
        assert controller.mode is LayoutMode.COMPACT

    def test_notify_when_same_mode_then_no_change(self):
        controller = ResponsiveModeController(FlowConfig(), initial_width=1024)
        assert controller.notify(900) is None
        assert controller.notify(451) is None
        assert controller.mode is LayoutMode.EXPANDED

    def test_notify_when_repeated_in_new_mode_then_single_change(self):
        controller = ResponsiveModeController(FlowConfig(), initial_width=1024)
        changes = [controller.notify(w) for w in (400, 380, 300, 420)]
        assert [c is not None for c in changes] == [True, False, False, False]

    def test_notify_when_crossing_back_up_then_expanded(self):
        controller = ResponsiveModeController(FlowConfig(), initial_width=300)
        change = controller.notify(800)
        assert change.current is LayoutMode.EXPANDED
        assert controller.last_width == 800

    def test_notify_when_custom_threshold_then_respected(self):
        controller = ResponsiveModeController(FlowConfig(compact_threshold=768), initial_width=1024)
        assert controller.notify(700).current is LayoutMode.COMPACT
