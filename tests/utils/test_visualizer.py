"""
Tests for utils.visualizer

Test Coverage:
- visualize_rows(): Canvas sizing and drawing
- save_debug_overlay(): Directory creation and image saving
"""

from PIL import Image

from flexflow_toolkit.flow import group_into_rows
from flexflow_toolkit.utils.visualizer import PADDING, save_debug_overlay, visualize_rows


def test_visualize_rows_returns_rgb_image_fitting_elements(make_element):
    """Default canvas fits every element plus padding."""
    rows = group_into_rows(
        [make_element("a", top=0, left=0, width=100), make_element("b", top=120, left=50, width=300, height=80)],
        tolerance=10,
    )
    result = visualize_rows(rows)
    assert isinstance(result, Image.Image)
    assert result.mode == "RGB"
    assert result.size == (350 + PADDING * 2, 200 + PADDING * 2)


def test_visualize_rows_when_empty_then_padding_only():
    assert visualize_rows([]).size == (PADDING * 2, PADDING * 2)


def test_visualize_rows_draws_element_outline(make_element):
    rows = group_into_rows([make_element("a", top=0, left=0, width=100, height=50)], tolerance=10)
    img = visualize_rows(rows, size=(200, 120))
    # Bottom edge of the outline sits at y = 50 + PADDING
    assert img.getpixel((PADDING + 50, PADDING + 50)) != (255, 255, 255)


def test_save_debug_overlay_creates_directory(tmp_path, make_element):
    """save_debug_overlay creates output directory if it doesn't exist."""
    rows = group_into_rows([make_element("a", top=0)], tolerance=10)
    output = tmp_path / "nested" / "rows.png"

    result = save_debug_overlay(rows, output)

    assert result.exists()
    assert result.name == "rows.png"
