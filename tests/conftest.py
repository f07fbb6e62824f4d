import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import flexflow_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from flexflow_toolkit.core.models import PositionedElement
from flexflow_toolkit.surfaces import MemorySurface


# Common test fixtures
@pytest.fixture
def make_element():
    """Factory for PositionedElements from a raw rectangle."""
    def _create(
        handle: str,
        top: float,
        left: float = 0,
        width: float = 100,
        height: float = 50,
        **explicit,
    ) -> PositionedElement:
        return PositionedElement.capture(
            handle,
            top=top,
            left=left,
            width=width,
            height=height,
            explicit_width=explicit.get("width_style"),
            explicit_height=explicit.get("height_style"),
        )
    return _create


@pytest.fixture
def canvas_surface():
    """
    Surface with an 800px container holding two rows.

    Row 0: "logo" (0-100) and "nav" (150-350), nav 5px lower.
    Row 1: "hero" spanning 20-620 at y=120.
    Children are added out of visual order to exercise reset ordering.
    """
    surface = MemorySurface()
    surface.add_container("canvas", width=800)
    surface.add_node("canvas", "hero", top=120, left=20, width=600, height=200,
                     style={"position": "absolute", "width": "600px", "margin": "4px"})
    surface.add_node("canvas", "nav", top=5, left=150, width=200, height=40,
                     style={"position": "absolute"})
    surface.add_node("canvas", "logo", top=0, left=0, width=100, height=50,
                     style={"position": "absolute", "display": "block"})
    return surface
