"""
Unit Tests for StyleMemento model.
"""

from flexflow_toolkit.core.models import StyleMemento


class TestStyleMemento:
    """Tests for StyleMemento dataclass."""

    def test_from_style_when_partial_then_missing_attributes_empty(self):
        """Unset attributes are recorded as empty strings."""
        memento = StyleMemento.from_style({"position": "absolute", "width": "80px"})
        assert memento.position == "absolute"
        assert memento.width == "80px"
        assert memento.height == ""
        assert memento.display == ""

    def test_from_style_when_extra_keys_then_ignored(self):
        """Only the covered attributes are captured."""
        memento = StyleMemento.from_style({"color": "red", "margin": "4px"})
        assert memento.to_dict() == {
            "position": "",
            "width": "",
            "height": "",
            "margin": "4px",
            "display": "",
        }

    def test_attribute_names_when_called_then_lists_covered_attributes(self):
        assert StyleMemento.attribute_names() == ("position", "width", "height", "margin", "display")

    def test_from_dict_when_round_trip_then_equal(self):
        memento = StyleMemento(position="absolute", display="block")
        assert StyleMemento.from_dict(memento.to_dict()) == memento
