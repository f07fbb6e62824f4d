"""
Unit Tests for FlexRow model.
"""

import pytest

from flexflow_toolkit.core.models import FlexRow


class TestFlexRow:
    """Tests for FlexRow dataclass."""

    def test_from_elements_when_unordered_then_sorted_by_left(self, make_element):
        """Members are ordered left to right."""
        a = make_element("a", top=0, left=200)
        b = make_element("b", top=5, left=0)
        row = FlexRow.from_elements([a, b])
        assert row.handles == ("b", "a")

    def test_from_elements_when_staggered_then_envelope_covers_all(self, make_element):
        """top is the min top and bottom the max bottom."""
        a = make_element("a", top=10, height=50)
        b = make_element("b", top=0, left=200, height=20)
        row = FlexRow.from_elements([a, b])
        assert row.top == 0
        assert row.bottom == 60
        assert row.height == 60

    def test_from_elements_when_equal_left_then_keeps_input_order(self, make_element):
        """Sorting by left is stable."""
        a = make_element("a", top=0, left=0)
        b = make_element("b", top=5, left=0)
        assert FlexRow.from_elements([a, b]).handles == ("a", "b")

    def test_from_elements_when_empty_then_raises_error(self):
        """A row is never empty."""
        with pytest.raises(ValueError, match="at least one element"):
            FlexRow.from_elements([])

    def test_init_when_no_elements_then_raises_error(self):
        """Direct construction also rejects empty rows."""
        with pytest.raises(ValueError, match="at least one element"):
            FlexRow(elements=(), top=0, bottom=0)

    def test_len_when_two_members_then_two(self, make_element):
        row = FlexRow.from_elements([make_element("a", 0), make_element("b", 0, left=200)])
        assert len(row) == 2
