"""Tests for the AABB overlap test and small helpers."""

from types import SimpleNamespace

import pytest

from game.defender.utils import clamp, hsl_color, overlaps


def rect(x, y, w, h):
    return SimpleNamespace(x=x, y=y, width=w, height=h)


class TestOverlaps:

    def test_overlapping_rectangles(self):
        assert overlaps(rect(0, 0, 10, 10), rect(5, 5, 10, 10))

    def test_disjoint_rectangles(self):
        assert not overlaps(rect(0, 0, 10, 10), rect(20, 0, 10, 10))
        assert not overlaps(rect(0, 0, 10, 10), rect(0, 20, 10, 10))

    @pytest.mark.parametrize("other", [
        rect(10, 0, 10, 10),   # touching right edge
        rect(-10, 0, 10, 10),  # touching left edge
        rect(0, 10, 10, 10),   # touching bottom edge
        rect(0, -10, 10, 10),  # touching top edge
        rect(10, 10, 5, 5),    # touching a corner
    ])
    def test_edge_touching_is_not_a_collision(self, other):
        assert not overlaps(rect(0, 0, 10, 10), other)

    @pytest.mark.parametrize("a,b", [
        (rect(0, 0, 10, 10), rect(5, 5, 10, 10)),
        (rect(0, 0, 10, 10), rect(10, 0, 10, 10)),
        (rect(0, 0, 50, 50), rect(20, 20, 4, 15)),
        (rect(3, 4, 1, 1), rect(100, 100, 1, 1)),
    ])
    def test_symmetry(self, a, b):
        assert overlaps(a, b) == overlaps(b, a)

    def test_rectangle_overlaps_itself(self):
        r = rect(12.5, -3.0, 0.5, 2.0)
        assert overlaps(r, r)

    def test_containment(self):
        assert overlaps(rect(0, 0, 100, 100), rect(40, 40, 4, 15))


class TestHelpers:

    def test_clamp(self):
        assert clamp(-5, 0, 10) == 0
        assert clamp(15, 0, 10) == 10
        assert clamp(7, 0, 10) == 7

    def test_hsl_primary_colors(self):
        assert hsl_color(0, 1.0, 0.5) == (255, 0, 0)
        assert hsl_color(120, 1.0, 0.5) == (0, 255, 0)
        assert hsl_color(360, 1.0, 0.5) == (255, 0, 0)

    def test_hsl_is_in_byte_range(self):
        for hue in range(15, 75, 7):
            assert all(0 <= c <= 255 for c in hsl_color(hue, 0.7, 0.5))
