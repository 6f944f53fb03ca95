"""Tests for the blob generator and strategies."""

import pytest

from gooeyblob import BlobGenerator, BlobOptions, Line, generate
from gooeyblob.config import BlobStyle
from gooeyblob.core.strategies import MergedBlobStrategy, PillStrategy
from gooeyblob.domain import Polygon, Rectangle, Ring
from gooeyblob.exceptions import DegenerateGeometryError, UnionError


class RaisingUnion:
    """Union engine that always fails."""

    def union(self, rectangles):
        raise UnionError("boom")


class EmptyUnion:
    """Union engine that returns no rings."""

    def union(self, rectangles):
        return Polygon(rings=())


class HoleOnlyUnion:
    """Union engine that returns a lone hole ring."""

    def union(self, rectangles):
        hole = Ring(points=((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)))
        return Polygon(rings=(hole,))


class TestGenerate:
    """Tests for the generate entry point."""

    def test_reference_example(self):
        """Test a single two-letter line."""
        result = generate([{"text": "HI", "width": 40}], line_height=30, spread=6)

        assert (result.bounding_box.width, result.bounding_box.height) == (52, 42)
        assert (result.bounding_box.min_x, result.bounding_box.min_y) == (-6, -6)
        assert len(result.rings) == 1
        assert len(result.rings[0]) == 4
        assert all(c.radius == 10.5 for c in result.rings[0].corners)
        assert result.path.startswith("M -6 4.5 Q -6 -6 4.5 -6 L 35.5 -6")
        assert result.path.endswith("Z")
        assert not result.fallback

    def test_no_lines(self):
        """Test that no input gives an empty result."""
        result = generate([])

        assert result.is_empty()
        assert (result.bounding_box.width, result.bounding_box.height) == (0, 0)

    def test_only_empty_lines(self):
        """Test that blank lines alone give an empty result."""
        result = generate([Line("", 0.0), Line("  ", 12.0)])

        assert result.path == ""
        assert "Q" not in result.path

    def test_options_dict_and_overrides(self):
        """Test the accepted option forms."""
        lines = [Line("HI", 40.0)]
        base = generate(lines, BlobOptions(line_height=30, spread=6))

        assert generate(lines, {"line_height": 30, "spread": 6}) == base
        assert generate(lines, BlobOptions(line_height=30), spread=6) == base

    def test_overrides_do_not_mutate_options(self):
        """Test that overrides leave the caller's options untouched."""
        options = BlobOptions(spread=3)
        generate([Line("a", 10.0)], options, spread=9)

        assert options.spread == 3

    def test_pure(self):
        """Test that repeated calls give identical output."""
        lines = [Line("Hello", 100.0), Line("gooey", 60.0), Line("world", 90.0)]
        first = generate(lines, spread=8, roundness=1.0, align="center")
        second = generate(lines, spread=8, roundness=1.0, align="center")

        assert first.path == second.path
        assert first == second


class TestFallback:
    """Tests for the bounding box fallback."""

    def test_union_failure_falls_back(self):
        """Test that a failing union still yields a shape."""
        result = generate([Line("HI", 40.0)], line_height=30, spread=6, union=RaisingUnion())

        assert result.fallback
        assert result.path == "M -6 -6 L 46 -6 L 46 36 L -6 36 L -6 -6 Z"
        assert (result.bounding_box.width, result.bounding_box.height) == (52, 42)

    def test_empty_union_falls_back(self):
        """Test that a union with no rings is treated as a failure."""
        result = BlobGenerator(union=EmptyUnion()).generate([Line("a", 10.0)])
        assert result.fallback

    def test_hole_only_union_falls_back(self):
        """Test that a union without an exterior ring is treated as a failure."""
        result = BlobGenerator(union=HoleOnlyUnion()).generate([Line("a", 10.0)])
        assert result.fallback
        assert "Q" not in result.path

    def test_degenerate_rectangle_falls_back(self):
        """Test that a zero-width line with no spread triggers the fallback."""
        result = generate([Line("a", 20.0), Line("b", 0.0)], spread=0)

        assert result.fallback
        assert result.bounding_box.width == 20
        assert result.path.startswith("M 0 0 L 20 0")


class TestStrategies:
    """Tests for renderer strategies."""

    def test_generator_selects_strategy(self):
        """Test strategy selection from the style option."""
        assert isinstance(BlobGenerator(BlobOptions(style="pill")).strategy(), PillStrategy)
        assert isinstance(BlobGenerator().strategy(), MergedBlobStrategy)

    def test_pill_rings_per_line(self):
        """Test that pills keep one ring per non-empty line."""
        lines = [Line("first", 100.0), Line("", 0.0), Line("third", 40.0)]
        result = generate(lines, style=BlobStyle.PILL, spread=4, roundness=1.0)

        assert len(result.rings) == 2
        assert result.subpath_count == 2
        assert all(len(ring) == 4 for ring in result.rings)

    def test_pill_radius_limited_by_short_side(self):
        """Test that a narrow pill becomes a stadium."""
        rings = PillStrategy().outline([Rectangle(0, 0, 10, 40)], radius=100.0)
        assert all(c.radius == 5.0 for c in rings[0].corners)

    def test_pill_rejects_degenerate(self):
        """Test that pills refuse zero-area boxes."""
        with pytest.raises(DegenerateGeometryError):
            PillStrategy().outline([Rectangle(0, 0, 0, 10, 3)], radius=5.0)

    def test_merged_overlapping_lines_single_ring(self):
        """Test that overlapping lines merge into one outline."""
        lines = [Line("Hello", 100.0), Line("gooey", 60.0), Line("world", 90.0)]
        result = generate(lines, spread=8, align="center")

        assert len(result.rings) == 1
        assert result.subpath_count == 1
