"""Tests for the path emitter."""

import pytest

from gooeyblob.core.emitter import PathEmitter, format_commands, format_number, ring_commands
from gooeyblob.core.smoother import CornerSmoother
from gooeyblob.domain import BoundingBox, Rectangle


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            (12.5, 3, "12.5"),
            (3.0, 3, "3"),
            (-0.0001, 3, "0"),
            (-0.0, 3, "0"),
            (1.23456, 3, "1.235"),
            (-1.5, 3, "-1.5"),
            (2.6, 0, "3"),
            (100.0, 0, "100"),
            (0.1 + 0.2, 6, "0.3"),
        ],
    )
    def test_format(self, value, precision, expected):
        """Test fixed precision with trailing zeros stripped."""
        assert format_number(value, precision) == expected


class TestRingCommands:
    """Tests for ring_commands."""

    def test_rounded_rectangle(self):
        """Test commands for a rectangle with room between its curves."""
        ring = CornerSmoother(10.5).smooth_ring(Rectangle(-6, -6, 52, 42).as_ring())
        commands = ring_commands(ring)
        names = [name for name, _ in commands]

        assert names == [
            "moveTo",
            "qCurveTo",
            "lineTo",
            "qCurveTo",
            "lineTo",
            "qCurveTo",
            "lineTo",
            "qCurveTo",
            "lineTo",
            "closePath",
        ]
        assert commands[0][1] == ((-6.0, 4.5),)
        assert commands[-2][1] == ((-6.0, 4.5),)

    def test_touching_curves_skip_lines(self):
        """Test that zero-length segments are not emitted."""
        ring = CornerSmoother(5.0).smooth_ring(Rectangle(0, 0, 10, 10).as_ring())
        names = [name for name, _ in ring_commands(ring)]

        assert names == ["moveTo", "qCurveTo", "qCurveTo", "qCurveTo", "qCurveTo", "closePath"]

    def test_sharp_ring(self):
        """Test that sharp corners become plain lines back to the start."""
        ring = CornerSmoother(0.0).smooth_ring(Rectangle(0, 0, 10, 10).as_ring())
        commands = ring_commands(ring)

        assert [name for name, _ in commands] == [
            "moveTo",
            "lineTo",
            "lineTo",
            "lineTo",
            "lineTo",
            "closePath",
        ]
        assert commands[-2][1] == ((0.0, 0.0),)


class TestFormatCommands:
    """Tests for format_commands."""

    def test_svg_letters(self):
        """Test the path data serialization."""
        commands = [
            ("moveTo", ((0.0, 0.0),)),
            ("lineTo", ((10.0, 0.0),)),
            ("qCurveTo", ((12.0, 0.0), (12.0, 2.5))),
            ("lineTo", ((0.0, 0.0),)),
            ("closePath", ()),
        ]
        assert format_commands(commands) == "M 0 0 L 10 0 Q 12 0 12 2.5 L 0 0 Z"

    def test_empty(self):
        """Test that no commands give an empty string."""
        assert format_commands([]) == ""


class TestPathEmitter:
    """Tests for PathEmitter."""

    def test_emit_concatenates_subpaths(self):
        """Test that each ring becomes its own closed subpath."""
        smoother = CornerSmoother(4.0)
        rings = (
            smoother.smooth_ring(Rectangle(0, 0, 40, 20).as_ring()),
            smoother.smooth_ring(Rectangle(0, 60, 40, 20).as_ring()),
        )
        result = PathEmitter().emit(rings, BoundingBox(0, 0, 40, 80))

        assert result.path.count("M") == 2
        assert result.path.count("Z") == 2
        assert result.subpath_count == 2
        assert result.rings == rings
        assert not result.fallback

    def test_emit_only_allowed_commands(self):
        """Test that the path uses only M, L, Q and Z."""
        ring = CornerSmoother(6.0).smooth_ring(Rectangle(0, 0, 30, 30).as_ring())
        result = PathEmitter(precision=2).emit((ring,), BoundingBox(0, 0, 30, 30))

        letters = {token for token in result.path.split() if token.isalpha()}
        assert letters <= {"M", "L", "Q", "Z"}

    def test_fallback_rectangle(self):
        """Test the sharp bounding box fallback."""
        result = PathEmitter().emit_fallback(BoundingBox(-6, -6, 52, 42))

        assert result.fallback
        assert result.path == "M -6 -6 L 46 -6 L 46 36 L -6 36 L -6 -6 Z"
        assert all(corner.is_sharp for corner in result.rings[0].corners)

    def test_fallback_empty_box(self):
        """Test that a zero-area box falls back to an empty path."""
        result = PathEmitter().emit_fallback(BoundingBox(0, 0, 0, 20))

        assert result.fallback
        assert result.is_empty()
