"""Tests for domain models to verify they work correctly."""

import pytest
from fontTools.pens.recordingPen import RecordingPen

from gooeyblob.domain import (
    Alignment,
    BoundingBox,
    Corner,
    Line,
    Polygon,
    Rectangle,
    Ring,
    SmoothedPath,
    SmoothedRing,
    index_lines,
    shoelace_area,
)
from gooeyblob.exceptions import GeometryError


class TestLine:
    """Tests for Line class."""

    def test_line_creation(self) -> None:
        """Test basic line creation."""
        line = Line("Hello", 120.0)
        assert line.text == "Hello"
        assert line.width == 120.0
        assert line.index == 0

    def test_empty_line(self) -> None:
        """Test that whitespace-only text counts as empty."""
        assert Line("", 0.0).is_empty()
        assert Line("   ", 30.0).is_empty()
        assert not Line("a", 8.0).is_empty()

    def test_line_serialization(self) -> None:
        """Test line serialization and deserialization."""
        line = Line("world", 64.5, index=3)
        restored = Line.from_dict(line.to_dict())
        assert restored == line

    def test_from_dict_index_override(self) -> None:
        """Test that an explicit index replaces the stored one."""
        line = Line.from_dict({"text": "x", "width": 10, "index": 7}, index=1)
        assert line.index == 1
        assert line.width == 10.0

    def test_line_immutable(self) -> None:
        """Test that line is immutable."""
        line = Line("a", 1.0)
        with pytest.raises(AttributeError):
            line.width = 2.0  # type: ignore

    def test_index_lines_uses_position(self) -> None:
        """Test that list position wins over any carried index."""
        lines = index_lines([Line("a", 10.0, index=5), {"text": "b", "width": 20}])
        assert [line.index for line in lines] == [0, 1]
        assert lines[1].text == "b"

    def test_alignment_values(self) -> None:
        """Test alignment enum values."""
        assert Alignment("center") is Alignment.CENTER
        assert Alignment.RIGHT.value == "right"


class TestRectangle:
    """Tests for Rectangle class."""

    def test_edges(self) -> None:
        """Test derived right and bottom edges."""
        rect = Rectangle(x=-6, y=-6, width=52, height=42)
        assert rect.right == 46
        assert rect.bottom == 36

    def test_degenerate(self) -> None:
        """Test zero-area detection."""
        assert Rectangle(0, 0, 0, 10).is_degenerate()
        assert Rectangle(0, 0, 10, 0).is_degenerate()
        assert not Rectangle(0, 0, 1, 1).is_degenerate()

    def test_as_ring_is_exterior(self) -> None:
        """Test that a rectangle ring winds as an exterior."""
        ring = Rectangle(0, 0, 10, 5).as_ring()
        assert len(ring) == 4
        assert ring.signed_area() == pytest.approx(50.0)
        assert not ring.is_hole()


class TestRing:
    """Tests for Ring class."""

    def test_ring_needs_three_points(self) -> None:
        """Test that short rings are rejected."""
        with pytest.raises(GeometryError):
            Ring(points=((0.0, 0.0), (1.0, 0.0)))

    def test_ring_rejects_duplicate_points(self) -> None:
        """Test that consecutive duplicates are rejected, wrap-around included."""
        with pytest.raises(GeometryError):
            Ring(points=((0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (0.0, 1.0)))
        with pytest.raises(GeometryError):
            Ring(points=((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)))

    def test_circular_neighbors(self) -> None:
        """Test modulo neighbor lookup at both ends."""
        ring = Ring(points=((0.0, 0.0), (10.0, 0.0), (10.0, 10.0)))
        assert ring.prev(0) == (10.0, 10.0)
        assert ring.next(2) == (0.0, 0.0)

    def test_hole_winding(self) -> None:
        """Test that reversed winding is a hole."""
        ring = Ring(points=((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)))
        assert ring.is_hole()
        assert shoelace_area(ring.points) == pytest.approx(-100.0)

    def test_bounding_box(self) -> None:
        """Test ring bounding box."""
        ring = Ring(points=((2.0, 3.0), (8.0, 1.0), (5.0, 9.0)))
        assert ring.bounding_box() == (2.0, 1.0, 8.0, 9.0)


class TestPolygon:
    """Tests for Polygon class."""

    def test_exteriors_and_holes(self) -> None:
        """Test splitting rings by winding."""
        outer = Rectangle(0, 0, 30, 30).as_ring()
        hole = Ring(points=((10.0, 10.0), (10.0, 20.0), (20.0, 20.0), (20.0, 10.0)))
        polygon = Polygon(rings=(outer, hole))

        assert len(polygon) == 2
        assert polygon.exteriors() == [outer]
        assert polygon.rings[1].is_hole()

    def test_empty_polygon(self) -> None:
        """Test polygon without rings."""
        polygon = Polygon(rings=())
        assert len(polygon) == 0
        assert polygon.exteriors() == []


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_default_is_empty(self) -> None:
        """Test that the default box is zero-sized."""
        bbox = BoundingBox()
        assert bbox.is_empty()
        assert (bbox.width, bbox.height) == (0.0, 0.0)

    def test_view_box_with_margin(self) -> None:
        """Test viewBox growth by a margin."""
        bbox = BoundingBox(min_x=-6, min_y=-6, width=52, height=42)
        assert bbox.view_box() == (-6, -6, 52, 42)
        assert bbox.view_box(4) == (-10, -10, 60, 50)
        assert bbox.max_x == 46

    def test_bounding_box_serialization(self) -> None:
        """Test bounding box serialization and deserialization."""
        bbox = BoundingBox(1.0, 2.0, 3.0, 4.0)
        assert BoundingBox.from_dict(bbox.to_dict()) == bbox


class TestSmoothedPath:
    """Tests for SmoothedPath and its parts."""

    def test_sharp_corner(self) -> None:
        """Test that zero radius is a sharp corner."""
        corner = Corner(vertex=(1.0, 1.0), start=(1.0, 1.0), end=(1.0, 1.0), radius=0.0)
        assert corner.is_sharp

    def test_smoothed_ring_radius(self) -> None:
        """Test smoothed ring accessors."""
        ring = SmoothedRing(
            corners=(
                Corner((0.0, 0.0), (0.0, 2.0), (2.0, 0.0), 2.0),
                Corner((10.0, 0.0), (8.0, 0.0), (10.0, 3.0), 3.0),
                Corner((10.0, 10.0), (10.0, 10.0), (10.0, 10.0), 0.0),
            )
        )
        assert len(ring) == 3
        assert ring.max_radius() == 3.0
        assert ring.vertices == ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0))

    def test_empty_path(self) -> None:
        """Test that an empty path is not an error."""
        result = SmoothedPath(path="", bounding_box=BoundingBox())
        assert result.is_empty()
        assert result.subpath_count == 0
        assert not result.fallback

    def test_draw_replays_commands(self) -> None:
        """Test pen replay of recorded commands."""
        commands = (
            ("moveTo", ((0.0, 0.0),)),
            ("lineTo", ((10.0, 0.0),)),
            ("qCurveTo", ((12.0, 0.0), (12.0, 2.0))),
            ("lineTo", ((0.0, 0.0),)),
            ("closePath", ()),
        )
        result = SmoothedPath(path="M 0 0 Z", bounding_box=BoundingBox(), commands=commands)

        pen = RecordingPen()
        result.draw(pen)

        assert [name for name, _ in pen.value] == [name for name, _ in commands]
        assert pen.value[2][1] == ((12.0, 0.0), (12.0, 2.0))
        assert result.subpath_count == 1

    def test_to_dict(self) -> None:
        """Test serialization for IPC."""
        ring = SmoothedRing(corners=(Corner((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), 1.0),))
        result = SmoothedPath(
            path="M 0 1 Z",
            bounding_box=BoundingBox(0.0, 0.0, 5.0, 5.0),
            rings=(ring,),
        )
        data = result.to_dict()

        assert data["path"] == "M 0 1 Z"
        assert data["bounding_box"]["width"] == 5.0
        assert data["rings"][0][0]["radius"] == 1.0
        assert data["fallback"] is False
