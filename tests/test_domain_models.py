"""Tests for domain models to verify they work correctly."""

import math

import pytest

from unistroke.domain import (
    ORIGIN,
    BoundingBox,
    MatchResult,
    Point,
    Stroke,
    Template,
)
from unistroke.exceptions import (
    DegenerateGeometryError,
    EmptyStrokeError,
    PathEmptyError,
)


@pytest.fixture
def l_stroke() -> Stroke:
    """An L-shaped stroke: down the left side, then along the top."""
    return Stroke.from_points([(0, 0), (0, 100), (60, 100)]).resample(32)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_arithmetic(self) -> None:
        """Test vector addition and subtraction."""
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(5, 5) - Point(2, 1) == Point(3, 4)

    def test_distance_to(self) -> None:
        """Test Euclidean distance."""
        assert Point(3, 4).distance_to(ORIGIN) == 5.0

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestStrokeBasics:
    """Tests for Stroke construction and point bookkeeping."""

    def test_empty_stroke(self) -> None:
        """Test a new stroke has no points."""
        stroke = Stroke()
        assert len(stroke) == 0
        assert stroke.to_tuples() == []

    def test_push_keeps_order(self) -> None:
        """Test points are appended in order, duplicates included."""
        stroke = Stroke()
        stroke.push(1, 1)
        stroke.push(2, 2)
        stroke.push(2, 2)
        assert stroke.to_tuples() == [(1, 1), (2, 2), (2, 2)]

    def test_is_new_point(self) -> None:
        """Test duplicate detection against the last point only."""
        stroke = Stroke()
        assert stroke.is_new_point(0, 0)
        stroke.push(0, 0)
        assert not stroke.is_new_point(0, 0)
        assert stroke.is_new_point(0, 1)
        stroke.push(0, 1)
        assert stroke.is_new_point(0, 0)

    def test_from_points(self) -> None:
        """Test building a stroke from coordinate pairs."""
        stroke = Stroke.from_points([(1, 2), (3, 4)])
        assert list(stroke) == [Point(1.0, 2.0), Point(3.0, 4.0)]

    def test_copy_is_independent(self) -> None:
        """Test that copies do not share the point list."""
        stroke = Stroke.from_points([(0, 0), (1, 1)])
        copy = stroke.copy()
        copy.push(2, 2)
        assert len(stroke) == 2
        assert len(copy) == 3

    def test_stroke_serialization(self) -> None:
        """Test stroke serialization and deserialization."""
        stroke = Stroke.from_points([(0, 0), (10.5, -3.25), (7, 7)])
        assert Stroke.from_dict(stroke.to_dict()) == stroke


class TestStrokeMeasurements:
    """Tests for length, centroid, angle and bounds."""

    def test_length(self) -> None:
        """Test length sums consecutive segment lengths."""
        stroke = Stroke.from_points([(0, 0), (3, 4), (3, 10)])
        assert stroke.length() == pytest.approx(11.0)

    def test_length_of_short_strokes(self) -> None:
        """Test length of empty and single-point strokes is zero."""
        assert Stroke().length() == 0.0
        assert Stroke.from_points([(5, 5)]).length() == 0.0

    def test_centroid(self) -> None:
        """Test centroid is the mean of all points."""
        stroke = Stroke.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])
        assert stroke.centroid() == Point(5.0, 5.0)

    def test_centroid_empty(self) -> None:
        """Test centroid of an empty stroke raises."""
        with pytest.raises(EmptyStrokeError):
            Stroke().centroid()

    def test_indicative_angle(self) -> None:
        """Test angle from the first point to the centroid."""
        assert Stroke.from_points([(0, 0), (10, 0)]).indicative_angle() == 0.0
        assert Stroke.from_points([(0, 0), (0, 10)]).indicative_angle() == pytest.approx(
            math.pi / 2
        )
        assert Stroke.from_points([(10, 0), (0, 0)]).indicative_angle() == pytest.approx(
            math.pi
        )

    def test_indicative_angle_empty(self) -> None:
        """Test indicative angle of an empty stroke raises."""
        with pytest.raises(EmptyStrokeError):
            Stroke().indicative_angle()

    def test_bounding_rect(self) -> None:
        """Test bounding box calculation."""
        stroke = Stroke.from_points([(10, 20), (100, 30), (50, 150)])
        box = stroke.bounding_rect()
        assert box == BoundingBox(10.0, 20.0, 100.0, 150.0)
        assert box.width == 90.0
        assert box.height == 130.0

    def test_bounding_rect_empty(self) -> None:
        """Test bounding box of an empty stroke raises."""
        with pytest.raises(EmptyStrokeError):
            Stroke().bounding_rect()


class TestResample:
    """Tests for arc-length resampling."""

    def test_straight_line(self) -> None:
        """Test a line is split at equal intervals, endpoints included."""
        resampled = Stroke.from_points([(0, 0), (100, 0)]).resample(5)
        xs = [p.x for p in resampled]
        assert xs == pytest.approx([0.0, 25.0, 50.0, 75.0, 100.0])
        assert all(p.y == 0.0 for p in resampled)

    @pytest.mark.parametrize("count", [2, 16, 64, 100])
    def test_point_count(self, count: int) -> None:
        """Test resampling always yields the requested number of points."""
        stroke = Stroke.from_points([(0, 0), (13, 40), (41, 41), (90, -7), (60, 20)])
        assert len(stroke.resample(count)) == count

    def test_equal_spacing(self) -> None:
        """Test resampled points are evenly spaced along a straight path."""
        stroke = Stroke.from_points([(0, 0), (30, 0), (30, 40)])
        resampled = stroke.resample(8)
        gaps = [a.distance_to(b) for a, b in zip(resampled.points, resampled.points[1:])]
        assert gaps == pytest.approx([10.0] * 7)

    def test_keeps_endpoints(self) -> None:
        """Test first and last points match the original path."""
        stroke = Stroke.from_points([(5, 5), (20, 60), (80, 10)])
        resampled = stroke.resample(64)
        assert resampled.points[0] == Point(5.0, 5.0)
        assert resampled.points[-1].x == pytest.approx(80.0)
        assert resampled.points[-1].y == pytest.approx(10.0)

    def test_input_unchanged(self) -> None:
        """Test resampling does not modify the original stroke."""
        stroke = Stroke.from_points([(0, 0), (100, 0)])
        stroke.resample(64)
        assert stroke.to_tuples() == [(0.0, 0.0), (100.0, 0.0)]

    def test_zero_length_stroke(self) -> None:
        """Test a stroke of coincident points resamples to copies of one point."""
        resampled = Stroke.from_points([(3, 3), (3, 3)]).resample(10)
        assert len(resampled) == 10
        assert set(resampled.points) == {Point(3.0, 3.0)}

    def test_invalid_count(self) -> None:
        """Test resampling to fewer than two points raises."""
        with pytest.raises(ValueError, match="at least 2"):
            Stroke.from_points([(0, 0), (1, 1)]).resample(1)


class TestTransforms:
    """Tests for rotate, scale and translate."""

    def test_rotate_about_centroid(self) -> None:
        """Test rotation keeps the centroid fixed."""
        rotated = Stroke.from_points([(0, 0), (2, 0)]).rotate_by(math.pi / 2)
        assert rotated.points[0].x == pytest.approx(1.0)
        assert rotated.points[0].y == pytest.approx(-1.0)
        assert rotated.points[1].x == pytest.approx(1.0)
        assert rotated.points[1].y == pytest.approx(1.0)

    def test_scale_non_uniform(self) -> None:
        """Test each axis is scaled to fill the square."""
        scaled = Stroke.from_points([(0, 0), (10, 0), (10, 20)]).scale_by(100)
        assert scaled.to_tuples() == [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0)]

    def test_scale_zero_height_is_uniform(self) -> None:
        """Test a perfectly flat stroke is scaled by its longer side."""
        scaled = Stroke.from_points([(0, 0), (100, 0)]).scale_by(250)
        assert scaled.to_tuples() == [(0.0, 0.0), (250.0, 0.0)]

    def test_scale_one_dimensional_ratio(self) -> None:
        """Test thin strokes are scaled uniformly below the ratio."""
        stroke = Stroke.from_points([(0, 0), (100, 0), (100, 10)])
        uniform = stroke.scale_by(250, one_dimensional_ratio=0.3)
        assert uniform.to_tuples() == [(0.0, 0.0), (250.0, 0.0), (250.0, 25.0)]
        stretched = stroke.scale_by(250)
        assert stretched.bounding_rect().height == pytest.approx(250.0)

    def test_scale_at_ratio_boundary(self) -> None:
        """Test an aspect exactly at the ratio is uniform and just above is stretched."""
        at_ratio = Stroke.from_points([(0, 0), (100, 0), (100, 30)])
        assert at_ratio.scale_by(250, one_dimensional_ratio=0.3).to_tuples() == [
            (0.0, 0.0),
            (250.0, 0.0),
            (250.0, 75.0),
        ]
        above_ratio = Stroke.from_points([(0, 0), (100, 0), (100, 31)])
        box = above_ratio.scale_by(250, one_dimensional_ratio=0.3).bounding_rect()
        assert box.width == pytest.approx(250.0)
        assert box.height == pytest.approx(250.0)

    def test_scale_degenerate(self) -> None:
        """Test a single-point bounding box raises instead of producing NaN."""
        with pytest.raises(DegenerateGeometryError):
            Stroke.from_points([(5, 5), (5, 5)]).scale_by(250)

    def test_translate_to(self) -> None:
        """Test the centroid lands on the target."""
        stroke = Stroke.from_points([(10, 10), (20, 30), (60, 5)])
        moved = stroke.translate_to(Point(-3, 7))
        assert moved.centroid().x == pytest.approx(-3.0)
        assert moved.centroid().y == pytest.approx(7.0)

    def test_transforms_return_new_strokes(self) -> None:
        """Test transforms leave the receiver untouched."""
        stroke = Stroke.from_points([(0, 0), (10, 5), (20, 0)])
        before = stroke.to_tuples()
        stroke.rotate_by(1.0)
        stroke.scale_by(100)
        stroke.translate_to(ORIGIN)
        assert stroke.to_tuples() == before


class TestDistances:
    """Tests for path distance and angle search."""

    def test_path_distance(self) -> None:
        """Test mean point-to-point distance."""
        a = Stroke.from_points([(0, 0), (0, 0)])
        b = Stroke.from_points([(3, 4), (0, 1)])
        assert a.path_distance(b) == pytest.approx(3.0)

    def test_path_distance_to_self(self, l_stroke: Stroke) -> None:
        """Test distance between a stroke and itself is zero."""
        assert l_stroke.path_distance(l_stroke) == 0.0

    def test_path_distance_symmetric(self, l_stroke: Stroke) -> None:
        """Test distance does not depend on argument order."""
        other = l_stroke.rotate_by(0.7).translate_to(Point(5, 5))
        assert l_stroke.path_distance(other) == pytest.approx(other.path_distance(l_stroke))

    def test_path_distance_mismatched_counts(self, l_stroke: Stroke) -> None:
        """Test strokes of different lengths are maximally distant."""
        assert l_stroke.path_distance(l_stroke.resample(16)) == math.inf

    def test_distance_at_angle(self, l_stroke: Stroke) -> None:
        """Test rotating onto a rotated copy gives zero distance."""
        rotated = l_stroke.rotate_by(0.3)
        assert l_stroke.distance_at_angle(rotated, 0.3) == pytest.approx(0.0, abs=1e-9)
        assert l_stroke.distance_at_angle(rotated, 0.0) > 1.0

    def test_distance_at_best_angle(self, l_stroke: Stroke) -> None:
        """Test the angle search recovers a known rotation."""
        rotated = l_stroke.rotate_by(0.2)
        best = l_stroke.distance_at_best_angle(
            rotated, -math.pi / 4, math.pi / 4, math.radians(0.1)
        )
        assert best < 0.5
        assert best <= l_stroke.distance_at_angle(rotated, 0.0)


class TestTemplate:
    """Tests for Template class."""

    def test_from_stroke(self) -> None:
        """Test training normalizes the stroke."""
        raw = Stroke.from_points([(0, 0), (100, 0), (50, 80), (0, 0)])
        template = Template.from_stroke("triangle", raw)
        assert template.name == "triangle"
        assert template.point_count == 64
        assert len(raw) == 4

    def test_from_stroke_empty(self) -> None:
        """Test training from an empty stroke raises."""
        with pytest.raises(PathEmptyError) as exc_info:
            Template.from_stroke("nothing", Stroke())
        assert exc_info.value.name == "nothing"

    def test_from_canonical_keeps_points(self) -> None:
        """Test canonical templates are stored as given."""
        stroke = Stroke.from_points([(-1, 0), (1, 0)])
        template = Template.from_canonical("stored", stroke)
        assert template.stroke.to_tuples() == [(-1.0, 0.0), (1.0, 0.0)]

    def test_from_canonical_copies(self) -> None:
        """Test later pushes to the source do not reach the template."""
        stroke = Stroke.from_points([(-1, 0), (1, 0)])
        template = Template.from_canonical("stored", stroke)
        stroke.push(5, 5)
        assert template.point_count == 2

    def test_from_canonical_empty(self) -> None:
        """Test restoring an empty template raises."""
        with pytest.raises(PathEmptyError):
            Template.from_canonical("empty", Stroke())

    def test_template_immutable(self) -> None:
        """Test that template fields cannot be reassigned."""
        template = Template.from_canonical("t", Stroke.from_points([(0, 0)]))
        with pytest.raises(AttributeError):
            template.name = "other"  # type: ignore

    def test_stroke_changes_do_not_reach_template(self) -> None:
        """Test the stroke handed out by a template is a detached copy."""
        template = Template.from_stroke("v", Stroke.from_points([(0, 0), (50, 100), (100, 0)]))
        before = template.stroke
        template.stroke.push(999, 999)
        assert template.point_count == 64
        assert template.stroke == before
        assert isinstance(template.points, tuple)

    def test_template_serialization(self) -> None:
        """Test template serialization and deserialization."""
        t1 = Template.from_stroke("v", Stroke.from_points([(0, 0), (50, 100), (100, 0)]))
        t2 = Template.from_dict(t1.to_dict())
        assert t2.name == t1.name
        assert t2.stroke == t1.stroke


class TestMatchResult:
    """Tests for MatchResult class."""

    def test_name(self) -> None:
        """Test name comes from the template."""
        template = Template.from_canonical("check", Stroke.from_points([(0, 0)]))
        assert MatchResult(template, 0.9, 10.0).name == "check"

    def test_clamped_score(self) -> None:
        """Test scores outside [0, 1] are clamped on request."""
        template = Template.from_canonical("check", Stroke.from_points([(0, 0)]))
        assert MatchResult(template, 1.02, 0.0).clamped_score == 1.0
        assert MatchResult(template, -0.1, 200.0).clamped_score == 0.0
        assert MatchResult(template, 0.5, 88.0).clamped_score == 0.5
