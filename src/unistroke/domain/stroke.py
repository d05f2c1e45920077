"""Core geometric types for stroke representation.

This module defines the fundamental geometric types used throughout unistroke:
- Point: An immutable 2D point
- BoundingBox: An axis-aligned bounding rectangle
- Stroke: An ordered, growable sequence of points forming a path

Every transform on a Stroke returns a new Stroke; ``push`` is the only
operation that mutates one.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from unistroke.domain._search import golden_section_search
from unistroke.exceptions import DegenerateGeometryError, EmptyStrokeError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable, so strokes can be copied cheaply and safely
    shipped to worker processes.

    Attributes:
        x: X coordinate in input units
        y: Y coordinate in input units
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box of a stroke.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class Stroke:
    """An ordered sequence of 2D points describing a drawn path.

    Point order is the traversal order of the path and is never changed.
    Duplicate consecutive points are kept; callers that capture live input
    should check ``is_new_point`` before calling ``push``.

    Attributes:
        points: Points forming the path, in drawing order
    """

    points: list[Point] = field(default_factory=list)

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> "Stroke":
        """Build a stroke from (x, y) pairs.

        Args:
            points: Iterable of (x, y) coordinate pairs

        Returns:
            Stroke containing the points in the given order
        """
        return cls([Point(float(x), float(y)) for x, y in points])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def to_tuples(self) -> list[tuple[float, float]]:
        """Return the points of this stroke as (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def copy(self) -> "Stroke":
        """Return an independent copy of this stroke."""
        return Stroke(list(self.points))

    def push(self, x: float, y: float) -> None:
        """Append a point to the end of the stroke."""
        self.points.append(Point(x, y))

    def is_new_point(self, x: float, y: float) -> bool:
        """Check whether (x, y) differs from the last point of the stroke.

        Returns:
            True if the stroke is empty or its last point is not (x, y)
        """
        if not self.points:
            return True
        last = self.points[-1]
        return last.x != x or last.y != y

    def length(self) -> float:
        """Total path length, summed over consecutive point pairs.

        Returns:
            Arc length of the path; 0.0 for fewer than two points
        """
        total = 0.0
        for a, b in zip(self.points, self.points[1:]):
            total += a.distance_to(b)
        assert total >= 0.0
        return total

    def centroid(self) -> Point:
        """Arithmetic mean of all points.

        Raises:
            EmptyStrokeError: If the stroke has no points
        """
        if not self.points:
            raise EmptyStrokeError("centroid")
        n = len(self.points)
        return Point(
            sum(p.x for p in self.points) / n,
            sum(p.y for p in self.points) / n,
        )

    def indicative_angle(self) -> float:
        """Angle in radians from the first point to the centroid.

        Raises:
            EmptyStrokeError: If the stroke has no points
        """
        if not self.points:
            raise EmptyStrokeError("indicative angle")
        c = self.centroid()
        first = self.points[0]
        return math.atan2(c.y - first.y, c.x - first.x)

    def bounding_rect(self) -> BoundingBox:
        """Axis-aligned bounding box of all points.

        Raises:
            EmptyStrokeError: If the stroke has no points
        """
        if not self.points:
            raise EmptyStrokeError("bounding box")
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return BoundingBox(min(xs), min(ys), max(xs), max(ys))

    def resample(self, count: int) -> "Stroke":
        """Resample the path into ``count`` points spaced evenly by arc length.

        Walks the polyline accumulating distance since the last emitted point.
        When the next segment would carry the accumulated distance past one
        interval, the crossing point is interpolated, emitted, and spliced into
        the walk so the rest of that segment is still traversed.

        Args:
            count: Number of points in the result, at least 2

        Returns:
            New stroke with ``count`` points

        Raises:
            ValueError: If count is less than 2
            EmptyStrokeError: If the stroke has no points
        """
        if count < 2:
            raise ValueError(f"Resample count must be at least 2, got {count}")
        if not self.points:
            raise EmptyStrokeError("resampled path")

        total = self.length()
        if total == 0.0:
            return Stroke([self.points[0]] * count)

        interval = total / (count - 1)
        accumulated = 0.0
        walk = list(self.points)
        resampled = [walk[0]]

        i = 1
        while i < len(walk):
            prev, cur = walk[i - 1], walk[i]
            d = prev.distance_to(cur)
            if accumulated + d > interval:
                t = (interval - accumulated) / d
                q = Point(prev.x + t * (cur.x - prev.x), prev.y + t * (cur.y - prev.y))
                resampled.append(q)
                walk.insert(i, q)
                accumulated = 0.0
            else:
                accumulated += d
            i += 1

        # Floating-point slack can leave the walk one point short of the end.
        if len(resampled) == count - 1:
            resampled.append(walk[-1])
        return Stroke(resampled)

    def rotate_by(self, angle: float) -> "Stroke":
        """Rotate every point about the centroid by ``angle`` radians."""
        c = self.centroid()
        cos, sin = math.cos(angle), math.sin(angle)
        return Stroke(
            [
                Point(
                    (p.x - c.x) * cos - (p.y - c.y) * sin + c.x,
                    (p.x - c.x) * sin + (p.y - c.y) * cos + c.y,
                )
                for p in self.points
            ]
        )

    def scale_by(self, size: float, one_dimensional_ratio: float = 0.0) -> "Stroke":
        """Scale the stroke so its bounding box fits a ``size`` square.

        Each axis is scaled independently, so the box becomes exactly
        ``size`` x ``size``. Strokes whose shorter side is at most
        ``one_dimensional_ratio`` times the longer side are treated as
        one-dimensional and scaled uniformly by the longer side instead.
        A zero-extent axis always counts as one-dimensional. No translation is
        applied.

        Args:
            size: Target side length of the bounding square
            one_dimensional_ratio: Aspect ratio at or below which uniform
                scaling is used

        Returns:
            New scaled stroke

        Raises:
            DegenerateGeometryError: If the bounding box is a single point
        """
        box = self.bounding_rect()
        width, height = box.width, box.height
        longest = max(width, height)
        if longest == 0.0:
            raise DegenerateGeometryError(width, height)

        if min(width, height) / longest <= one_dimensional_ratio:
            sx = sy = size / longest
        else:
            sx = size / width
            sy = size / height
        return Stroke([Point(p.x * sx, p.y * sy) for p in self.points])

    def translate_to(self, target: Point) -> "Stroke":
        """Shift the stroke so its centroid lands on ``target``."""
        offset = target - self.centroid()
        return Stroke([p + offset for p in self.points])

    def path_distance(self, other: "Stroke") -> float:
        """Mean distance between corresponding points of two strokes.

        Returns:
            Average point-to-point distance, or ``math.inf`` when the strokes
            differ in point count or are empty
        """
        if len(self.points) != len(other.points) or not self.points:
            return math.inf
        total = 0.0
        for a, b in zip(self.points, other.points):
            total += a.distance_to(b)
        return total / len(self.points)

    def distance_at_angle(self, template: "Stroke", angle: float) -> float:
        """Path distance to ``template`` after rotating this stroke by ``angle``."""
        return self.rotate_by(angle).path_distance(template)

    def distance_at_best_angle(
        self,
        template: "Stroke",
        from_angle: float,
        to_angle: float,
        precision: float,
    ) -> float:
        """Smallest path distance to ``template`` over a range of rotations.

        Uses golden-section search, which assumes the distance is unimodal in
        the angle over ``[from_angle, to_angle]``.

        Args:
            template: Canonical stroke to compare against
            from_angle: Lower end of the rotation range in radians
            to_angle: Upper end of the rotation range in radians
            precision: Terminating bracket width in radians

        Returns:
            Minimum distance found
        """
        result = golden_section_search(
            lambda angle: self.distance_at_angle(template, angle),
            from_angle,
            to_angle,
            precision,
        )
        return result.minimum

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        """Deserialize from dictionary."""
        return cls([Point.from_dict(p) for p in data["points"]])
