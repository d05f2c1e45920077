"""Gesture templates and match results.

This module defines the named, canonical strokes that candidate strokes are
compared against, and the result type returned by matching.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from unistroke.domain.stroke import Point, Stroke
from unistroke.exceptions import PathEmptyError

if TYPE_CHECKING:
    from unistroke.config import RecognizerConfig


@dataclass(frozen=True)
class Template:
    """A named stroke in canonical form.

    Templates are created once and are read-only afterwards: the canonical
    points are held in a tuple, and ``stroke`` hands out a fresh Stroke on
    every access. Names identify a gesture for the caller and are not required
    to be unique.

    Attributes:
        name: Gesture name (e.g., "circle", "check")
        points: Canonical points: resampled, derotated, scaled and centered
    """

    name: str
    points: tuple[Point, ...]

    @classmethod
    def from_stroke(
        cls,
        name: str,
        stroke: Stroke,
        config: "RecognizerConfig | None" = None,
    ) -> "Template":
        """Train a template from a raw stroke.

        The stroke is run through the normalization pipeline; the input is
        left untouched.

        Args:
            name: Gesture name
            stroke: Raw stroke in input coordinates
            config: Recognizer settings (defaults if None)

        Returns:
            New template holding the canonical stroke

        Raises:
            PathEmptyError: If the stroke has no points
            DegenerateGeometryError: If all points of the stroke coincide
        """
        from unistroke.core.normalizer import StrokeNormalizer

        canonical = StrokeNormalizer(config).normalize(stroke, name=name)
        return cls(name=name, points=tuple(canonical))

    @classmethod
    def from_canonical(cls, name: str, stroke: Stroke) -> "Template":
        """Build a template from a stroke that is already canonical.

        Used to restore previously trained templates. The points are copied but
        not re-normalized or validated.

        Args:
            name: Gesture name
            stroke: Canonical stroke

        Returns:
            New template

        Raises:
            PathEmptyError: If the stroke has no points
        """
        if len(stroke) == 0:
            raise PathEmptyError(name)
        return cls(name=name, points=tuple(stroke))

    @property
    def stroke(self) -> Stroke:
        """Canonical stroke, as a new Stroke the caller may modify freely."""
        return Stroke(list(self.points))

    @property
    def point_count(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"name": self.name, "stroke": self.stroke.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Template":
        """Deserialize from dictionary, trusting the stroke to be canonical."""
        return cls.from_canonical(data["name"], Stroke.from_dict(data["stroke"]))


@dataclass(frozen=True)
class MatchResult:
    """Best template found for a candidate stroke.

    Attributes:
        template: The winning template, as held by the caller's collection
        score: Similarity, roughly in [0, 1]; higher is closer
        distance: Mean point distance to the template at the best angle
    """

    template: Template
    score: float
    distance: float

    @property
    def name(self) -> str:
        """Name of the winning template."""
        return self.template.name

    @property
    def clamped_score(self) -> float:
        """Score clamped to the closed interval [0, 1]."""
        return min(1.0, max(0.0, self.score))
