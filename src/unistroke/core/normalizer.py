"""Normalization of raw strokes into canonical form.

A canonical stroke has a fixed number of points, zero indicative angle, a
bounding box scaled to the canonical square, and its centroid at the origin.
The pipeline order is fixed:

    resample -> rotate by -indicative angle -> scale -> translate to origin

Two canonical strokes can then be compared point for point, with only a
rotation search left to do.
"""

from unistroke.config import RecognizerConfig
from unistroke.domain import ORIGIN, Stroke
from unistroke.exceptions import PathEmptyError


class StrokeNormalizer:
    """Converts raw strokes into canonical form.

    Stateless apart from its configuration, so one instance can be shared
    freely.

    Example:
        normalizer = StrokeNormalizer()
        canonical = normalizer.normalize(Stroke.from_points([(0, 0), (100, 40)]))
    """

    def __init__(self, config: RecognizerConfig | None = None) -> None:
        """Initialize the normalizer.

        Args:
            config: Recognizer settings (defaults if None)
        """
        self.config = config or RecognizerConfig()

    def normalize(self, stroke: Stroke, name: str = "") -> Stroke:
        """Run a raw stroke through the canonical pipeline.

        Args:
            stroke: Raw stroke in input coordinates
            name: Gesture name, used only for error reporting

        Returns:
            New canonical stroke

        Raises:
            PathEmptyError: If the stroke has no points
            DegenerateGeometryError: If all points of the stroke coincide
        """
        if len(stroke) == 0:
            raise PathEmptyError(name)

        points = stroke.resample(self.config.num_points)
        points = points.rotate_by(-points.indicative_angle())
        points = points.scale_by(
            self.config.square_size,
            one_dimensional_ratio=self.config.one_dimensional_ratio,
        )
        return points.translate_to(ORIGIN)


def normalize(stroke: Stroke, config: RecognizerConfig | None = None) -> Stroke:
    """Normalize a stroke with the given (or default) settings."""
    return StrokeNormalizer(config).normalize(stroke)
