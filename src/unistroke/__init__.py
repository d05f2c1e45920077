"""Unistroke - Recognize single-stroke 2D gestures against trained templates.

Unistroke is a $1-style gesture recognizer. Raw strokes are resampled, rotated,
scaled and translated into a canonical form, then compared against canonical
templates with a golden-section search over rotation angle.

Example:
    >>> from unistroke import Stroke, Template, find_matching_template_with_defaults
    >>> line = Template.from_stroke("line", Stroke.from_points([(0, 0), (100, 0)]))
    >>> result = find_matching_template_with_defaults(
    ...     [line], Stroke.from_points([(0, 0), (50, 1), (100, 0)])
    ... )
    >>> result.template.name
    'line'
"""

from unistroke.core.matcher import (
    TemplateMatcher,
    find_matching_template,
    find_matching_template_with_defaults,
)
from unistroke.core.session import GestureSession
from unistroke.domain import MatchResult, Point, Stroke, Template

__version__ = "0.1.0"

__all__ = [
    "GestureSession",
    "MatchResult",
    "Point",
    "Stroke",
    "Template",
    "TemplateMatcher",
    "__version__",
    "find_matching_template",
    "find_matching_template_with_defaults",
]
