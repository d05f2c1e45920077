"""Core recognition algorithms for unistroke.

This module contains the core algorithms for:

- Normalization (resampling, derotation, scaling, centering)
- Matching (golden-section angle search, distance-to-score conversion)
- Session management (recording strokes, owning the template set)

All matching services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (inputs are never modified)

Key functions:
- normalize: Convert a raw stroke to canonical form
- score_template: Best-angle distance for one template (picklable)
- find_matching_template: Match a stroke with explicit angle settings
- find_matching_template_with_defaults: Match with +/-45 degrees at 2 degrees

Key classes:
- StrokeNormalizer: Canonical-form pipeline
- TemplateMatcher: Finds the closest template to a stroke
- GestureSession: Owns templates and the stroke being recorded
"""

from unistroke.core.matcher import (
    DEFAULT_ANGLE_PRECISION,
    DEFAULT_ANGLE_RANGE,
    TemplateMatcher,
    find_matching_template,
    find_matching_template_with_defaults,
    score_template,
)
from unistroke.core.normalizer import StrokeNormalizer, normalize
from unistroke.core.session import GestureSession

__all__ = [
    # Matching
    "DEFAULT_ANGLE_PRECISION",
    "DEFAULT_ANGLE_RANGE",
    "TemplateMatcher",
    "find_matching_template",
    "find_matching_template_with_defaults",
    "score_template",
    # Normalization
    "StrokeNormalizer",
    "normalize",
    # Sessions
    "GestureSession",
]
