"""Domain models for unistroke.

This module contains the core domain models representing strokes, templates
and match results. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel matching)
- Free of any capture, rendering or storage concerns

Key classes:
- Point: An immutable 2D point
- BoundingBox: Axis-aligned bounds of a stroke
- Stroke: An ordered path of points with geometric operations
- Template: A named stroke in canonical form
- MatchResult: The winning template and its score
"""

from unistroke.domain._search import SearchResult, golden_section_search
from unistroke.domain.stroke import ORIGIN, BoundingBox, Point, Stroke
from unistroke.domain.template import MatchResult, Template

__all__: list[str] = [
    # Geometry
    "ORIGIN",
    "Point",
    "BoundingBox",
    "Stroke",
    # Templates
    "Template",
    "MatchResult",
    # Search
    "SearchResult",
    "golden_section_search",
]
