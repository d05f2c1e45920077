"""Matching of candidate strokes against canonical templates.

The candidate is normalized once, then compared with every template using a
golden-section search over rotation. The template with the smallest distance
wins and its distance is converted into a similarity score.

Per-template evaluation is independent, so it can be spread over worker
processes; results are reduced in template order so the winner is the same as
in a sequential run.

Key components:
- score_template: Top-level picklable function for parallel execution
- TemplateMatcher: Matching orchestrator
- find_matching_template / find_matching_template_with_defaults: Entry points
"""

import math
import time
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from unistroke.config import RecognizerConfig
from unistroke.core.normalizer import StrokeNormalizer
from unistroke.domain import MatchResult, Stroke, Template
from unistroke.exceptions import NoMatchError, TooShortError
from unistroke.utils import MatchLogger, MatchStats

DEFAULT_ANGLE_RANGE = 45.0
DEFAULT_ANGLE_PRECISION = 2.0


def score_template(
    candidate_dict: dict[str, Any],
    template_dict: dict[str, Any],
    angle_range: float,
    angle_precision: float,
) -> dict[str, Any]:
    """Compute the best-angle distance between a candidate and one template.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        candidate_dict: Serialized canonical candidate (from Stroke.to_dict())
        template_dict: Serialized canonical template stroke
        angle_range: Rotation searched either side of zero, in radians
        angle_precision: Terminating bracket width, in radians

    Returns:
        Dictionary with "distance" and "duration_ms"
    """
    start_time = time.perf_counter()
    candidate = Stroke.from_dict(candidate_dict)
    template = Stroke.from_dict(template_dict)
    distance = candidate.distance_at_best_angle(
        template, -angle_range, angle_range, angle_precision
    )
    return {
        "distance": distance,
        "duration_ms": (time.perf_counter() - start_time) * 1000,
    }


class TemplateMatcher:
    """Finds the template closest to a candidate stroke.

    Example:
        matcher = TemplateMatcher()
        result = matcher.match(templates, stroke)
        print(result.template.name, result.score)
    """

    def __init__(
        self,
        config: RecognizerConfig | None = None,
        max_workers: int | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            config: Recognizer settings (defaults if None)
            max_workers: Worker processes for template evaluation
                (None or 1 = sequential)
            logger: Structured logger (module logger if None)
        """
        self.config = config or RecognizerConfig()
        self.max_workers = max_workers
        self.normalizer = StrokeNormalizer(self.config)
        self.logger = logger or structlog.get_logger("unistroke.matcher")
        self.last_stats: MatchStats | None = None

    def match(
        self,
        templates: Sequence[Template],
        stroke: Stroke,
        angle_range: float | None = None,
        angle_precision: float | None = None,
    ) -> MatchResult:
        """Match a raw stroke against a collection of templates.

        On equal distances the template that comes first in ``templates`` wins.

        Args:
            templates: Canonical templates, in priority order
            stroke: Raw candidate stroke; not modified
            angle_range: Rotation searched either side of zero, in degrees
                (config default if None)
            angle_precision: Search precision in degrees (config default if None)

        Returns:
            MatchResult referencing the winning template

        Raises:
            TooShortError: If the stroke has fewer than 2 points or is shorter
                than the configured minimum length
            NoMatchError: If ``templates`` is empty
            ValueError: If the angle precision is not positive
        """
        range_rad = (
            self.config.angle_range_radians if angle_range is None else math.radians(angle_range)
        )
        precision_rad = (
            self.config.angle_precision_radians
            if angle_precision is None
            else math.radians(angle_precision)
        )
        if not precision_rad > 0.0:
            raise ValueError(f"Angle precision must be positive, got {angle_precision}")

        match_logger = MatchLogger(self.logger)
        self.last_stats = match_logger.stats
        templates = list(templates)
        length = stroke.length()
        match_logger.log_match_start(len(stroke), length, len(templates))

        if len(stroke) < 2 or length < self.config.min_stroke_length:
            match_logger.log_match_rejected("too short")
            raise TooShortError(len(stroke), length, self.config.min_stroke_length)

        candidate = self.normalizer.normalize(stroke)

        if self.max_workers is not None and self.max_workers > 1 and len(templates) > 1:
            distances = self._distances_parallel(candidate, templates, range_rad, precision_rad)
        else:
            distances = [
                candidate.distance_at_best_angle(
                    template.stroke, -range_rad, range_rad, precision_rad
                )
                for template in templates
            ]

        best: Template | None = None
        best_distance = math.inf
        for template, distance in zip(templates, distances):
            match_logger.log_template_distance(template.name, distance)
            if distance < best_distance:
                best = template
                best_distance = distance

        if best is None:
            match_logger.log_match_rejected("no templates")
            raise NoMatchError(len(templates))

        score = 1.0 - best_distance / self.config.half_diagonal
        match_logger.log_match_complete(best.name, score)
        return MatchResult(template=best, score=score, distance=best_distance)

    def _distances_parallel(
        self,
        candidate: Stroke,
        templates: list[Template],
        angle_range: float,
        angle_precision: float,
    ) -> list[float]:
        """Evaluate templates in worker processes.

        Args:
            candidate: Canonical candidate stroke
            templates: Templates to compare against
            angle_range: Rotation range in radians
            angle_precision: Search precision in radians

        Returns:
            Best-angle distance per template, in template order
        """
        candidate_dict = candidate.to_dict()
        distances = [math.inf] * len(templates)

        self.logger.debug(
            "Starting parallel matching",
            template_count=len(templates),
            max_workers=self.max_workers,
        )

        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(
                    score_template,
                    candidate_dict,
                    template.stroke.to_dict(),
                    angle_range,
                    angle_precision,
                ): index
                for index, template in enumerate(templates)
            }
            for future in as_completed(futures):
                distances[futures[future]] = future.result()["distance"]

        return distances


def find_matching_template(
    templates: Sequence[Template],
    stroke: Stroke,
    angle_range: float,
    angle_precision: float,
) -> MatchResult:
    """Return the template closest to ``stroke`` and its score.

    Args:
        templates: Canonical templates, in priority order
        stroke: Raw candidate stroke
        angle_range: Rotation searched either side of zero, in degrees
        angle_precision: Search precision in degrees

    Returns:
        MatchResult with the winning template; a score near 1.0 is a close match

    Raises:
        TooShortError: If the stroke is too small to evaluate
        NoMatchError: If ``templates`` is empty
    """
    return TemplateMatcher().match(templates, stroke, angle_range, angle_precision)


def find_matching_template_with_defaults(
    templates: Sequence[Template],
    stroke: Stroke,
) -> MatchResult:
    """Match within +/-45 degrees of each template at 2 degree precision."""
    return find_matching_template(
        templates, stroke, DEFAULT_ANGLE_RANGE, DEFAULT_ANGLE_PRECISION
    )
