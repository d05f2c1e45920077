"""Recording sessions holding a live template set.

A GestureSession owns an ordered template collection and at most one stroke
being recorded. Input code feeds it samples between ``start_recording`` and
``stop_recording``; the finished stroke can then be trained as a template or
recognized against the current set.
"""

from collections.abc import Iterable

import structlog

from unistroke.config import UnistrokeSettings
from unistroke.core.matcher import TemplateMatcher
from unistroke.domain import MatchResult, Stroke, Template
from unistroke.io.converter import templates_from_json, templates_to_json


class GestureSession:
    """Owner of a template set and the stroke currently being recorded.

    Example:
        session = GestureSession()
        session.start_recording()
        for x, y in samples:
            session.record_point(x, y)
        stroke = session.stop_recording()
        session.add_template("swipe", stroke)
    """

    def __init__(
        self,
        templates: Iterable[Template] | None = None,
        settings: UnistrokeSettings | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            templates: Initial templates, kept in the given order
            settings: Application settings (defaults if None)
        """
        self.settings = settings or UnistrokeSettings()
        self._templates: list[Template] = list(templates or [])
        self._recording: Stroke | None = None
        self._matcher = TemplateMatcher(
            self.settings.recognizer,
            max_workers=self.settings.matching.max_workers,
        )
        self.logger = structlog.get_logger("unistroke.session")

    @property
    def templates(self) -> tuple[Template, ...]:
        """Current templates, in matching priority order."""
        return tuple(self._templates)

    @property
    def is_recording(self) -> bool:
        return self._recording is not None

    def start_recording(self) -> None:
        """Begin a new stroke, discarding any unfinished one."""
        if self._recording is not None:
            self.logger.debug("Discarding unfinished recording", points=len(self._recording))
        self._recording = Stroke()

    def record_point(self, x: float, y: float) -> bool:
        """Add a sample to the stroke being recorded.

        Repeats of the previous sample are dropped.

        Returns:
            True if the point was appended
        """
        if self._recording is None or not self._recording.is_new_point(x, y):
            return False
        self._recording.push(x, y)
        return True

    def stop_recording(self) -> Stroke | None:
        """Finish the current recording.

        Returns:
            The recorded stroke, or None if no recording was in progress
        """
        stroke, self._recording = self._recording, None
        if stroke is not None:
            self.logger.debug("Recording stopped", points=len(stroke))
        return stroke

    def add_template(self, name: str, stroke: Stroke) -> Template:
        """Train a template from a raw stroke and append it to the set.

        Raises:
            PathEmptyError: If the stroke has no points
        """
        template = Template.from_stroke(name, stroke, self.settings.recognizer)
        self._templates.append(template)
        self.logger.info("Template added", template=name, total=len(self._templates))
        return template

    def add_canonical_template(self, name: str, stroke: Stroke) -> Template:
        """Append a template from an already canonical stroke.

        Raises:
            PathEmptyError: If the stroke has no points
        """
        template = Template.from_canonical(name, stroke)
        self._templates.append(template)
        return template

    def clear_templates(self) -> None:
        """Remove all templates."""
        self._templates.clear()

    def recognize(self, stroke: Stroke) -> MatchResult:
        """Match a raw stroke against the current templates.

        Raises:
            TooShortError: If the stroke is too small to evaluate
            NoMatchError: If the session has no templates
        """
        return self._matcher.match(self._templates, stroke)

    def export_templates(self) -> str:
        """Serialize the template set as JSON."""
        return templates_to_json(self._templates)

    def load_templates(self, text: str) -> int:
        """Append templates from JSON produced by ``export_templates``.

        Returns:
            Number of templates added

        Raises:
            pydantic.ValidationError: If the text is not a valid template set
        """
        loaded = templates_from_json(text)
        self._templates.extend(loaded)
        self.logger.info("Templates loaded", count=len(loaded), total=len(self._templates))
        return len(loaded)
