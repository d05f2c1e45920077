"""Template writer for saving template sets.

This module provides the TemplateWriter class for writing template sets in
the stored JSON format.
"""

from collections.abc import Iterable
from pathlib import Path

from unistroke.domain import Template
from unistroke.exceptions import TemplateSaveError
from unistroke.io.converter import templates_to_json

DEFAULT_FILENAME = "templates.gestures"


class TemplateWriter:
    """Writes template sets to disk.

    Example:
        writer = TemplateWriter(Path("templates.gestures"))
        writer.save(session.templates)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the template writer.

        Args:
            output_path: Path where the template set will be saved
        """
        self._output_path = output_path

    def save(self, templates: Iterable[Template]) -> None:
        """Write templates to the output path, replacing any existing file.

        Raises:
            TemplateSaveError: If the file cannot be written
        """
        text = templates_to_json(templates, indent=2)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise TemplateSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_default_path(directory: Path) -> Path:
        """Default template file location inside ``directory``.

        Converts: ~/gestures -> ~/gestures/templates.gestures
        """
        return directory / DEFAULT_FILENAME
