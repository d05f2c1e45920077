"""Readers for template sets and raw stroke files.

This module provides the TemplateReader class for loading stored template
sets, and ``read_stroke`` for loading a raw stroke recorded elsewhere.
"""

from collections.abc import Iterator
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from unistroke.domain import Stroke, Template
from unistroke.exceptions import TemplateLoadError
from unistroke.io.converter import StrokeData, TemplateSetData, data_to_templates

_STROKE_FILE = TypeAdapter(list[tuple[float, float]] | StrokeData)


class TemplateReader:
    """Loads a stored template set.

    Example:
        reader = TemplateReader(Path("templates.gestures"))
        reader.load()
        for template in reader.iter_templates():
            print(template.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the template reader.

        Args:
            path: Path to the template file
        """
        self._path = path
        self._templates: list[Template] | None = None

    def load(self) -> None:
        """Load the template file.

        Raises:
            FileNotFoundError: If the template file does not exist
            TemplateLoadError: If the file cannot be read or is not a valid
                template set
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Template file not found: {self._path}")

        try:
            data = TemplateSetData.model_validate_json(self._path.read_bytes())
        except ValidationError as e:
            raise TemplateLoadError(
                str(self._path), f"invalid template data ({e.error_count()} errors)"
            ) from e
        except OSError as e:
            raise TemplateLoadError(str(self._path), str(e)) from e

        self._templates = data_to_templates(data)

    @property
    def template_count(self) -> int:
        """Return number of templates loaded.

        Raises:
            RuntimeError: If templates have not been loaded yet
        """
        if self._templates is None:
            raise RuntimeError("Templates not loaded. Call load() first.")

        return len(self._templates)

    def iter_templates(self) -> Iterator[Template]:
        """Iterate over loaded templates in stored order.

        Raises:
            RuntimeError: If templates have not been loaded yet
        """
        if self._templates is None:
            raise RuntimeError("Templates not loaded. Call load() first.")

        yield from self._templates

    def close(self) -> None:
        """Release loaded templates."""
        self._templates = None

    def __enter__(self) -> "TemplateReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def read_stroke(path: Path) -> Stroke:
    """Read a raw stroke file.

    The file holds either a JSON list of ``[x, y]`` pairs or an object with a
    ``points`` list. Consecutive duplicate samples are dropped, as live capture
    does.

    Args:
        path: Path to the stroke file

    Returns:
        Stroke in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid stroke
    """
    try:
        data = _STROKE_FILE.validate_json(path.read_bytes())
    except ValidationError as e:
        raise ValueError(f"Invalid stroke file '{path}': {e.error_count()} errors") from e

    points = data.points if isinstance(data, StrokeData) else data
    stroke = Stroke()
    for x, y in points:
        if stroke.is_new_point(x, y):
            stroke.push(x, y)
    return stroke
