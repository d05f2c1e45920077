"""Conversion between domain templates and their stored representation.

Template sets are stored as JSON in the form::

    {"templates": [{"name": "circle", "path": [[x, y], ...]}, ...]}

Stored paths are already canonical, so they are always restored with
``Template.from_canonical`` and never normalized a second time.
"""

from collections.abc import Iterable

import structlog
from pydantic import BaseModel, Field

from unistroke.domain import Stroke, Template


class TemplateData(BaseModel):
    """Stored form of a single template."""

    name: str
    path: list[tuple[float, float]]


class TemplateSetData(BaseModel):
    """Stored form of a template set."""

    templates: list[TemplateData] = Field(default_factory=list)


class StrokeData(BaseModel):
    """Stored form of a raw stroke."""

    points: list[tuple[float, float]]


def template_to_data(template: Template) -> TemplateData:
    """Convert a domain template to its stored form."""
    return TemplateData(name=template.name, path=template.stroke.to_tuples())


def data_to_template(data: TemplateData) -> Template | None:
    """Convert a stored template back to a domain template.

    Returns:
        Template, or None if the stored path is empty
    """
    if not data.path:
        structlog.get_logger("unistroke.io").warning(
            "Skipping template with empty path", template=data.name
        )
        return None
    return Template.from_canonical(data.name, Stroke.from_points(data.path))


def templates_to_data(templates: Iterable[Template]) -> TemplateSetData:
    return TemplateSetData(templates=[template_to_data(t) for t in templates])


def data_to_templates(data: TemplateSetData) -> list[Template]:
    templates = []
    for entry in data.templates:
        template = data_to_template(entry)
        if template is not None:
            templates.append(template)
    return templates


def templates_to_json(templates: Iterable[Template], indent: int | None = None) -> str:
    """Serialize templates to JSON text."""
    return templates_to_data(templates).model_dump_json(indent=indent)


def templates_from_json(text: str | bytes) -> list[Template]:
    """Parse JSON text into templates.

    Raises:
        pydantic.ValidationError: If the text is not a valid template set
    """
    return data_to_templates(TemplateSetData.model_validate_json(text))
