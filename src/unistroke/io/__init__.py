"""Template and stroke I/O layer for unistroke.

This module handles reading and writing template sets and raw stroke files.
It provides a clean abstraction layer between the stored JSON format and the
domain models.

Key responsibilities:
- Load stored template sets without re-normalizing them
- Save template sets in the stored format
- Load raw stroke files for training and matching

Key classes:
- TemplateReader: Load template sets
- TemplateWriter: Save template sets
"""

from unistroke.io.converter import templates_from_json, templates_to_json
from unistroke.io.reader import TemplateReader, read_stroke
from unistroke.io.writer import TemplateWriter

__all__ = [
    "TemplateReader",
    "TemplateWriter",
    "read_stroke",
    "templates_from_json",
    "templates_to_json",
]
