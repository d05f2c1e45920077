"""CLI application entry point for unistroke.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from unistroke import __version__
from unistroke.cli.output import (
    console,
    print_error,
    print_header,
    print_match,
    print_step,
    print_stroke_info,
    print_template_added,
    print_templates,
)
from unistroke.config import LoggingConfig, RecognizerConfig, UnistrokeSettings
from unistroke.core import GestureSession, TemplateMatcher
from unistroke.domain import Stroke, Template
from unistroke.exceptions import (
    NoMatchError,
    TemplateStoreError,
    TooShortError,
    UnistrokeError,
)
from unistroke.io import TemplateReader, TemplateWriter, read_stroke
from unistroke.io.writer import DEFAULT_FILENAME
from unistroke.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="unistroke",
    help="Train and recognize single-stroke gestures.",
    add_completion=False,
    no_args_is_help=True,
)

TemplatesOption = Annotated[
    Path,
    typer.Option(
        "--templates",
        "-t",
        help="Template set file",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Unistroke[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Train and recognize single-stroke gestures."""
    settings = UnistrokeSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "quiet": quiet}


@app.command()
def train(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(
            help="Name of the gesture",
            show_default=False,
        ),
    ],
    stroke_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with the raw stroke as [x, y] pairs",
            show_default=False,
        ),
    ],
    templates: TemplatesOption = Path(DEFAULT_FILENAME),
) -> None:
    """Train a template from a stroke file and add it to the template set.

    The template set file is created if it does not exist yet.

    Example:
        unistroke train circle circle.json -t gestures.gestures
    """
    settings: UnistrokeSettings = ctx.obj["settings"]
    quiet: bool = ctx.obj["quiet"]

    if not quiet:
        print_header(__version__)
        print_step("Loading stroke")

    stroke = _load_stroke(stroke_file)
    if not quiet:
        print_stroke_info(str(stroke_file), len(stroke), stroke.length())

    try:
        existing = _load_templates(templates) if templates.exists() else []
        session = GestureSession(existing, settings)
        session.add_template(name, stroke)
        TemplateWriter(templates).save(session.templates)
    except UnistrokeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_template_added(name, str(templates), len(session.templates))


@app.command()
def match(
    ctx: typer.Context,
    stroke_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with the raw stroke as [x, y] pairs",
            show_default=False,
        ),
    ],
    templates: TemplatesOption = Path(DEFAULT_FILENAME),
    angle_range: Annotated[
        float,
        typer.Option(
            "--angle-range",
            "-r",
            help="Rotation searched either side of each template, in degrees",
            min=0.0,
            max=180.0,
        ),
    ] = 45.0,
    precision: Annotated[
        float,
        typer.Option(
            "--precision",
            "-p",
            help="Angle search precision in degrees",
            min=0.01,
            max=90.0,
        ),
    ] = 2.0,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: sequential)",
            min=1,
        ),
    ] = None,
    min_score: Annotated[
        float | None,
        typer.Option(
            "--min-score",
            help="Exit with code 2 when the best score is below this value",
            min=0.0,
            max=1.0,
        ),
    ] = None,
) -> None:
    """Find the template that best matches a stroke file.

    Example:
        unistroke match attempt.json -t gestures.gestures
    """
    settings: UnistrokeSettings = ctx.obj["settings"]
    quiet: bool = ctx.obj["quiet"]

    if not quiet:
        print_header(__version__)
        print_step("Loading stroke")

    stroke = _load_stroke(stroke_file)
    if not quiet:
        print_stroke_info(str(stroke_file), len(stroke), stroke.length())

    if not templates.exists():
        print_error(
            f"Template file not found: {templates}",
            details="Train a template first with 'unistroke train'.",
        )
        raise typer.Exit(code=1)

    recognizer = settings.recognizer.model_copy(
        update={"angle_range": angle_range, "angle_precision": precision}
    )
    try:
        template_list = _load_templates(templates)
        matcher = TemplateMatcher(recognizer, max_workers=workers)
        if not quiet:
            print_step(f"Matching against {len(template_list)} templates")
        result = matcher.match(template_list, stroke)
    except TooShortError as e:
        print_error(
            "Stroke too short to match",
            details=f"Length {e.length:.1f} with {e.point_count} points; "
            f"at least {e.min_length:.1f} is required.",
        )
        raise typer.Exit(code=1)
    except NoMatchError:
        print_error("No templates to match against", details=f"{templates} is empty.")
        raise typer.Exit(code=1)
    except UnistrokeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        console.print(f"{result.name} {result.clamped_score:.3f}")
    else:
        duration_ms = matcher.last_stats.duration_ms if matcher.last_stats else 0.0
        print_match(result, len(template_list), duration_ms)

    if min_score is not None and result.score < min_score:
        if not quiet:
            console.print(f"  Score below --min-score {min_score:.3f}")
        raise typer.Exit(code=2)


@app.command("list")
def list_templates(
    templates: TemplatesOption = Path(DEFAULT_FILENAME),
) -> None:
    """List the templates in a template set."""
    if not templates.exists():
        print_error(f"Template file not found: {templates}")
        raise typer.Exit(code=1)

    try:
        template_list = _load_templates(templates)
    except TemplateStoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_templates(template_list)


def _load_stroke(path: Path) -> Stroke:
    """Read a stroke file, exiting with an error message on failure.

    Args:
        path: Path to the stroke file

    Returns:
        The raw stroke
    """
    try:
        return read_stroke(path)
    except FileNotFoundError:
        print_error(
            f"Stroke file not found: {path}",
            details=f"The file '{path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Cannot read stroke file: {path}", details=str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _load_templates(path: Path) -> list[Template]:
    """Load all templates from a template set file."""
    with TemplateReader(path) as reader:
        return list(reader.iter_templates())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
