"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from unistroke.domain import MatchResult, Template

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Unistroke[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_stroke_info(path: str, point_count: int, length: float) -> None:
    """Print raw stroke information.

    Args:
        path: Path to the stroke file
        point_count: Number of samples in the stroke
        length: Raw arc length in input units
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {point_count:,} points {SYM_DOT} length {length:,.1f}")


def print_template_added(name: str, store_path: str, total: int) -> None:
    """Print confirmation of a trained template."""
    console.print(f"\n[bold green]{SYM_OK} Trained[/bold green] '{name}'")
    line = Text("  ")
    line.append(store_path, style="bold")
    line.append(f" ({total} templates)")
    console.print(line)


def print_match(result: MatchResult, template_count: int, duration_ms: float) -> None:
    """Print the best match with its score.

    Args:
        result: Match result to report
        template_count: Number of templates compared
        duration_ms: Matching time in milliseconds
    """
    score_style = "green" if result.score >= 0.8 else "yellow" if result.score >= 0.6 else "red"
    console.print(
        f"\n[bold green]{SYM_OK} Match[/bold green] [bold]{result.name}[/bold] "
        f"[{score_style}]{result.clamped_score:.3f}[/{score_style}]"
    )
    console.print(
        f"  distance {result.distance:.2f} {SYM_DOT} {template_count} templates "
        f"{SYM_DOT} {duration_ms:.1f}ms"
    )


def print_templates(templates: list[Template]) -> None:
    """Print a table of stored templates."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Points", justify="right")
    for index, template in enumerate(templates, start=1):
        table.add_row(str(index), template.name, str(template.point_count))
    console.print(table)
    console.print(f"\n  {len(templates)} templates")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
