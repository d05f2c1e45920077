"""Logging utilities for Unistroke."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARK = "_unistroke_handler"


@dataclass
class MatchStats:
    """Statistics from a single matching run."""

    templates_compared: int = 0
    best_distance: float | None = None
    best_template: str | None = None
    distances: list[tuple[str, float]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        """Calculate matching duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers from any earlier call
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(console_handler)

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("unistroke")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class MatchLogger:
    """Logger for tracking template comparisons and match statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MatchStats()

    def log_match_start(self, point_count: int, length: float, template_count: int) -> None:
        """Log start of a matching run."""
        self._stats.start_time = time.perf_counter()
        self._logger.debug(
            "Matching stroke",
            points=point_count,
            length=round(length, 2),
            templates=template_count,
        )

    def log_template_distance(self, template_name: str, distance: float) -> None:
        """Log the best-angle distance to one template."""
        self._logger.debug(
            "Template compared",
            template=template_name,
            distance=round(distance, 3),
        )
        self._stats.templates_compared += 1
        self._stats.distances.append((template_name, distance))
        if self._stats.best_distance is None or distance < self._stats.best_distance:
            self._stats.best_distance = distance
            self._stats.best_template = template_name

    def log_match_rejected(self, reason: str) -> None:
        """Log a stroke that could not be matched."""
        self._stats.end_time = time.perf_counter()
        self._logger.info("Stroke rejected", reason=reason)

    def log_match_complete(self, template_name: str, score: float) -> None:
        """Log successful match."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Match found",
            template=template_name,
            score=round(score, 4),
            compared=self._stats.templates_compared,
            duration_ms=round(self._stats.duration_ms, 2),
        )

    @property
    def stats(self) -> MatchStats:
        """Get current match statistics."""
        return self._stats
