"""Configuration settings for Unistroke."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class RecognizerConfig(BaseModel):
    """Configuration for normalization and matching.

    ``square_size`` and ``min_stroke_length`` are in different units:
    the former is in canonical units, the latter in raw input units measured
    before normalization.
    """

    num_points: int = Field(
        default=64,
        ge=16,
        le=512,
        description="Number of points every canonical stroke is resampled to",
    )
    square_size: float = Field(
        default=250.0,
        gt=0.0,
        description="Side length of the canonical bounding square",
    )
    min_stroke_length: float = Field(
        default=100.0,
        ge=0.0,
        description="Minimum raw arc length of a candidate stroke",
    )
    angle_range: float = Field(
        default=45.0,
        ge=0.0,
        le=180.0,
        description="Rotation searched either side of zero, in degrees",
    )
    angle_precision: float = Field(
        default=2.0,
        gt=0.0,
        le=90.0,
        description="Angle search stops once the bracket is this narrow, in degrees",
    )
    one_dimensional_ratio: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Aspect ratio at or below which strokes are scaled uniformly",
    )

    @property
    def half_diagonal(self) -> float:
        """Half the diagonal of the canonical square, used to normalize scores."""
        return 0.5 * math.sqrt(2.0 * self.square_size * self.square_size)

    @property
    def angle_range_radians(self) -> float:
        return math.radians(self.angle_range)

    @property
    def angle_precision_radians(self) -> float:
        return math.radians(self.angle_precision)


class MatchingConfig(BaseModel):
    """Configuration for template evaluation."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes for template evaluation (None or 1 = sequential)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class UnistrokeSettings(BaseModel):
    """Main application settings."""

    recognizer: RecognizerConfig = Field(default_factory=RecognizerConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> UnistrokeSettings:
    """Get default application settings."""
    return UnistrokeSettings()
