"""Exception hierarchy for Unistroke."""


class UnistrokeError(Exception):
    """Base exception for all Unistroke errors."""

    pass


class TemplateError(UnistrokeError):
    """Errors related to template construction."""

    pass


class PathEmptyError(TemplateError):
    """A template was built from a stroke with no points."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot build template '{name}': stroke has no points")


class MatchError(UnistrokeError):
    """Errors raised while matching a stroke against templates."""

    pass


class TooShortError(MatchError):
    """Candidate stroke is too small to be a meaningful gesture."""

    def __init__(self, point_count: int, length: float, min_length: float) -> None:
        self.point_count = point_count
        self.length = length
        self.min_length = min_length
        super().__init__(
            f"Stroke too short to match: {point_count} points, "
            f"length {length:.1f} (minimum {min_length:.1f})"
        )


class NoMatchError(MatchError):
    """No template was available to compare against."""

    def __init__(self, template_count: int = 0) -> None:
        self.template_count = template_count
        super().__init__(f"No matching template among {template_count} templates")


class GeometryError(UnistrokeError):
    """Errors in geometric calculations."""

    pass


class EmptyStrokeError(GeometryError):
    """A geometric operation that needs points was called on an empty stroke."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot compute {operation} of an empty stroke")


class DegenerateGeometryError(GeometryError):
    """Stroke has a zero-extent bounding box and cannot be scaled."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Cannot scale degenerate stroke with bounding box {width} x {height}"
        )


class TemplateStoreError(UnistrokeError):
    """Errors related to loading or saving template sets."""

    pass


class TemplateLoadError(TemplateStoreError):
    """Error loading a template file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load templates '{path}': {reason}")


class TemplateSaveError(TemplateStoreError):
    """Error saving a template file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save templates '{path}': {reason}")
