# core/errors.py


class CurvePipelineError(ValueError):
    """Base class for errors raised while building curves and markers."""


class InsufficientPointsError(CurvePipelineError):
    """Raised when a polyline has fewer distinct points than a curve needs."""

    def __init__(self, count: int, minimum: int):
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"Curve needs at least {minimum} distinct points, got {count}."
        )


class EmptyInputError(CurvePipelineError):
    """Raised when an extent is requested over zero curves."""
