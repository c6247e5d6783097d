"""
Exceptions raised by the trainers. All of them are ValueErrors so callers that
only care about "bad input" can catch that.
"""


class RegressionError(ValueError):
    """Base class for trainer errors."""


class ConfigurationError(RegressionError):
    """An option is missing or out of range."""


class ShapeError(RegressionError):
    """Matrix dimensions do not line up."""


class DegenerateDataError(RegressionError):
    """Data makes a statistic undefined (zero variance)."""


class DivergenceError(RegressionError):
    """Training produced a non-finite loss."""
