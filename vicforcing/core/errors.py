class PreconditionViolation(ValueError):
    """Raised when the spline solver receives degenerate knots."""


class ConfigurationError(RuntimeError):
    """Raised when the inputs give no way to compute the requested forcing."""
