class DubinsError(ValueError):
    """Base class for errors raised while building or sampling a Dubins path."""


class InvalidRadiusError(DubinsError):
    """Turning radius is not a finite positive number."""


class NoPathError(DubinsError):
    """None of the requested words connects the two poses."""


class ParameterOutOfRangeError(DubinsError):
    """Arc-length parameter lies outside [0, path length)."""
