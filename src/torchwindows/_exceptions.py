"""Exceptions for window function generation and analysis."""


class WindowError(Exception):
    """Base exception for window function errors."""

    pass


class ArityError(WindowError, TypeError):
    """Raised when a window or conversion gets the wrong number of arguments.

    This occurs when:
    - A named window is given more or fewer parameters than it declares
    - More than 7 coefficients are passed to a cosine basis conversion
    """

    pass


class UnknownWindowError(WindowError, ValueError):
    """Raised when a window name is not registered.

    The message names the window and whether the symmetric or the
    periodic form was requested, since some windows only define one.
    """

    pass


class ParamRangeError(WindowError, ValueError):
    """Raised when a window parameter is outside its valid range.

    This occurs when:
    - Tukey alpha is outside [0, 1]
    - DPSS half-width is outside [0, N]
    - A Chebyshev attenuation gives no valid polynomial argument
    - The window length is not a positive integer
    """

    pass


class MissingCapabilityError(WindowError, RuntimeError):
    """Raised when a window needs a numeric capability that was not supplied.

    The Kaiser window needs a modified Bessel function of order zero and
    the DPSS window needs a symmetric eigensolver.
    """

    pass


class UnknownMetricError(WindowError, ValueError):
    """Raised when a spectral metric name is not recognized."""

    pass
