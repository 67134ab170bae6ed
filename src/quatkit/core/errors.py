"""
===============================================================================
QUATKIT - Error Taxonomy
===============================================================================
All errors are ValueError subclasses: every failure in this library is a
violated numeric precondition on an input value, never an I/O or state
problem.
===============================================================================
"""


class QuatkitError(ValueError):
    """Base class for all quatkit errors."""


class ZeroLengthError(QuatkitError):
    """
    Raised when an operation needs a direction but got a zero-length value.

    Normalizing, inverting, or rotating by a zero quaternion, normalizing a
    zero vector, or building a rotation about a zero axis are undefined.
    Raising here keeps NaN/Inf from leaking silently into downstream math.
    """


class ConfigError(QuatkitError):
    """Raised for malformed or out-of-range configuration values."""
