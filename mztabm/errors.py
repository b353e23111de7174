# mztabm/errors.py
"""
Exceptions raised when caller input violates an mzTab-M formatting contract.

All errors derive from MzTabError, which is a ValueError, so callers that only
care about "bad input" can catch ValueError. The subclasses allow branching on
the exact cause, and every instance carries the name of the offending
parameter in ``parameter``.
"""

from typing import Optional


class MzTabError(ValueError):
    """Base class for input-contract violations."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class MissingRequiredError(MzTabError):
    """A mandatory parameter is absent or empty."""


class LengthMismatchError(MzTabError):
    """A collection is neither of length 1 nor of the expected length."""


class PairedParameterError(MzTabError):
    """One of a co-required pair of parameters was supplied without the other."""


class InvalidEnumValueError(MzTabError):
    """A value is outside the set of allowed values."""


class MissingReferenceError(MzTabError):
    """An entity that must reference at least one other entity references none."""


class UnsupportedFeatureError(MzTabError, NotImplementedError):
    """A parameter that is not implemented yet was supplied."""
