"""
Error and warning types raised by the skillcurve pipeline.
"""


class InsufficientClassesError(ValueError):
    """Raised when the observed labels contain only one class."""


class LengthMismatchError(ValueError):
    """Raised when score and label sequences differ in length."""


class DegenerateRateWarning(UserWarning):
    """Issued when a zero rate is replaced by epsilon before taking logarithms."""
