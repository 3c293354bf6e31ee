"""
Exceptions raised by simfourier.

All of them are ValueError subclasses, so callers that already guard
numeric helpers with `except ValueError` keep working.
"""


class FourierError(ValueError):
    """Base class for simfourier errors."""


class UnsupportedShapeError(FourierError):
    """No transform engine can be built for the requested shape."""


class SizeMismatchError(FourierError):
    """Buffer or vector dimensions do not agree with what the call expects."""


class NonSquareShapeError(FourierError):
    """Operation requires an N x N vector."""
