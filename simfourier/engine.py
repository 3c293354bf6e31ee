'''
Transform engine backed by numpy.fft.

Contents:
- ShapeKey: dimensionality + extents a transform is bound to
- TransformEngine: in-place complex-to-complex FFT for one fixed ShapeKey
- power_of_2: size helper

Normalization: forward transforms are unscaled, inverse transforms scale by
1/N (N = number of complex elements), so forward followed by inverse
reproduces the input.
'''

from dataclasses import dataclass
import functools
import logging
import numpy as np

from .errors import SizeMismatchError, UnsupportedShapeError

logger = logging.getLogger(__name__)


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class ShapeKey:
    """
    Identifies a transform shape. 1D keys use width as the length and height = -1.
    Ordered by dim, width, height, each descending.
    """
    dim: int
    width: int
    height: int = -1

    @classmethod
    def one_d(cls, length: int) -> "ShapeKey":
        return cls(1, length, -1)

    @classmethod
    def two_d(cls, width: int, height: int) -> "ShapeKey":
        return cls(2, width, height)

    @property
    def element_count(self) -> int:
        if self.dim == 1:
            return self.width
        return self.width * self.height

    def _sort_key(self):
        return (-self.dim, -self.width, -self.height)

    def __lt__(self, other):
        if not isinstance(other, ShapeKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def _valid_extent(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool) and v >= 1


class TransformEngine:
    """
    In-place complex-to-complex FFT bound to one ShapeKey.
    Raises UnsupportedShapeError for anything other than a positive 1D length
    or positive 2D width x height.
    """

    def __init__(self, key: ShapeKey):
        if key.dim == 1:
            if not _valid_extent(key.width):
                raise UnsupportedShapeError(f"Unsupported 1D length: {key.width!r}")
        elif key.dim == 2:
            if not (_valid_extent(key.width) and _valid_extent(key.height)):
                raise UnsupportedShapeError(
                    f"Unsupported 2D extents: {key.width!r} x {key.height!r}"
                )
        else:
            raise UnsupportedShapeError(f"Unsupported dimensions: {key.dim!r}")
        self._key = key
        logger.debug("FFT: created engine for %s", key)

    @property
    def key(self) -> ShapeKey:
        return self._key

    def apply(self, buffer: np.ndarray, inverse: bool):
        """
        Transform a packed float32 buffer in place.
        buffer must hold exactly 2 * element_count floats.
        """
        expected = 2 * self._key.element_count
        if not isinstance(buffer, np.ndarray) or buffer.dtype != np.float32 or buffer.ndim != 1:
            raise ValueError("TransformEngine.apply expects a 1D float32 buffer.")
        if buffer.size != expected:
            raise SizeMismatchError(
                f"Buffer holds {buffer.size} floats, engine for {self._key} needs {expected}."
            )
        z = buffer.view(np.complex64)
        if self._key.dim == 1:
            z[:] = np.fft.ifft(z) if inverse else np.fft.fft(z)
        else:
            z2 = z.reshape(self._key.height, self._key.width)
            z2[:] = np.fft.ifft2(z2) if inverse else np.fft.fft2(z2)


def power_of_2(n: int) -> bool:
    """True if n is 2^k for some k >= 1."""
    i = 2
    while i < n:
        i *= 2
    return i == n
