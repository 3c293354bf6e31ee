"""
simfourier/vectors.py

Packed float containers consumed by the transform, spectrum and shift code.

Layout:
- complex vectors store interleaved pairs: data[2*i] = real[i], data[2*i+1] = imag[i]
- 2D vectors are row-major: element (x, y) lives at index y*width + x
- all buffers are float32

API:
- ComplexVector(length, data=None)
- ComplexVector2D(width, height, data=None)
- RealVector2D(width, height, data=None)
- create_cplx(width, height) / create_real(width, height)
- from_array(arr) -> ComplexVector2D or RealVector2D from a (height, width) array
- check_square(vec) -> N
"""

from typing import Optional, Union
import numpy as np

from .errors import NonSquareShapeError, SizeMismatchError


def _check_extent(name: str, value) -> int:
    if isinstance(value, bool) or int(value) != value or int(value) < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}.")
    return int(value)


def _wrap_buffer(data: Optional[np.ndarray], size: int) -> np.ndarray:
    """Allocate a zeroed float32 buffer, or validate and adopt a caller-supplied one."""
    if data is None:
        return np.zeros(size, dtype=np.float32)
    buf = np.asarray(data)
    if buf.dtype != np.float32 or buf.ndim != 1:
        raise ValueError("Packed buffers must be 1D float32 arrays.")
    if buf.size != size:
        raise SizeMismatchError(f"Buffer holds {buf.size} floats, expected {size}.")
    return buf


class ComplexVector:
    """One-dimensional complex vector on a packed float buffer."""

    def __init__(self, length: int, data: Optional[np.ndarray] = None):
        self.elem_count = _check_extent("length", length)
        self.data = _wrap_buffer(data, 2 * self.elem_count)

    def _check_index(self, i: int):
        if not 0 <= i < self.elem_count:
            raise IndexError(f"index {i} outside [0, {self.elem_count})")

    def get(self, i: int) -> complex:
        self._check_index(i)
        return complex(float(self.data[2 * i]), float(self.data[2 * i + 1]))

    def set(self, i: int, value: complex):
        self._check_index(i)
        value = complex(value)
        self.data[2 * i] = value.real
        self.data[2 * i + 1] = value.imag

    def as_array(self) -> np.ndarray:
        """complex64 view sharing memory with `data`."""
        return self.data.view(np.complex64)

    def copy(self) -> "ComplexVector":
        return ComplexVector(self.elem_count, self.data.copy())


class _Vector2D:
    _floats_per_element = 1

    def __init__(self, width: int, height: int, data: Optional[np.ndarray] = None):
        self.width = _check_extent("width", width)
        self.height = _check_extent("height", height)
        self.data = _wrap_buffer(data, self._floats_per_element * self.width * self.height)

    @property
    def shape(self):
        return (self.width, self.height)

    def _check_index(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} vector")

    def copy(self):
        return type(self)(self.width, self.height, self.data.copy())


class ComplexVector2D(_Vector2D):
    """Two-dimensional complex vector, row-major, interleaved re/im."""

    _floats_per_element = 2

    def get(self, x: int, y: int) -> complex:
        self._check_index(x, y)
        i = 2 * (y * self.width + x)
        return complex(float(self.data[i]), float(self.data[i + 1]))

    def set(self, x: int, y: int, value: complex):
        self._check_index(x, y)
        value = complex(value)
        i = 2 * (y * self.width + x)
        self.data[i] = value.real
        self.data[i + 1] = value.imag

    def as_array(self) -> np.ndarray:
        """(height, width) complex64 view sharing memory with `data`."""
        return self.data.view(np.complex64).reshape(self.height, self.width)


class RealVector2D(_Vector2D):
    """Two-dimensional real vector, row-major."""

    def get(self, x: int, y: int) -> float:
        self._check_index(x, y)
        return float(self.data[y * self.width + x])

    def set(self, x: int, y: int, value: float):
        self._check_index(x, y)
        self.data[y * self.width + x] = value

    def as_array(self) -> np.ndarray:
        """(height, width) float32 view sharing memory with `data`."""
        return self.data.reshape(self.height, self.width)


def create_cplx(width: int, height: int) -> ComplexVector2D:
    return ComplexVector2D(width, height)


def create_real(width: int, height: int) -> RealVector2D:
    return RealVector2D(width, height)


def from_array(arr: np.ndarray) -> Union[ComplexVector2D, RealVector2D]:
    """
    Copy a (height, width) numpy array into a new 2D vector.
    Complex input gives a ComplexVector2D, anything else a RealVector2D.
    """
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError("from_array expects a 2D array.")
    height, width = arr.shape
    if np.iscomplexobj(arr):
        vec = ComplexVector2D(width, height)
        vec.as_array()[:] = arr.astype(np.complex64)
    else:
        vec = RealVector2D(width, height)
        vec.as_array()[:] = arr.astype(np.float32)
    return vec


def check_square(vec: _Vector2D) -> int:
    """Return N for an N x N vector, raise NonSquareShapeError otherwise."""
    if vec.width != vec.height:
        raise NonSquareShapeError(
            f"Vector must be square, got {vec.width}x{vec.height}."
        )
    return vec.width
