'''
FFT entry points for packed vectors.

TransformDispatcher derives the ShapeKey for a call, fetches (or creates) the
matching engine from its registry and runs it in place on the caller's buffer.
No normalization is applied here; see simfourier.engine for the convention.
'''

from typing import Optional
import numpy as np

from .engine import ShapeKey
from .registry import TransformRegistry
from .vectors import ComplexVector, ComplexVector2D


class TransformDispatcher:
    """
    In-place 1D and 2D complex FFTs.
    Pass a registry to share engines between dispatchers, otherwise a private one is created.
    """

    def __init__(self, registry: Optional[TransformRegistry] = None):
        self.registry = registry if registry is not None else TransformRegistry()

    def transform_1d(self, buffer: np.ndarray, length: int, inverse: bool):
        engine = self.registry.resolve(ShapeKey.one_d(length))
        engine.apply(buffer, inverse)

    def transform_2d(self, buffer: np.ndarray, width: int, height: int, inverse: bool):
        engine = self.registry.resolve(ShapeKey.two_d(width, height))
        engine.apply(buffer, inverse)

    def fft1d(self, vec: ComplexVector, inverse: bool):
        """One-dimensional FFT of a complex vector."""
        self.transform_1d(vec.data, vec.elem_count, inverse)

    def fft1d_packed(self, data: np.ndarray, inverse: bool):
        """
        One-dimensional FFT of a bare packed float32 array
        (data[2*i] = real[i], data[2*i+1] = imag[i]).
        """
        self.transform_1d(data, len(data) // 2, inverse)

    def fft2d(self, vec: ComplexVector2D, inverse: bool):
        """Two-dimensional FFT of a complex vector."""
        self.transform_2d(vec.data, vec.width, vec.height, inverse)
