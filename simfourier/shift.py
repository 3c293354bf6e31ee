"""
simfourier/shift.py

Fourier shift theorem operators.

Multiplying a spectrum by the linear phase ramp exp(i * 2*pi * (kx*x + ky*y) / N)
translates the corresponding spatial image by (kx, ky).

Functions:
- create_shift_vector(n, kx, ky, fast=False) -> ComplexVector2D (n x n phase ramp)
- times_shift_vector(vec, kx, ky, fast=False) -> None (in-place multiply)

Both run one row per parallel_for index. fast=True swaps numpy's sin/cos for
the table lookup in simfourier.fastmath.
"""

from typing import Optional
import numpy as np

from .fastmath import fcos, fsin
from .parallel import parallel_for
from .vectors import ComplexVector2D, check_square


def _row_phases(n: int, kx: float, ky: float, y: int, xs: np.ndarray) -> np.ndarray:
    return (2 * np.pi * (kx * xs + ky * y) / n).astype(np.float32)


def _cos_sin(phase: np.ndarray, fast: bool):
    if fast:
        return fcos(phase), fsin(phase)
    return np.cos(phase), np.sin(phase)


def create_shift_vector(
    n: int, kx: float, ky: float, fast: bool = False, workers: Optional[int] = None
) -> ComplexVector2D:
    """
    Return an n x n vector holding (cos(phi), sin(phi)) with
    phi = 2*pi*(kx*x + ky*y)/n at every position.
    """
    shft = ComplexVector2D(n, n)
    val = shft.data.reshape(n, 2 * n)
    xs = np.arange(n, dtype=np.float64)

    def row(y: int):
        co, si = _cos_sin(_row_phases(n, kx, ky, y, xs), fast)
        val[y, 0::2] = co
        val[y, 1::2] = si

    parallel_for(0, n, row, workers=workers)
    return shft


def times_shift_vector(
    vec: ComplexVector2D, kx: float, ky: float, fast: bool = False, workers: Optional[int] = None
):
    """
    Multiply vec in place by the shift phases for (kx, ky).
    vec must be square; raises NonSquareShapeError otherwise.
    """
    n = check_square(vec)
    val = vec.data.reshape(n, 2 * n)
    xs = np.arange(n, dtype=np.float64)

    def row(y: int):
        co, si = _cos_sin(_row_phases(n, kx, ky, y, xs), fast)
        re = val[y, 0::2].copy()
        im = val[y, 1::2].copy()
        val[y, 0::2] = re * co - im * si
        val[y, 1::2] = re * si + im * co

    parallel_for(0, n, row, workers=workers)
