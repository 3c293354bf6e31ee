"""
simfourier/spectrum.py

Display-oriented post-processing of Fourier spectra.

Functions:
- compute_power_spectrum(inp, out, swap_quadrants=True, workers=None)
    log-scaled, clipped magnitude of a complex spectrum written into a real vector
- swap_quadrant(vec)
    in-place quadrant exchange (1 <-> 3, 2 <-> 4) for complex or real 2D vectors

Notes:
- The log window is taken from the min/max of the raw interleaved re/im floats,
  not from the magnitudes. Magnitudes can exceed the largest raw float by up to
  sqrt(2); those pixels saturate at 1.
- The window is limited to config.POWER_SPECTRUM_LOG_RANGE natural-log units.
"""

from typing import Optional, Union
import warnings
import numpy as np

from . import config
from .errors import SizeMismatchError
from .parallel import parallel_for
from .vectors import ComplexVector2D, RealVector2D

# smallest positive float32 (Java's Float.MIN_VALUE), seeds the max scan
_FLOAT_MIN_VALUE = float(np.nextafter(np.float32(0), np.float32(1)))


def _log_window(raw: np.ndarray):
    """
    Return (lo, hi) natural-log bounds for the scaling, already range-limited.
    NaN entries are skipped; an all-NaN buffer leaves only the max seed.
    """
    if np.all(np.isnan(raw)):
        vmin, vmax = float("nan"), _FLOAT_MIN_VALUE
    else:
        vmin = float(np.nanmin(raw))
        vmax = max(float(np.nanmax(raw)), _FLOAT_MIN_VALUE)
    with np.errstate(divide="ignore", invalid="ignore"):
        hi = float(np.float32(np.log(vmax)))
        lo = float(np.float32(np.log(np.float64(vmin))))
    if np.isnan(lo) or hi - lo > config.POWER_SPECTRUM_LOG_RANGE:
        lo = hi - config.POWER_SPECTRUM_LOG_RANGE
    return lo, hi


def compute_power_spectrum(
    inp: ComplexVector2D,
    out: RealVector2D,
    swap_quadrants: bool = True,
    workers: Optional[int] = None,
):
    """
    Compute a power spectrum for display, assuming `inp` is an FFT spectrum.

    Each pixel becomes (ln|z| - lo) / (hi - lo), with NaN and negative results
    clamped to 0 and results above 1 clamped to 1. NaN coefficients do not take
    part in the window scan, so they only zero their own pixel. If the window
    has zero width, pixels above it are written as 1 and all others as 0.
    With swap_quadrants the value for (x, y) is written to
    ((x + w//2) % w, (y + h//2) % h), centering the zero frequency.

    Parameters
    ----------
    inp : ComplexVector2D
        Spectrum, left untouched.
    out : RealVector2D
        Destination, same width/height as inp; fully overwritten.
    swap_quadrants : bool
        Center the zero frequency (default True).
    workers : Optional[int]
        Passed to parallel_for.

    Raises
    ------
    SizeMismatchError
        If out and inp dimensions differ. Nothing is written in that case.
    """
    w, h = inp.width, inp.height
    if out.width != w or out.height != h:
        raise SizeMismatchError(
            f"Vector size mismatch: input {w}x{h}, output {out.width}x{out.height}."
        )

    lo, hi = _log_window(inp.data)
    span = hi - lo
    src = inp.as_array()
    dst = out.as_array()
    half_w, half_h = w // 2, h // 2

    def row(y: int):
        line = src[y]
        mag = np.hypot(line.real.astype(np.float64), line.imag.astype(np.float64))
        with np.errstate(divide="ignore", invalid="ignore"):
            log_mag = np.log(mag)
            if span == 0:
                r = np.where(log_mag > hi, 1.0, 0.0)
            else:
                r = (log_mag - lo) / span
        r[np.isnan(r) | (r < 0)] = 0.0
        np.minimum(r, 1.0, out=r)
        if swap_quadrants:
            dst[(y + half_h) % h] = np.roll(r, half_w)
        else:
            dst[y] = r

    parallel_for(0, h, row, workers=workers)


def swap_quadrant(vec: Union[ComplexVector2D, RealVector2D]):
    """
    Swap quadrants in place: top-left <-> bottom-right, bottom-left <-> top-right.

    Even widths and heights are expected. For odd extents the last column/row
    is left where it is and a RuntimeWarning is emitted.
    """
    w, h = vec.width, vec.height
    if w % 2 or h % 2:
        warnings.warn(
            f"swap_quadrant on odd-sized vector ({w}x{h}); last row/column is not swapped.",
            RuntimeWarning,
        )
    hw, hh = w // 2, h // 2
    if hw == 0 or hh == 0:
        return
    a = vec.as_array()
    # 1 <-> 3
    tmp = a[:hh, :hw].copy()
    a[:hh, :hw] = a[hh:2 * hh, hw:2 * hw]
    a[hh:2 * hh, hw:2 * hw] = tmp
    # 2 <-> 4
    tmp = a[hh:2 * hh, :hw].copy()
    a[hh:2 * hh, :hw] = a[:hh, hw:2 * hw]
    a[:hh, hw:2 * hw] = tmp
