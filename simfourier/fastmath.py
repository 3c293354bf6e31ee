"""
simfourier/fastmath.py

Table-based sine/cosine for phase ramps where throughput matters more than the
last digits. Values are linearly interpolated from a one-period sine table of
config.FAST_TRIG_TABLE_SIZE entries; max abs error is below 1e-5.

Functions accept scalars or numpy arrays and return float32.
"""

import numpy as np

from . import config

_TWO_PI = 2.0 * np.pi
_SIZE = config.FAST_TRIG_TABLE_SIZE
# one extra entry so index+1 never wraps
_SIN_TABLE = np.sin(np.arange(_SIZE + 1, dtype=np.float64) * (_TWO_PI / _SIZE)).astype(np.float32)


def fsin(phase):
    """Fast approximate sin(phase)."""
    pos = np.mod(np.asarray(phase, dtype=np.float64), _TWO_PI) * (_SIZE / _TWO_PI)
    idx = np.minimum(np.floor(pos).astype(np.int64), _SIZE - 1)
    frac = (pos - idx).astype(np.float32)
    lo = _SIN_TABLE[idx]
    hi = _SIN_TABLE[idx + 1]
    return lo + (hi - lo) * frac


def fcos(phase):
    """Fast approximate cos(phase)."""
    return fsin(np.asarray(phase, dtype=np.float64) + 0.5 * np.pi)
