"""
simfourier/config.py

Tunables shared by the transform, spectrum and shift modules.
"""
import os

# power spectrum display window, in natural-log units (~13 decades)
POWER_SPECTRUM_LOG_RANGE = 30.0

# entries in the sine lookup table used by fastmath (one full period)
FAST_TRIG_TABLE_SIZE = 4096

# worker count override for parallel_for
THREADS_ENV_VAR = "SIMFOURIER_THREADS"


def default_workers() -> int:
    """
    Number of workers for parallel_for.
    Uses $SIMFOURIER_THREADS when it holds a positive integer, else the CPU count.
    """
    raw = os.environ.get(THREADS_ENV_VAR)
    if raw:
        try:
            n = int(raw)
        except ValueError:
            raise ValueError(f"{THREADS_ENV_VAR} must be a positive integer, got {raw!r}.")
        if n < 1:
            raise ValueError(f"{THREADS_ENV_VAR} must be a positive integer, got {raw!r}.")
        return n
    return os.cpu_count() or 1
