"""
simfourier: Fourier-domain primitives for structured-illumination reconstruction.
Exposes public modules for import in tests and pipeline code.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "config",
    "errors",
    "vectors",
    "parallel",
    "fastmath",
    "engine",
    "registry",
    "transforms",
    "spectrum",
    "shift",
]
