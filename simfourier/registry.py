"""
simfourier/registry.py

Memoizing cache of transform engines, one per ShapeKey.

Lookups of already-built engines take no lock. Construction happens under a
single registry lock with a second lookup, so concurrent first requests for the
same key build exactly one engine and nobody sees a half-built one. Failed
constructions are not cached. There is no eviction.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .engine import ShapeKey, TransformEngine

logger = logging.getLogger(__name__)


class TransformRegistry:
    """
    Maps ShapeKey -> TransformEngine.

    engine_factory : callable(key) -> engine, defaults to TransformEngine.
        Must raise UnsupportedShapeError for shapes it cannot handle.
    """

    def __init__(self, engine_factory: Optional[Callable[[ShapeKey], TransformEngine]] = None):
        self._factory = engine_factory or TransformEngine
        self._engines: Dict[ShapeKey, TransformEngine] = {}
        self._lock = threading.Lock()

    def resolve(self, key: ShapeKey) -> TransformEngine:
        """Return the engine for key, building and storing it on first use."""
        engine = self._engines.get(key)
        if engine is not None:
            return engine
        with self._lock:
            engine = self._engines.get(key)
            if engine is None:
                logger.debug("FFT: creating new instance for %s", key)
                engine = self._factory(key)
                # publish only once fully constructed
                self._engines[key] = engine
        return engine

    def __contains__(self, key) -> bool:
        return key in self._engines

    def __len__(self) -> int:
        return len(self._engines)

    def keys(self) -> List[ShapeKey]:
        """Cached keys in ShapeKey order."""
        return sorted(self._engines)
