"""Random sources consumed by the random-direction helpers.

Any object with ``uniform(low, high)`` returning a float in ``[low, high)``
works; ``numpy.random.Generator`` is the reference implementation.
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""


_default: np.random.Generator = np.random.default_rng()


def default_source() -> np.random.Generator:
    return _default


def seed_default_source(seed: int | None) -> None:
    """Reseed the shared default source so unseeded calls become repeatable."""
    global _default
    logger.debug("reseeding default random source with seed=%r", seed)
    _default = np.random.default_rng(seed)


def resolve_source(source: RandomSource | None) -> RandomSource:
    if source is None:
        logger.debug("no random source supplied, using default")
        return _default
    return source
