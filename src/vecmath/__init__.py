"""Mutable 2D/3D Euclidean vectors for animation, physics and graphics code."""

from __future__ import annotations

import logging

from .core.math import (  # noqa: F401
    TWO_PI,
    Vector3,
    angle_between,
    from_angle,
    random_2d,
    random_3d,
)
from .core.random_source import (  # noqa: F401
    RandomSource,
    default_source,
    seed_default_source,
)


__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
