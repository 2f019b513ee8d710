"""Direction helpers: unit vectors from angles and random directions."""

from __future__ import annotations

import math

from ..random_source import RandomSource, resolve_source
from .vector3 import Vector3


TWO_PI = 2.0 * math.pi


def from_angle(angle: float, target: Vector3 | None = None) -> Vector3:
    """Return the 2D unit vector ``(cos angle, sin angle, 0)``."""
    if target is None:
        return Vector3(math.cos(angle), math.sin(angle), 0.0)
    return target.set(math.cos(angle), math.sin(angle), 0.0)


def random_2d(
    target: Vector3 | None = None, source: RandomSource | None = None
) -> Vector3:
    """Return a 2D unit vector with a uniformly random heading."""
    angle = resolve_source(source).uniform(0.0, TWO_PI)
    return from_angle(angle, target)


def random_3d(
    target: Vector3 | None = None, source: RandomSource | None = None
) -> Vector3:
    """Return a unit vector uniformly distributed on the sphere.

    Sampling z uniformly in [-1, 1) and the azimuth uniformly in [0, 2pi)
    gives equal-area coverage (Archimedes' hat-box theorem), so the result is
    unit length without a normalization pass.
    """
    rng = resolve_source(source)
    angle = rng.uniform(0.0, TWO_PI)
    vz = rng.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - vz * vz)
    vx = r * math.cos(angle)
    vy = r * math.sin(angle)
    if target is None:
        return Vector3(vx, vy, vz)
    return target.set(vx, vy, vz)
