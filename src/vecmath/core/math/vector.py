"""Vector utilities for 3-element float32 NumPy arrays.

These back the ``Vector3`` value type; all inputs are shaped (3,).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


DTYPE = np.float32

ArrayF = NDArray[np.float32]


def as_vec(v: ArrayLike) -> ArrayF:
    """Return ``v`` as a fresh contiguous float32 array of shape (3,)."""
    a = np.array(v, dtype=DTYPE)
    if a.shape != (3,):
        raise ValueError("vector must have shape (3,)")
    return a


def norm_sq(v: ArrayF) -> float:
    return float(np.dot(v, v))


def norm(v: ArrayF) -> float:
    """Return the L2 norm in float32 precision."""
    return float(np.sqrt(np.dot(v, v)))


def dot(a: ArrayF, b: ArrayF) -> float:
    return float(np.dot(a, b))


def cross(a: ArrayF, b: ArrayF) -> ArrayF:
    """Return the cross product ``a x b``."""
    return np.cross(a, b).astype(DTYPE, copy=False)


def unit(v: ArrayF) -> ArrayF:
    """Return the unit vector of ``v``.

    Vectors of length 0 or exactly 1 come back as an unchanged copy.
    """
    v = np.asarray(v, dtype=DTYPE)
    n = DTYPE(np.sqrt(np.dot(v, v)))
    if n == 0.0 or n == 1.0:
        return v.copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        return v / n


def safe_mul(v: ArrayF, n: float) -> ArrayF:
    """Scale by a scalar; inf/nan components propagate without warnings."""
    with np.errstate(invalid="ignore", over="ignore"):
        return (v * n).astype(DTYPE, copy=False)


def safe_div(v: ArrayF, n: float) -> ArrayF:
    """Divide without checking for zero; yields inf/nan per IEEE-754."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return (v / DTYPE(n)).astype(DTYPE, copy=False)
