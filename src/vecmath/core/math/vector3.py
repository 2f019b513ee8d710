"""Mutable 3-component Euclidean vector.

Conventions:
- Components are stored as float32; reading ``v.x`` returns a Python float.
- A 2D vector is one with ``z == 0``; there is no separate 2D type.
- Instance methods mutate ``self`` and return it for chaining.
- Module functions never touch their operands. They take an optional
  ``target``: when given, the result is written into it and it is returned,
  otherwise a new vector is allocated. ``target`` may alias an operand.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any

import numpy as np

from . import vector as _arr
from .vector import DTYPE, ArrayF


logger = logging.getLogger(__name__)


def _scalar_args(
    x: float, y: float | None, z: float | None, op: str
) -> tuple[float, ...]:
    if y is None:
        raise TypeError(f"{op}() takes a Vector3 or at least x and y")
    return (x, y) if z is None else (x, y, z)


def _lerp(a: ArrayF, b: ArrayF, amt: float) -> ArrayF:
    # exact at both ends: amt=0 gives a, amt=1 gives b
    return a * (1.0 - amt) + b * amt


class Vector3:
    __slots__ = ("_v",)

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._v = np.array([x, y, z], dtype=DTYPE)

    @classmethod
    def from_sequence(cls, source: Sequence[float]) -> Vector3:
        return cls().set(source)

    @classmethod
    def _wrap(cls, arr: ArrayF) -> Vector3:
        v = cls.__new__(cls)
        v._v = _arr.as_vec(arr)
        return v

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    # ------------------------------------------------------------------
    # assignment and copies
    # ------------------------------------------------------------------
    def set(
        self,
        x: Vector3 | Sequence[float] | float,
        y: float | None = None,
        z: float | None = None,
    ) -> Vector3:
        """Assign components.

        Accepts ``(x, y)`` (z becomes 0), ``(x, y, z)``, another vector, or a
        sequence of at least two floats (a length-2 sequence sets z to 0).
        """
        if y is not None:
            self._v[:] = (x, y, 0.0 if z is None else z)
            return self
        if isinstance(x, Vector3):
            self._v[:] = x._v
            return self
        if isinstance(x, numbers.Real):
            raise TypeError("set() takes a Vector3, a sequence or at least x and y")
        n = len(x)
        if n < 2:
            logger.debug("rejecting set() from sequence of length %d", n)
            raise ValueError("source must have at least 2 elements")
        self._v[:] = (x[0], x[1], x[2] if n >= 3 else 0.0)
        return self

    def copy(self) -> Vector3:
        return Vector3._wrap(self._v)

    def __copy__(self) -> Vector3:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Vector3:
        return self.copy()

    def to_array(
        self, target: MutableSequence[float] | ArrayF | None = None
    ) -> MutableSequence[float] | ArrayF:
        """Export ``[x, y, z]``.

        Without a target a new float32 array is returned. A target of length 2
        receives only x and y.
        """
        if target is None:
            return self._v.copy()
        n = len(target)
        if n < 2:
            logger.debug("rejecting to_array() into buffer of length %d", n)
            raise ValueError("target must have at least 2 elements")
        target[0] = self.x
        target[1] = self.y
        if n >= 3:
            target[2] = self.z
        return target

    # ------------------------------------------------------------------
    # in-place arithmetic
    # ------------------------------------------------------------------
    def add(
        self, v: Vector3 | float, y: float | None = None, z: float | None = None
    ) -> Vector3:
        """Add a vector, or scalars; ``add(x, y)`` leaves z untouched."""
        if isinstance(v, Vector3):
            self._v += v._v
        else:
            s = _scalar_args(v, y, z, "add")
            self._v[: len(s)] += s
        return self

    def sub(
        self, v: Vector3 | float, y: float | None = None, z: float | None = None
    ) -> Vector3:
        """Subtract a vector, or scalars; ``sub(x, y)`` leaves z untouched."""
        if isinstance(v, Vector3):
            self._v -= v._v
        else:
            s = _scalar_args(v, y, z, "sub")
            self._v[: len(s)] -= s
        return self

    def mult(self, n: float) -> Vector3:
        self._v[:] = _arr.safe_mul(self._v, n)
        return self

    def div(self, n: float) -> Vector3:
        """Divide by a scalar. Zero is not checked: results follow IEEE-754."""
        self._v[:] = _arr.safe_div(self._v, n)
        return self

    # ------------------------------------------------------------------
    # measures
    # ------------------------------------------------------------------
    def mag(self) -> float:
        return _arr.norm(self._v)

    def mag_sq(self) -> float:
        return _arr.norm_sq(self._v)

    def dist(self, v: Vector3) -> float:
        dx = self._v[0] - v._v[0]
        dy = self._v[1] - v._v[1]
        dz = self._v[2] - v._v[2]
        return float(np.sqrt(dx * dx + dy * dy + dz * dz))

    def dot(
        self, v: Vector3 | float, y: float | None = None, z: float | None = None
    ) -> float:
        if isinstance(v, Vector3):
            return _arr.dot(self._v, v._v)
        if y is None or z is None:
            raise TypeError("dot() takes a Vector3 or x, y and z")
        return _arr.dot(self._v, _arr.as_vec((v, y, z)))

    def cross(self, v: Vector3, target: Vector3 | None = None) -> Vector3:
        """Return ``self x v``; ``self`` is never modified."""
        return _store(target, _arr.cross(self._v, v._v))

    def heading(self) -> float:
        """Angle of (x, y) with the positive x axis, in (-pi, pi]."""
        angle = math.atan2(self.y, self.x)
        # atan2(-0.0, x<0) is -pi; fold it onto pi
        return math.pi if angle == -math.pi else angle

    # ------------------------------------------------------------------
    # in-place geometry
    # ------------------------------------------------------------------
    def normalize(self) -> Vector3:
        """Scale to unit length; no-op for magnitude 0 or exactly 1."""
        self._v[:] = _arr.unit(self._v)
        return self

    def limit(self, maximum: float) -> Vector3:
        if self.mag_sq() > maximum * maximum:
            self.normalize()
            self.mult(maximum)
        return self

    def set_mag(self, length: float) -> Vector3:
        return self.normalize().mult(length)

    def set_heading(self, angle: float) -> Vector3:
        """Point (x, y) along ``angle`` keeping the magnitude; z is untouched."""
        m = self.mag()
        self._v[0] = m * math.cos(angle)
        self._v[1] = m * math.sin(angle)
        return self

    def rotate(self, theta: float) -> Vector3:
        """Rotate (x, y) by ``theta`` radians; z is untouched."""
        x = float(self._v[0])
        y = float(self._v[1])
        c = math.cos(theta)
        s = math.sin(theta)
        self._v[0] = x * c - y * s
        self._v[1] = x * s + y * c
        return self

    def lerp(self, v: Vector3 | Sequence[float], amt: float) -> Vector3:
        """Move toward ``v`` (a vector or an (x, y, z) sequence) by ``amt``.

        ``amt`` is not clamped; values outside [0, 1] extrapolate.
        """
        other = v._v if isinstance(v, Vector3) else _arr.as_vec(v)
        self._v[:] = _lerp(self._v, other, amt)
        return self

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._v)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return float(self._v[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, n: float) -> Vector3:
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return mult(self, n)

    def __rmul__(self, n: float) -> Vector3:
        return self.__mul__(n)

    def __truediv__(self, n: float) -> Vector3:
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return div(self, n)

    def __neg__(self) -> Vector3:
        return Vector3._wrap(-self._v)

    def __str__(self) -> str:
        return "[ " + ", ".join(str(c) for c in self._v) + " ]"

    def __repr__(self) -> str:
        return "Vector3(" + ", ".join(str(c) for c in self._v) + ")"


def _store(target: Vector3 | None, arr: ArrayF) -> Vector3:
    if target is None:
        return Vector3._wrap(arr)
    target._v[:] = arr
    return target


def copy(v: Vector3, target: Vector3 | None = None) -> Vector3:
    return _store(target, v._v)


def add(a: Vector3, b: Vector3, target: Vector3 | None = None) -> Vector3:
    return _store(target, a._v + b._v)


def sub(a: Vector3, b: Vector3, target: Vector3 | None = None) -> Vector3:
    return _store(target, a._v - b._v)


def mult(v: Vector3, n: float, target: Vector3 | None = None) -> Vector3:
    return _store(target, _arr.safe_mul(v._v, n))


def div(v: Vector3, n: float, target: Vector3 | None = None) -> Vector3:
    return _store(target, _arr.safe_div(v._v, n))


def mag(v: Vector3) -> float:
    return v.mag()


def mag_sq(v: Vector3) -> float:
    return v.mag_sq()


def dist(a: Vector3, b: Vector3) -> float:
    return a.dist(b)


def dot(a: Vector3, b: Vector3) -> float:
    return _arr.dot(a._v, b._v)


def cross(a: Vector3, b: Vector3, target: Vector3 | None = None) -> Vector3:
    """Return ``a x b``."""
    return _store(target, _arr.cross(a._v, b._v))


def normalize(v: Vector3, target: Vector3 | None = None) -> Vector3:
    """Unit vector of ``v``; a zero (or already unit) vector is copied as is."""
    return _store(target, _arr.unit(v._v))


def limit(v: Vector3, maximum: float, target: Vector3 | None = None) -> Vector3:
    return copy(v, target).limit(maximum)


def set_mag(v: Vector3, length: float, target: Vector3 | None = None) -> Vector3:
    return normalize(v, target).mult(length)


def heading(v: Vector3) -> float:
    return v.heading()


def set_heading(v: Vector3, angle: float, target: Vector3 | None = None) -> Vector3:
    return copy(v, target).set_heading(angle)


def rotate(v: Vector3, theta: float, target: Vector3 | None = None) -> Vector3:
    return copy(v, target).rotate(theta)


def lerp(
    a: Vector3, b: Vector3, amt: float, target: Vector3 | None = None
) -> Vector3:
    return _store(target, _lerp(a._v, b._v, amt))


def angle_between(a: Vector3, b: Vector3) -> float:
    """Angle in radians between two vectors, computed in double precision.

    Either operand being the zero vector gives 0.0 rather than NaN. The cosine
    is clamped so rounding can never push it outside [-1, 1].
    """
    if not a._v.any() or not b._v.any():
        return 0.0
    ax, ay, az = a
    bx, by, bz = b
    d = ax * bx + ay * by + az * bz
    ma = ax * ax + ay * ay + az * az
    mb = bx * bx + by * by + bz * bz
    amt = d / math.sqrt(ma * mb)
    if amt <= -1.0:
        return math.pi
    if amt >= 1.0:
        return 0.0
    return math.acos(amt)
