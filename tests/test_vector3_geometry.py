from __future__ import annotations

import math

import numpy as np

from vecmath.core.math import vector3 as v3
from vecmath.core.math.vector3 import Vector3, angle_between


def _random_vectors(seed: int, n: int, scale: float = 10.0) -> list[Vector3]:
    rng = np.random.default_rng(seed)
    return [Vector3(*row) for row in rng.uniform(-scale, scale, size=(n, 3))]


def test_normalize_gives_unit_length() -> None:
    for v in _random_vectors(11, 100):
        assert np.isclose(v3.normalize(v).mag(), 1.0, atol=1e-6)
        assert np.isclose(v.normalize().mag(), 1.0, atol=1e-6)


def test_normalize_zero_stays_zero() -> None:
    zero = Vector3()
    assert zero.normalize() == Vector3()
    out = v3.normalize(Vector3())
    assert out == Vector3()
    assert out.mag() == 0.0
    assert not any(math.isnan(c) for c in out)


def test_normalize_targeted_leaves_source() -> None:
    v = Vector3(0.0, 3.0, 4.0)
    target = Vector3(9.0, 9.0, 9.0)
    assert v3.normalize(v, target) is target
    assert np.allclose(tuple(target), (0.0, 0.6, 0.8))
    assert v == Vector3(0.0, 3.0, 4.0)

    unit = Vector3(0.0, 0.0, 1.0)
    assert v3.normalize(unit, target) == unit
    assert v3.normalize(Vector3(), target) == Vector3()


def test_limit() -> None:
    v = Vector3(3.0, 4.0, 0.0)
    assert v.limit(10.0) is v
    assert v == Vector3(3.0, 4.0, 0.0)
    v.limit(5.0)
    assert v == Vector3(3.0, 4.0, 0.0)

    v.limit(1.0)
    assert np.isclose(v.mag(), 1.0, atol=1e-6)
    assert np.allclose(tuple(v), (0.6, 0.8, 0.0))

    src = Vector3(0.0, 0.0, 20.0)
    out = v3.limit(src, 2.0)
    assert np.allclose(tuple(out), (0.0, 0.0, 2.0))
    assert src == Vector3(0.0, 0.0, 20.0)


def test_set_mag() -> None:
    v = Vector3(3.0, 4.0, 0.0)
    assert v.set_mag(10.0) is v
    assert np.allclose(tuple(v), (6.0, 8.0, 0.0))
    assert Vector3().set_mag(3.0) == Vector3()


def test_set_mag_targeted_does_not_mutate_source() -> None:
    v = Vector3(0.0, 5.0, 0.0)
    target = Vector3()
    assert v3.set_mag(v, 2.0, target) is target
    assert np.allclose(tuple(target), (0.0, 2.0, 0.0))
    assert v == Vector3(0.0, 5.0, 0.0)
    out = v3.set_mag(v, 1.0)
    assert out is not v
    assert np.allclose(tuple(out), (0.0, 1.0, 0.0))


def test_heading() -> None:
    assert Vector3(1.0, 0.0, 0.0).heading() == 0.0
    assert np.isclose(Vector3(0.0, 2.0, 0.0).heading(), math.pi / 2.0)
    assert np.isclose(Vector3(-1.0, 0.0, 0.0).heading(), math.pi)
    assert np.isclose(v3.heading(Vector3(0.0, -1.0, 0.0)), -math.pi / 2.0)
    assert Vector3(1.0, 0.0, 99.0).heading() == 0.0


def test_set_heading_keeps_magnitude_and_z() -> None:
    v = Vector3(3.0, 4.0, 0.0)
    assert v.set_heading(0.0) is v
    assert v == Vector3(5.0, 0.0, 0.0)
    v.set_heading(math.pi / 2.0)
    assert np.allclose(tuple(v), (0.0, 5.0, 0.0), atol=1e-6)

    w = Vector3(1.0, 0.0, 2.0)
    w.set_heading(math.pi)
    assert w.z == 2.0
    assert np.isclose(w.x, -math.sqrt(5.0))


def test_rotate_2d() -> None:
    v = Vector3(1.0, 0.0, 5.0)
    assert v.rotate(math.pi / 2.0) is v
    assert np.allclose(tuple(v), (0.0, 1.0, 5.0), atol=1e-6)
    assert v.z == 5.0

    v = Vector3(1.0, 1.0, 0.0)
    v.rotate(math.pi / 4.0)
    assert np.allclose(tuple(v), (0.0, math.sqrt(2.0), 0.0), atol=1e-6)

    src = Vector3(2.0, 0.0, 0.0)
    out = v3.rotate(src, math.pi)
    assert np.allclose(tuple(out), (-2.0, 0.0, 0.0), atol=1e-6)
    assert src == Vector3(2.0, 0.0, 0.0)


def test_rotate_preserves_magnitude() -> None:
    rng = np.random.default_rng(5)
    for v, theta in zip(_random_vectors(6, 50), rng.uniform(-np.pi, np.pi, size=50)):
        m0 = math.hypot(v.x, v.y)
        v.rotate(float(theta))
        assert np.isclose(math.hypot(v.x, v.y), m0, rtol=1e-5)


def test_lerp_endpoints_are_exact() -> None:
    for a, b in zip(_random_vectors(21, 50), _random_vectors(22, 50)):
        assert v3.lerp(a, b, 0.0) == a
        assert v3.lerp(a, b, 1.0) == b


def test_lerp_midpoint_and_extrapolation() -> None:
    a = Vector3(0.0, 0.0, 0.0)
    b = Vector3(2.0, 4.0, -6.0)
    assert v3.lerp(a, b, 0.5) == Vector3(1.0, 2.0, -3.0)
    assert v3.lerp(a, b, 2.0) == Vector3(4.0, 8.0, -12.0)
    assert v3.lerp(a, b, -1.0) == Vector3(-2.0, -4.0, 6.0)
    assert a == Vector3()

    target = Vector3()
    assert v3.lerp(a, b, 0.25, target) is target
    assert target == Vector3(0.5, 1.0, -1.5)


def test_lerp_in_place_forms() -> None:
    v = Vector3(0.0, 0.0, 0.0)
    assert v.lerp(Vector3(4.0, 4.0, 4.0), 0.5) is v
    assert v == Vector3(2.0, 2.0, 2.0)
    v.lerp((2.0, 6.0, 10.0), 0.5)
    assert v == Vector3(2.0, 4.0, 6.0)


def test_angle_between_examples() -> None:
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert np.isclose(angle_between(x, y), math.pi / 2.0)
    assert angle_between(x, x) == 0.0
    assert angle_between(x, -x) == math.pi


def test_angle_between_zero_vector_is_zero() -> None:
    v = Vector3(1.0, 2.0, 3.0)
    assert angle_between(Vector3(), v) == 0.0
    assert angle_between(v, Vector3()) == 0.0
    assert angle_between(Vector3(), Vector3()) == 0.0


def test_angle_between_self_and_opposite() -> None:
    for v in _random_vectors(31, 100):
        assert angle_between(v, v) == 0.0
        assert angle_between(v, v.copy().mult(3.0)) < 1e-3
        assert np.isclose(angle_between(v, -v), math.pi)


def test_angle_between_never_nan_for_near_parallel() -> None:
    a = Vector3(1e-3, 1.0, 1e-3)
    b = Vector3(1e-3 + 1e-9, 1.0, 1e-3)
    out = angle_between(a, b)
    assert not math.isnan(out)
    assert 0.0 <= out < 1e-3


def test_heading_stays_in_half_open_range() -> None:
    assert Vector3(-1.0, -0.0, 0.0).heading() == math.pi
    assert Vector3(-1.0, 0.0, 0.0).heading() == math.pi
    for v in _random_vectors(41, 100):
        assert -math.pi < v.heading() <= math.pi


def test_limit_targeted() -> None:
    src = Vector3(0.0, 30.0, 40.0)
    target = Vector3(7.0, 7.0, 7.0)
    assert v3.limit(src, 5.0, target) is target
    assert np.allclose(tuple(target), (0.0, 3.0, 4.0))
    assert src == Vector3(0.0, 30.0, 40.0)

    short = Vector3(1.0, 0.0, 0.0)
    assert v3.limit(short, 5.0, target) is target
    assert target == short


def test_rotate_targeted() -> None:
    src = Vector3(1.0, 0.0, 3.0)
    target = Vector3(7.0, 7.0, 7.0)
    assert v3.rotate(src, math.pi / 2.0, target) is target
    assert np.allclose(tuple(target), (0.0, 1.0, 3.0), atol=1e-6)
    assert target.z == 3.0
    assert src == Vector3(1.0, 0.0, 3.0)


def test_set_heading_module_forms() -> None:
    src = Vector3(3.0, 4.0, 2.0)
    out = v3.set_heading(src, 0.0)
    assert out is not src
    assert np.isclose(out.x, math.sqrt(29.0))
    assert out.y == 0.0
    assert out.z == 2.0

    target = Vector3()
    assert v3.set_heading(src, math.pi, target) is target
    assert np.isclose(target.x, -math.sqrt(29.0))
    assert target.z == 2.0
    assert src == Vector3(3.0, 4.0, 2.0)


def test_set_mag_targeted_zero_source() -> None:
    src = Vector3()
    target = Vector3(7.0, 7.0, 7.0)
    assert v3.set_mag(src, 3.0, target) is target
    assert target == Vector3()
    assert not any(math.isnan(c) for c in target)
    assert src == Vector3()
