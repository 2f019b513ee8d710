"""Random-walk example: 2D and 3D walkers driven by a seeded generator."""

from __future__ import annotations

import numpy as np

from vecmath import Vector3, angle_between, random_2d, random_3d


if __name__ == "__main__":
    rng = np.random.default_rng(2024)
    step = Vector3()

    flat = Vector3()
    for _ in range(500):
        flat.add(random_2d(step, rng))

    space = Vector3()
    for _ in range(500):
        space.add(random_3d(step, rng).mult(0.5))

    print("2D walker:", flat, "mag", flat.mag())
    print("3D walker:", space, "mag", space.mag())
    print("angle between walkers (rad):", angle_between(flat, space))
