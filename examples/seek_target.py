"""Steering example: a mover seeks a fixed point with capped speed (toy model)."""

from __future__ import annotations

from vecmath.core.math import vector3 as v3
from vecmath.core.math.vector3 import Vector3


class Mover:
    def __init__(self, pos: Vector3, max_speed: float, max_force: float) -> None:
        self.pos = pos
        self.vel = Vector3()
        self.max_speed = max_speed
        self.max_force = max_force
        # scratch buffers reused every step
        self._desired = Vector3()
        self._steer = Vector3()

    def seek(self, goal: Vector3, dt: float) -> None:
        v3.sub(goal, self.pos, self._desired).set_mag(self.max_speed)
        v3.sub(self._desired, self.vel, self._steer).limit(self.max_force)
        self.vel.add(self._steer.mult(dt)).limit(self.max_speed)
        self.pos.add(v3.mult(self.vel, dt, self._desired))


if __name__ == "__main__":
    mover = Mover(Vector3(0.0, 0.0), max_speed=4.0, max_force=2.0)
    goal = Vector3(10.0, 5.0)

    dt = 0.01
    steps = 1000
    for _ in range(steps):
        mover.seek(goal, dt)

    print("final pos:", mover.pos)
    print("final vel:", mover.vel)
    print("distance to goal:", mover.pos.dist(goal))
    print("heading (rad):", mover.vel.heading())
