"""Two-dimensional vectors and flocking agents that move on the matrix."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Vector:
    """An immutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def mag(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.mag()
        return self / length if length else self

    def limited(self, maximum: float) -> Vector:
        """This vector, shortened to at most the given length."""
        if self.mag() > maximum:
            return self.normalized() * maximum
        return self

    def dist(self, other: Vector) -> float:
        return (self - other).mag()


def _arduino_map(value: float, in_min: int, in_max: int, out_min: float, out_max: float) -> int:
    """Integer range mapping, truncating every operand as the firmware does."""
    v, lo, hi = int(value), int(in_min), int(in_max)
    out_lo, out_hi = int(out_min), int(out_max)
    numerator = (v - lo) * (out_hi - out_lo)
    quotient = abs(numerator) // (hi - lo)
    return (quotient if numerator >= 0 else -quotient) + out_lo


def _map_float(x: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


@dataclass(eq=False)
class Boid:
    """A flocking agent with separation, alignment and cohesion rules."""

    x: float
    y: float
    width: int
    height: int
    rng: random.Random | None = None
    location: Vector = field(init=False)
    velocity: Vector = field(init=False)
    acceleration: Vector = field(init=False)
    maxspeed: float = field(default=1.5, init=False)
    maxforce: float = field(default=0.05, init=False)
    desiredseparation: float = field(default=4.0, init=False)
    neighbordist: float = field(default=8.0, init=False)
    color_index: int = field(default=0, init=False)
    mass: float = field(default=1.0, init=False)
    enabled: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        self.location = Vector(self.x, self.y)
        self.acceleration = Vector(0.0, 0.0)
        self.velocity = Vector(self._random_component(), self._random_component())

    def _random_component(self) -> float:
        return _map_float(self.rng.randrange(0, 255), 0, 255, -0.5, 0.5)

    def _neighbours(self, boids: Iterable[Boid], radius: float):
        for other in boids:
            if not other.enabled:
                continue
            d = self.location.dist(other.location)
            if 0 < d < radius:
                yield other, d

    def run(self, boids: Iterable[Boid]) -> None:
        boids = list(boids)
        self.flock(boids)
        self.update()

    def update(self) -> None:
        self.velocity = (self.velocity + self.acceleration).limited(self.maxspeed)
        self.location = self.location + self.velocity
        self.acceleration = Vector(0.0, 0.0)

    def apply_force(self, force: Vector) -> None:
        self.acceleration = self.acceleration + force

    def repel_force(self, obstacle: Vector, radius: float) -> None:
        """Push away from an obstacle that the next step comes within radius of."""
        future = self.location + self.velocity
        d = (obstacle - future).mag()
        if d <= radius:
            repel = (self.location - obstacle).normalized()
            if d != 0:
                repel = repel.normalized() * (self.maxforce * 7)
            self.apply_force(repel)

    def flock(self, boids: Iterable[Boid]) -> None:
        boids = list(boids)
        self.apply_force(self.separate(boids) * 1.5)
        self.apply_force(self.align(boids) * 1.0)
        self.apply_force(self.cohesion(boids) * 1.0)

    def separate(self, boids: Iterable[Boid]) -> Vector:
        steer = Vector(0.0, 0.0)
        count = 0
        for other, d in self._neighbours(boids, self.desiredseparation):
            steer = steer + (self.location - other.location).normalized() / d
            count += 1
        if count:
            steer = steer / count
        if steer.mag() > 0:
            steer = (steer.normalized() * self.maxspeed - self.velocity).limited(self.maxforce)
        return steer

    def align(self, boids: Iterable[Boid]) -> Vector:
        total = Vector(0.0, 0.0)
        count = 0
        for other, _ in self._neighbours(boids, self.neighbordist):
            total = total + other.velocity
            count += 1
        if not count:
            return Vector(0.0, 0.0)
        desired = (total / count).normalized() * self.maxspeed
        return (desired - self.velocity).limited(self.maxforce)

    def cohesion(self, boids: Iterable[Boid]) -> Vector:
        total = Vector(0.0, 0.0)
        count = 0
        for other, _ in self._neighbours(boids, self.neighbordist):
            total = total + other.location
            count += 1
        if not count:
            return Vector(0.0, 0.0)
        return self.seek(total / count)

    def seek(self, target: Vector) -> Vector:
        """Steering force towards a target, capped at maxforce."""
        desired = (target - self.location).normalized() * self.maxspeed
        return (desired - self.velocity).limited(self.maxforce)

    def arrive(self, target: Vector) -> None:
        """Steer towards a target, slowing down close to it."""
        desired = target - self.location
        d = desired.mag()
        desired = desired.normalized()
        if d < 4:
            desired = desired * _arduino_map(d, 0, 100, 0, self.maxspeed)
        else:
            desired = desired * self.maxspeed
        self.apply_force((desired - self.velocity).limited(self.maxforce))

    def wrap_around_borders(self) -> None:
        x, y = self.location.x, self.location.y
        if x < 0:
            x = self.width - 1
        if y < 0:
            y = self.height - 1
        if x >= self.width:
            x = 0
        if y >= self.height:
            y = 0
        self.location = Vector(x, y)

    def avoid_borders(self) -> None:
        desired = self.velocity
        loc = self.location
        if loc.x < 8:
            desired = Vector(self.maxspeed, self.velocity.y)
        if loc.x >= self.width - 8:
            desired = Vector(-self.maxspeed, self.velocity.y)
        if loc.y < 8:
            desired = Vector(self.velocity.x, self.maxspeed)
        if loc.y >= self.height - 8:
            desired = Vector(self.velocity.x, -self.maxspeed)

        if desired != self.velocity:
            self.apply_force((desired - self.velocity).limited(self.maxforce))

        x = min(max(loc.x, 0), self.width - 1) if loc.x < 0 or loc.x >= self.width else loc.x
        y = min(max(loc.y, 0), self.height - 1) if loc.y < 0 or loc.y >= self.height else loc.y
        self.location = Vector(x, y)

    def bounce_off_borders(self, bounce: float) -> bool:
        """Reflect off the edges, damping by bounce; True if an edge was hit."""
        bounced = False
        x, y = self.location.x, self.location.y
        vx, vy = self.velocity.x, self.velocity.y
        if x >= self.width:
            x, vx, bounced = self.width - 1, vx * -bounce, True
        elif x < 0:
            x, vx, bounced = 0, vx * -bounce, True
        if y >= self.height:
            y, vy, bounced = self.height - 1, vy * -bounce, True
        elif y < 0:
            y, vy, bounced = 0, vy * -bounce, True
        self.location = Vector(x, y)
        self.velocity = Vector(vx, vy)
        return bounced