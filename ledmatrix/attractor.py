"""A point mass that pulls boids towards itself."""

from __future__ import annotations

from dataclasses import dataclass, field

from ledmatrix.boid import Boid, Vector


@dataclass
class Attractor:
    """Gravitational attractor at (x, y)."""

    x: float
    y: float
    mass: float = 10.0
    g: float = 0.5
    location: Vector = field(init=False)

    def __post_init__(self) -> None:
        self.location = Vector(self.x, self.y)

    def attract(self, boid: Boid) -> Vector:
        """Force on the boid, with the distance clamped to 5..32."""
        force = self.location - boid.location
        d = min(max(force.mag(), 5.0), 32.0)
        strength = (self.g * self.mass * boid.mass) / (d * d)
        return force.normalized() * strength