"""Virtual LED matrix panels, framebuffer effects, boids and mazes."""

__version__ = "0.1.0"
__all__ = ["virtual_panel", "color", "effects", "transforms", "boid", "attractor", "maze"]