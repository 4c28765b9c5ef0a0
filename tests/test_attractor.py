import random

import pytest

from ledmatrix.attractor import Attractor
from ledmatrix.boid import Boid, Vector


def boid_at(x, y):
    return Boid(x, y, 64, 32, random.Random(3))


def test_force_points_towards_attractor():
    attractor = Attractor(32, 16)
    force = attractor.attract(boid_at(10, 16))
    assert force.x > 0
    assert force.y == pytest.approx(0)


def test_close_distances_are_clamped():
    attractor = Attractor(32, 16)
    near = attractor.attract(boid_at(31, 16)).mag()
    nearer = attractor.attract(boid_at(29, 16)).mag()
    assert near == pytest.approx(nearer)


def test_far_distances_are_clamped():
    attractor = Attractor(0, 0)
    a = attractor.attract(boid_at(40, 0)).mag()
    b = attractor.attract(boid_at(60, 0)).mag()
    assert a == pytest.approx(b)


def test_force_scales_with_boid_mass():
    attractor = Attractor(32, 16)
    boid = boid_at(20, 16)
    single = attractor.attract(boid).mag()
    boid.mass = 2.0
    assert attractor.attract(boid).mag() == pytest.approx(2 * single)


def test_default_strength_at_minimum_distance():
    attractor = Attractor(32, 16)
    force = attractor.attract(boid_at(32, 11))
    assert force.mag() == pytest.approx(0.2)
    assert attractor.location == Vector(32, 16)


def test_coincident_boid_gets_no_force():
    attractor = Attractor(5, 5)
    assert attractor.attract(boid_at(5, 5)) == Vector(0, 0)