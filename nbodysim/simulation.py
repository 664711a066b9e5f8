"""Direct-summation gravitational N-body simulation in two dimensions."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from itertools import combinations

from .body import Body, Vec2

CENTRAL_MASS = 50000.0
CENTRAL_RADIUS = 10.0
WHITE = (255, 255, 255)

BIG_MIN_DISTANCE = 250.0
SMALL_MIN_DISTANCE = 50.0
EDGE_MARGIN = 50.0
BIG_MIN_MASS = 1000.0
SMALL_MIN_MASS = 20.0
BIG_RADIUS_RANGE = (4.0, 9.0)
SMALL_RADIUS_RANGE = (0.5, 1.5)
COLOR_RANGE = (50, 255)
ORBIT_FACTOR_RANGE = (0.7, 1.0)
BIG_BODY_RATIO = 50


class Simulation:
    """A set of bodies attracting each other under softened Newtonian gravity."""

    def __init__(
        self,
        g: float,
        softening: float,
        dt: float,
        width: float,
        height: float,
        bodies: Iterable[Body] = (),
        rng: random.Random | None = None,
    ) -> None:
        self.gravitational_constant = g
        self.softening = softening
        self.time_step = dt
        self.width = width
        self.height = height
        self._bodies: list[Body] = list(bodies)
        self._rng = rng if rng is not None else random.Random()

    @property
    def bodies(self) -> tuple[Body, ...]:
        """The bodies currently in the simulation."""
        return tuple(self._bodies)

    def _orbiting_body(
        self,
        min_distance: float,
        mass_range: tuple[float, float],
        radius_range: tuple[float, float],
        color_for: callable,
    ) -> Body:
        rng = self._rng
        cx, cy = self.width / 2, self.height / 2
        max_distance = min(self.width, self.height) / 2 - EDGE_MARGIN

        angle = rng.uniform(0.0, 2.0 * math.pi)
        distance = rng.uniform(min_distance, max_distance)
        orbit_factor = rng.uniform(*ORBIT_FACTOR_RANGE)

        position = Vec2(cx + distance * math.cos(angle), cy + distance * math.sin(angle))
        # Speed of a circular orbit around the central mass, scaled down a little.
        speed = math.sqrt(self.gravitational_constant * CENTRAL_MASS / distance) * orbit_factor
        velocity = Vec2(-speed * math.sin(angle), speed * math.cos(angle))

        mass = rng.uniform(*mass_range)
        radius = rng.uniform(*radius_range)
        return Body(position, velocity, mass, radius, color_for())

    def _random_color(self) -> tuple[int, int, int]:
        return tuple(self._rng.randint(*COLOR_RANGE) for _ in range(3))

    def initialize_random_bodies(
        self, n: int, max_mass_small: float, max_mass_big: float
    ) -> None:
        """Replace the bodies with a central mass and ``n`` orbiting ones.

        One big body is added per fifty requested, followed by ``n - 1``
        small coloured bodies.
        """
        center = Vec2(self.width / 2, self.height / 2)
        self._bodies = [
            Body(center, Vec2(0.0, 0.0), CENTRAL_MASS, CENTRAL_RADIUS, WHITE)
        ]

        big_count = max(0, int(n / BIG_BODY_RATIO))
        self._bodies.extend(
            self._orbiting_body(
                BIG_MIN_DISTANCE,
                (BIG_MIN_MASS, max_mass_big),
                BIG_RADIUS_RANGE,
                lambda: WHITE,
            )
            for _ in range(big_count)
        )
        self._bodies.extend(
            self._orbiting_body(
                SMALL_MIN_DISTANCE,
                (SMALL_MIN_MASS, max_mass_small),
                SMALL_RADIUS_RANGE,
                self._random_color,
            )
            for _ in range(max(0, n - 1))
        )

    def update(self) -> None:
        """Compute all pairwise forces and advance every body by one step."""
        bodies = self._bodies
        for body in bodies:
            body.reset_acceleration()

        soft2 = self.softening * self.softening
        g = self.gravitational_constant
        forces_x = [0.0] * len(bodies)
        forces_y = [0.0] * len(bodies)

        for (i, bi), (j, bj) in combinations(enumerate(bodies), 2):
            dx = bj.position.x - bi.position.x
            dy = bj.position.y - bi.position.y
            dist2 = dx * dx + dy * dy + soft2
            magnitude = g * bi.mass * bj.mass / dist2
            scale = magnitude / math.sqrt(dist2)
            fx, fy = dx * scale, dy * scale
            forces_x[i] += fx
            forces_y[i] += fy
            forces_x[j] -= fx
            forces_y[j] -= fy

        for body, fx, fy in zip(bodies, forces_x, forces_y):
            body.apply_force(Vec2(fx, fy))
            body.update(self.time_step)