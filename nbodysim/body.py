"""Point masses and the 2-D vectors that describe their motion."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class Body:
    """A massive circular body moving under accumulated forces."""

    position: Vec2
    velocity: Vec2
    mass: float
    radius: float
    color: Color = (255, 255, 255)
    acceleration: Vec2 = field(default_factory=Vec2)

    def apply_force(self, force: Vec2) -> None:
        """Add the acceleration a = F / m produced by ``force``."""
        self.acceleration = self.acceleration + force / self.mass

    def update(self, dt: float) -> None:
        """Advance velocity, then position, by one step of length ``dt``."""
        self.velocity = self.velocity + self.acceleration * dt
        self.position = self.position + self.velocity * dt

    def reset_acceleration(self) -> None:
        """Clear the accumulated acceleration before a new frame."""
        self.acceleration = Vec2(0.0, 0.0)