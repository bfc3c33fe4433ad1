"""
Game entity dataclasses
"""

import math
from dataclasses import dataclass, field
from typing import List

WHITE = (255, 255, 255)

# Ship outline in local space: tip, then the two rear corners
SHIP_SHAPE = ((30.0, 0.0), (-10.0, -10.0), (-10.0, 10.0))


@dataclass
class Vector2:
    """Position or velocity, mutated in place"""
    x: float = 0.0
    y: float = 0.0


@dataclass(eq=False)
class Player:
    """Player ship, a triangle pointing along its rotation"""
    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0  # radians, not normalized
    color: tuple = WHITE

    def draw(self, surface):
        x, y = self.position.x, self.position.y
        surface.save()
        surface.translate(x, y)
        surface.rotate(self.rotation)
        surface.translate(-x, -y)
        surface.stroke_polygon([(x + lx, y + ly) for lx, ly in SHIP_SHAPE], self.color)
        surface.restore()

    def update(self, surface):
        self.draw(surface)
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y

    def get_vertices(self) -> List[Vector2]:
        """Triangle corners in screen space, recomputed on every call"""
        cos = math.cos(self.rotation)
        sin = math.sin(self.rotation)
        return [
            Vector2(
                self.position.x + lx * cos - ly * sin,
                self.position.y + lx * sin + ly * cos,
            )
            for lx, ly in SHIP_SHAPE
        ]


@dataclass(eq=False)
class CircleEntity:
    """Body with a circular hitbox"""
    position: Vector2
    velocity: Vector2
    radius: float
    color: tuple = WHITE

    def draw(self, surface):
        raise NotImplementedError

    def update(self, surface):
        self.draw(surface)
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y

    def is_off_screen(self, width: float, height: float) -> bool:
        """True once the whole circle is past any screen edge"""
        return (
            self.position.x + self.radius < 0
            or self.position.x - self.radius > width
            or self.position.y + self.radius < 0
            or self.position.y - self.radius > height
        )


@dataclass(eq=False)
class Projectile(CircleEntity):
    """Bullet fired by the player"""
    radius: float = 5.0

    def draw(self, surface):
        surface.fill_circle(self.position.x, self.position.y, self.radius, self.color)


@dataclass(eq=False)
class Asteroid(CircleEntity):
    """Rock drifting in from a screen edge"""

    def draw(self, surface):
        surface.stroke_circle(self.position.x, self.position.y, self.radius, self.color)
