"""
Asteroid spawner: drops a rock just outside a random screen edge on a
fixed period, moving straight into the screen.
"""

from __future__ import annotations

import random
from typing import Callable

from .entities import Asteroid, Vector2

# Edge indices, in the order they are drawn from
LEFT, BOTTOM, RIGHT, TOP = range(4)


class AsteroidSpawner:
    """Hands a new Asteroid to `add` every `interval` seconds"""

    def __init__(
        self,
        width: float,
        height: float,
        add: Callable[[Asteroid], None],
        rng=random,
        interval: float = 3.0,
        min_radius: float = 10.0,
        max_radius: float = 60.0,
        speed: float = 1.0,
    ):
        if min_radius <= 0 or max_radius <= min_radius:
            raise ValueError(f"Invalid radius range: [{min_radius}, {max_radius})")
        self.width = width
        self.height = height
        self.add = add
        self.rng = rng
        self.interval = interval
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.speed = speed
        self.spawned = 0

    def spawn(self) -> Asteroid:
        edge = int(self.rng.random() * 4)
        radius = (self.max_radius - self.min_radius) * self.rng.random() + self.min_radius

        if edge == LEFT:
            x, y = -radius, self.rng.random() * self.height
            vx, vy = self.speed, 0.0
        elif edge == BOTTOM:
            x, y = self.rng.random() * self.width, self.height + radius
            vx, vy = 0.0, -self.speed
        elif edge == RIGHT:
            x, y = self.width + radius, self.rng.random() * self.height
            vx, vy = -self.speed, 0.0
        else:
            x, y = self.rng.random() * self.width, -radius
            vx, vy = 0.0, self.speed

        asteroid = Asteroid(position=Vector2(x, y), velocity=Vector2(vx, vy), radius=radius)
        self.add(asteroid)
        self.spawned += 1
        return asteroid

    def tick(self, delta_time: float):
        """Scheduler callback"""
        self.spawn()

    def start(self, scheduler):
        scheduler.schedule_interval(self.tick, self.interval)

    def stop(self, scheduler):
        scheduler.unschedule(self.tick)
