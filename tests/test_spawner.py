import random

import pytest

from game.asteroids.scheduler import ManualScheduler
from game.asteroids.spawner import AsteroidSpawner


class FixedRandom:
    """Feeds a fixed sequence to rng.random()"""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def make_spawner(values, width=800, height=600):
    rocks = []
    spawner = AsteroidSpawner(width, height, rocks.append, rng=FixedRandom(values))
    return spawner, rocks


def test_left_edge():
    spawner, rocks = make_spawner([0.1, 0.5, 0.25])
    a = spawner.spawn()
    assert rocks == [a]
    assert a.radius == pytest.approx(35)
    assert (a.position.x, a.position.y) == pytest.approx((-35, 150))
    assert (a.velocity.x, a.velocity.y) == (1, 0)


def test_bottom_edge():
    spawner, _ = make_spawner([0.3, 0.0, 0.5])
    a = spawner.spawn()
    assert a.radius == pytest.approx(10)
    assert (a.position.x, a.position.y) == pytest.approx((400, 610))
    assert (a.velocity.x, a.velocity.y) == (0, -1)


def test_right_edge():
    spawner, _ = make_spawner([0.6, 0.2, 1 / 3])
    a = spawner.spawn()
    assert (a.position.x, a.position.y) == pytest.approx((820, 200))
    assert (a.velocity.x, a.velocity.y) == (-1, 0)


def test_top_edge():
    spawner, _ = make_spawner([0.99, 0.999, 0.75])
    a = spawner.spawn()
    assert a.radius < 60
    assert (a.position.x, a.position.y) == pytest.approx((600, -a.radius))
    assert (a.velocity.x, a.velocity.y) == (0, 1)


def test_spawns_start_outside_and_move_inward():
    width, height = 800, 600
    rocks = []
    spawner = AsteroidSpawner(width, height, rocks.append, rng=random.Random(7))
    for _ in range(200):
        spawner.spawn()

    assert spawner.spawned == 200
    eps = 1e-9
    for a in rocks:
        x, y, r = a.position.x, a.position.y, a.radius
        vx, vy = a.velocity.x, a.velocity.y
        assert 10 <= r < 60
        assert abs(vx) + abs(vy) == 1
        if vx > 0:
            assert x + r <= eps
        elif vx < 0:
            assert x - r >= width - eps
        elif vy > 0:
            assert y + r <= eps
        else:
            assert vy < 0
            assert y - r >= height - eps


def test_ticks_every_interval_until_stopped():
    rocks = []
    scheduler = ManualScheduler()
    spawner = AsteroidSpawner(800, 600, rocks.append, rng=random.Random(1))
    spawner.start(scheduler)

    scheduler.advance(2.9)
    assert rocks == []
    scheduler.advance(0.1)
    assert len(rocks) == 1
    scheduler.advance(6.0)
    assert len(rocks) == 3

    spawner.stop(scheduler)
    scheduler.advance(30.0)
    assert len(rocks) == 3


def test_invalid_radius_range():
    with pytest.raises(ValueError):
        AsteroidSpawner(800, 600, [].append, min_radius=20, max_radius=10)
