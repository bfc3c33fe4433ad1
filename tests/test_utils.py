import pytest

from game.asteroids.entities import Asteroid, Player, Vector2
from game.asteroids.utils import (
    circle_intersects_triangle,
    circles_intersect,
    clamp,
    point_in_segment_box,
)


def circle(x, y, r):
    return Asteroid(position=Vector2(x, y), velocity=Vector2(0, 0), radius=r)


def test_circles_overlapping():
    assert circles_intersect(circle(0, 0, 10), circle(15, 0, 10))


def test_circles_apart():
    assert not circles_intersect(circle(0, 0, 10), circle(25, 0, 10))


def test_circles_tangent_counts():
    # 3-4-5 triangle: distance is exactly 5
    assert circles_intersect(circle(0, 0, 2), circle(3, 4, 3))
    assert not circles_intersect(circle(0, 0, 2), circle(3, 4, 2.999))


@pytest.mark.parametrize("d, r1, r2", [(0.0, 1, 1), (7.5, 5, 2.5), (12.0, 4, 9), (30.0, 10, 10)])
def test_circles_match_distance_rule(d, r1, r2):
    assert circles_intersect(circle(100, 100, r1), circle(100 + d, 100, r2)) == (d <= r1 + r2)


def test_circles_symmetric():
    a, b = circle(0, 0, 3), circle(4, 4, 3)
    assert circles_intersect(a, b) == circles_intersect(b, a)


@pytest.mark.parametrize("rotation", [0.0, 0.7, -2.3, 10.0])
def test_circle_on_each_vertex_hits(rotation):
    player = Player(position=Vector2(400, 300), rotation=rotation)
    for v in player.get_vertices():
        assert circle_intersects_triangle(circle(v.x, v.y, 0.5), player.get_vertices())


def test_circle_far_away_misses():
    player = Player(position=Vector2(400, 300))
    # Triangle extent is 30 from the center
    assert not circle_intersects_triangle(circle(400 + 30 + 50 + 1, 300, 50), player.get_vertices())
    assert not circle_intersects_triangle(circle(0, 0, 20), player.get_vertices())


def test_circle_crossing_edge_hits():
    player = Player(position=Vector2(400, 300))
    # Rear edge runs vertically at x=390 from y=290 to y=310
    assert circle_intersects_triangle(circle(385, 300, 6), player.get_vertices())
    assert not circle_intersects_triangle(circle(385, 300, 4), player.get_vertices())


def test_projection_outside_segment_snaps_per_axis():
    # Horizontal edge from (0,0) to (10,0); center projects to x=-5
    triangle = [Vector2(0, 0), Vector2(10, 0), Vector2(5, 50)]
    assert circle_intersects_triangle(circle(-5, 0, 5), triangle)
    assert not circle_intersects_triangle(circle(-5, 0, 4.9), triangle)


# Edge (0,10) -> (10,0) slopes with dx > 0, dy < 0, so a projection past
# its end snaps to (10, 10): x from the end vertex, y from the start one.
SLOPED = [Vector2(0, 10), Vector2(10, 0), Vector2(-100, -100)]


def test_mixed_corner_snap_misses_near_vertex():
    # Vertex (10,0) is ~4.5 away, but the snapped point (10,10) is ~12.6 away
    assert not circle_intersects_triangle(circle(14, -2, 5), SLOPED)


def test_mixed_corner_snap_hits_away_from_triangle():
    # Nearest vertex (10,0) is ~14.9 away, snapped point (10,10) is 11 away
    assert circle_intersects_triangle(circle(21, 10, 12), SLOPED)
    assert not circle_intersects_triangle(circle(21, 10, 10.9), SLOPED)


def test_point_in_segment_box():
    start, end = Vector2(0, 10), Vector2(10, 0)
    assert point_in_segment_box(5, 5, start, end)
    assert point_in_segment_box(0, 10, start, end)
    assert not point_in_segment_box(11, 5, start, end)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
