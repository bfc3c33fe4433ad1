"""
Geometry and helper functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Optional, Sequence
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def vec_len(x: float, y: float) -> float:
    """Calculate vector length (magnitude)"""
    return math.hypot(x, y)


def circles_intersect(c1, c2) -> bool:
    """Check if two circles touch or overlap (tangent counts)"""
    dx = c2.position.x - c1.position.x
    dy = c2.position.y - c1.position.y
    return vec_len(dx, dy) <= c1.radius + c2.radius


def point_in_segment_box(x: float, y: float, start, end) -> bool:
    """Check if a point lies inside the bounding box of a segment"""
    return (
        min(start.x, end.x) <= x <= max(start.x, end.x)
        and min(start.y, end.y) <= y <= max(start.y, end.y)
    )


def circle_intersects_triangle(circle, triangle: Sequence) -> bool:
    """
    Check if a circle touches any edge of a triangle.

    Each edge projects the circle center onto the line through it. A
    projection falling outside the edge's bounding box is snapped per
    axis to the start or end vertex coordinate. This is an approximation
    of the nearest point on the segment and is kept as is: changing it
    moves collision outcomes near the triangle corners.

    Edges must have non-zero length.
    """
    cx = circle.position.x
    cy = circle.position.y

    for i in range(3):
        start = triangle[i]
        end = triangle[(i + 1) % 3]

        dx = end.x - start.x
        dy = end.y - start.y
        length_sq = dx * dx + dy * dy

        dot = ((cx - start.x) * dx + (cy - start.y) * dy) / length_sq
        closest_x = start.x + dot * dx
        closest_y = start.y + dot * dy

        if not point_in_segment_box(closest_x, closest_y, start, end):
            closest_x = start.x if closest_x < start.x else end.x
            closest_y = start.y if closest_y < start.y else end.y

        if vec_len(closest_x - cx, closest_y - cy) <= circle.radius:
            return True

    return False


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
