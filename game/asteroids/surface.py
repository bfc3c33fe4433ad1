"""
Drawing surfaces the entities render against.

Entities only need a handful of primitives (rectangles, circles, closed
polylines) plus a save / translate / rotate / restore scope for rotated
drawing. The transform is tracked here with a numpy affine matrix so
backends receive points already in screen space.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np

Color = Tuple[int, int, int]
Point = Tuple[float, float]


class TransformSurface:
    """Base surface holding a save/restore stack of 2D affine transforms"""

    def __init__(self):
        self._matrix = np.identity(3)
        self._stack: List[np.ndarray] = []

    # ----------------------------
    # Transform scope
    # ----------------------------

    def save(self):
        self._stack.append(self._matrix.copy())

    def restore(self):
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._matrix = self._stack.pop()

    def translate(self, dx: float, dy: float):
        m = np.identity(3)
        m[0, 2] = dx
        m[1, 2] = dy
        self._matrix = self._matrix @ m

    def rotate(self, angle: float):
        c, s = math.cos(angle), math.sin(angle)
        m = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        self._matrix = self._matrix @ m

    def transform_points(self, points: Sequence[Point]) -> List[Point]:
        """Map local points through the current transform"""
        if not points:
            return []
        pts = np.ones((3, len(points)))
        pts[:2, :] = np.asarray(points, dtype=float).T
        out = self._matrix @ pts
        return [(float(x), float(y)) for x, y in zip(out[0], out[1])]

    # ----------------------------
    # Primitives
    # ----------------------------

    def clear(self, color: Color):
        self._emit("clear", (), 0.0, color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color):
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        self._emit("fill_polygon", self.transform_points(corners), 0.0, color)

    def fill_circle(self, x: float, y: float, radius: float, color: Color):
        self._emit("fill_circle", self.transform_points([(x, y)]), radius, color)

    def stroke_circle(self, x: float, y: float, radius: float, color: Color):
        self._emit("stroke_circle", self.transform_points([(x, y)]), radius, color)

    def stroke_polygon(self, points: Sequence[Point], color: Color):
        self._emit("stroke_polygon", self.transform_points(points), 0.0, color)

    def _emit(self, kind: str, points: List[Point], radius: float, color: Color):
        raise NotImplementedError


class NullSurface(TransformSurface):
    """Headless surface: keeps the transform bookkeeping, draws nothing"""

    def _emit(self, kind, points, radius, color):
        pass


class RecordingSurface(TransformSurface):
    """Surface that keeps every primitive it receives, in screen space"""

    def __init__(self):
        super().__init__()
        self.commands: List[Tuple[str, List[Point], float, Color]] = []

    def _emit(self, kind, points, radius, color):
        if kind == "clear":
            self.commands = []
        self.commands.append((kind, points, radius, color))

    def kinds(self) -> List[str]:
        return [c[0] for c in self.commands]


class FrameBufferSurface(TransformSurface):
    """
    Holds the primitives of the frame being drawn, converted from game
    coordinates (origin top-left, y down) to a y-up backend. A clear
    starts a new frame.
    """

    def __init__(self, width: int, height: int):
        super().__init__()
        self.width = width
        self.height = height
        self.commands: List[Tuple[str, List[Point], float, Color]] = []

    def _emit(self, kind, points, radius, color):
        if kind == "clear":
            self.commands = [(kind, points, radius, color)]
            return
        flipped = [(x, self.height - y) for x, y in points]
        self.commands.append((kind, flipped, radius, color))
