"""
Drawing surface backed by Arcade's immediate-mode draw calls

Game coordinates are top-left/y-down; Arcade is bottom-left/y-up, so every
point goes through the current affine transform and then a y flip.
"""

from __future__ import annotations
import math
from typing import List, Sequence, Tuple

import arcade
import numpy as np

Point = Tuple[float, float]


def _rgba(color, alpha: float):
    a = int(round(255 * min(1.0, max(0.0, alpha))))
    return (int(color[0]), int(color[1]), int(color[2]), a)


class ArcadeSurface:
    """Surface adapter for an open arcade.Window"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._matrix = np.identity(3)
        self._stack: List[np.ndarray] = []

    # ----------------------------
    # Transform stack
    # ----------------------------

    def save(self):
        self._stack.append(self._matrix.copy())

    def restore(self):
        if self._stack:
            self._matrix = self._stack.pop()

    def translate(self, dx: float, dy: float):
        t = np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])
        self._matrix = self._matrix @ t

    def rotate(self, angle: float):
        c, s = math.cos(angle), math.sin(angle)
        r = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        self._matrix = self._matrix @ r

    def to_screen(self, points: Sequence[Point]) -> List[Point]:
        pts = np.array([[x, y, 1.0] for x, y in points]).T
        out = self._matrix @ pts
        return [(float(x), float(self.height - y)) for x, y in zip(out[0], out[1])]

    # ----------------------------
    # Drawing
    # ----------------------------

    def clear(self, color, alpha: float = 1.0):
        arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, _rgba(color, alpha))

    def fill_rect(self, x: float, y: float, w: float, h: float, color, alpha: float = 1.0):
        if w <= 0 or h <= 0:
            return
        corners = self.to_screen([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])
        if np.allclose(self._matrix[:2, :2], np.identity(2)):
            left, top = corners[0]
            right, bottom = corners[2]
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, _rgba(color, alpha))
        else:
            arcade.draw_polygon_filled(corners, _rgba(color, alpha))

    def fill_polygon(self, points: Sequence[Point], color, alpha: float = 1.0):
        arcade.draw_polygon_filled(self.to_screen(points), _rgba(color, alpha))

    def fill_circle(self, x: float, y: float, radius: float, color, alpha: float = 1.0):
        sx, sy = self.to_screen([(x, y)])[0]
        arcade.draw_circle_filled(sx, sy, radius, _rgba(color, alpha))
