"""
Utility functions for game mechanics
"""

from __future__ import annotations
import colorsys
import random
from typing import Optional, Tuple

import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def overlaps(a, b) -> bool:
    """Check if two axis-aligned rectangles intersect with positive area.

    Both arguments need x, y, width and height. Touching edges do not count.
    """
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def hsl_color(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """Convert HSL (hue in degrees, s/l in [0,1]) to an RGB byte tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
