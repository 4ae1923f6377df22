"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon, box


def to_polygon(points: NDArray[np.float64]) -> Polygon | None:
    """Polygon from a boundary ring; self-intersections repaired with buffer(0)."""
    if len(points) < 3:
        return None
    poly = Polygon(points)
    if not poly.is_valid:
        poly = poly.buffer(0)
    if poly.is_empty:
        return None
    return poly


def covered_fraction(points: NDArray[np.float64], width: float, height: float) -> float:
    """Share of the (0, 0, width, height) rectangle inside the ring, in [0, 1]."""
    poly = to_polygon(points)
    if poly is None or width <= 0 or height <= 0:
        return 0.0
    frame = box(0.0, 0.0, width, height)
    return float(min(1.0, poly.intersection(frame).area / frame.area))
