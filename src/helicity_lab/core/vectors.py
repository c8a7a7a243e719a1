"""Small 2D vector helpers used by the simulation and hit-testing."""
from __future__ import annotations

import math

import numpy as np

EPSILON = 1e-6


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def sign(value: float) -> int:
    """Return ``+1`` for non-negative values and ``-1`` otherwise."""

    return 1 if value >= 0.0 else -1


def length(v: np.ndarray) -> float:
    return math.hypot(float(v[0]), float(v[1]))


def normalize(v: np.ndarray) -> np.ndarray:
    """Unit vector along ``v``, or the zero vector for near-zero input."""

    magnitude = length(v)
    if magnitude <= EPSILON:
        return np.zeros(2, dtype=float)
    return np.array([v[0] / magnitude, v[1] / magnitude], dtype=float)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0] * b[0] + a[1] * b[1])


def perp(v: np.ndarray) -> np.ndarray:
    """Rotate ``v`` a quarter turn: ``(x, y) -> (-y, x)``."""

    return np.array([-v[1], v[0]], dtype=float)


def unit_from_angle(angle: float) -> np.ndarray:
    return np.array([math.cos(angle), math.sin(angle)], dtype=float)


def point_segment_distance(p: np.ndarray, a: np.ndarray, b: np.ndarray) -> float:
    """Distance from point ``p`` to the segment ``a``-``b``."""

    p = np.asarray(p, dtype=float)
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    ab = b - a
    ab2 = dot(ab, ab)
    if ab2 <= EPSILON:
        return length(p - a)
    t = clamp(dot(p - a, ab) / ab2, 0.0, 1.0)
    projection = a + ab * t
    return length(p - projection)


__all__ = [
    "EPSILON",
    "clamp",
    "dot",
    "length",
    "normalize",
    "perp",
    "point_segment_distance",
    "sign",
    "unit_from_angle",
]
