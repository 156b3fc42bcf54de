"""Point-to-segment distance primitives."""
from typing import Sequence

import numpy as np

from shapesimplify.types import Point


def as_point_array(points: Sequence) -> np.ndarray:
    """
    Convert a point sequence to an (N, 2) float array.

    Accepts numpy arrays, sequences of (x, y) pairs and sequences of Point.

    Raises:
        ValueError: If the points cannot be read as 2D coordinates
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(float)
    else:
        arr = np.array(
            [p.to_tuple() if isinstance(p, Point) else tuple(p) for p in points],
            dtype=float
        )

    if arr.size == 0:
        return arr.reshape(0, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) point coordinates, got shape {arr.shape}")

    return arr


def dist_points_segment_sqr(
    a: np.ndarray,
    b: np.ndarray,
    points: np.ndarray
) -> np.ndarray:
    """
    Squared distances of points to the segment a-b.

    Points projecting inside the segment use the perpendicular distance,
    computed from the cross product so colinear points give exactly 0.
    Points projecting beyond an end use the distance to that end.

    Args:
        a: Segment start (x, y)
        b: Segment end (x, y)
        points: (N, 2) array of points

    Returns:
        (N,) array of squared distances
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    points = np.asarray(points, dtype=float).reshape(-1, 2)

    ap = points - a
    ap_sqr = np.einsum("ij,ij->i", ap, ap)

    ab = b - a
    len_sqr = float(np.dot(ab, ab))
    if len_sqr == 0.0:
        # Degenerate chord, e.g. a closed run wrapping onto its own start
        return ap_sqr

    bp = points - b
    dot = ap @ ab
    cross = ab[0] * ap[:, 1] - ab[1] * ap[:, 0]

    result = cross * cross / len_sqr
    result = np.where(dot <= 0.0, ap_sqr, result)
    result = np.where(dot >= len_sqr, np.einsum("ij,ij->i", bp, bp), result)
    return result


def dist_point_segment_sqr(a, b, p) -> float:
    """Squared distance of a single point p to the segment a-b."""
    return float(dist_points_segment_sqr(a, b, np.asarray([tuple(p)], dtype=float))[0])
