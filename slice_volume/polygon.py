"""Assembly of cross-section polygons from unordered plane intersections.

The ring is reconstructed by sorting points on their angle around the
centroid. This is only a valid simple polygon when the cross-section is
star-shaped with respect to its centroid, which holds for convex sections and
for most simple closed meshes. Concave or multiply-connected sections may be
misordered and their areas are then approximate.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

import numpy as np

from .model import plane_axes

DEFAULT_PRECISION = 6


def remove_duplicate_points(
    points: Iterable[np.ndarray],
    *,
    up_axis: str = "y",
    precision: int = DEFAULT_PRECISION,
) -> List[np.ndarray]:
    """Collapse points whose in-plane coordinates agree to ``precision`` decimals.

    Points are keyed on their in-plane coordinates quantised to an integer
    grid of spacing ``10 ** -precision``. The last point inserted for a key
    wins; keys keep the order in which they were first seen.
    """

    first, second = plane_axes(up_axis)
    scale = 10.0 ** precision
    unique: Dict[Tuple[int, int], np.ndarray] = {}
    for point in points:
        key = (int(round(point[first] * scale)), int(round(point[second] * scale)))
        unique[key] = point
    return list(unique.values())


def sort_points_by_angle(points: List[np.ndarray], *, up_axis: str = "y") -> List[np.ndarray]:
    """Order points by ascending angle around their centroid."""

    if not points:
        return []
    first, second = plane_axes(up_axis)
    coords = np.asarray(points, dtype=float)
    center = coords.mean(axis=0)
    angles = np.arctan2(coords[:, second] - center[second], coords[:, first] - center[first])
    order = np.argsort(angles, kind="stable")
    return [points[i] for i in order]


def polygon_area(points: List[np.ndarray], *, up_axis: str = "y") -> float:
    """Shoelace area of an ordered ring; 0 for fewer than three points."""

    if len(points) < 3:
        return 0.0
    first, second = plane_axes(up_axis)
    coords = np.asarray(points, dtype=float)
    u = coords[:, first]
    v = coords[:, second]
    twice_area = np.sum(u * np.roll(v, -1) - np.roll(u, -1) * v)
    return float(abs(twice_area) / 2.0)


def assemble_polygon(
    points: Iterable[np.ndarray],
    *,
    up_axis: str = "y",
    precision: int = DEFAULT_PRECISION,
) -> List[np.ndarray]:
    """Deduplicate and angularly order raw intersection points into a ring."""

    unique = remove_duplicate_points(points, up_axis=up_axis, precision=precision)
    return sort_points_by_angle(unique, up_axis=up_axis)
