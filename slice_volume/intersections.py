"""Triangle/plane intersection for horizontal cutting planes."""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .model import axis_index


def plane_intersections(triangles: np.ndarray, elevation: float, *, up_axis: str = "y") -> np.ndarray:
    """Return the edge crossings of every triangle with the plane at ``elevation``.

    ``triangles`` is an ``(n, 3, 3)`` array of corner positions. Edges are
    visited as ``v1-v2, v2-v3, v3-v1`` per triangle, triangle by triangle, and
    the result is an ``(m, 3)`` array in that order.

    An edge crosses when one endpoint is at or above the plane and the other
    at or below it, so a vertex lying on the plane is reported once for each
    of its two edges. Edges lying flat in the plane are skipped; their
    endpoints are picked up by the neighbouring edges. The produced points
    carry the plane elevation exactly.
    """

    up = axis_index(up_axis)
    starts = np.asarray(triangles, dtype=float).reshape(-1, 3, 3)
    ends = np.roll(starts, -1, axis=1)

    low = starts[..., up]
    high = ends[..., up]
    rise = high - low
    crossing = (
        (np.minimum(low, high) <= elevation)
        & (elevation <= np.maximum(low, high))
        & (rise != 0.0)
    )

    start = starts[crossing]
    t = (elevation - low[crossing]) / rise[crossing]
    points = start + t[:, None] * (ends[crossing] - start)
    points[:, up] = elevation
    return points


def find_intersections(
    v1: Sequence[float],
    v2: Sequence[float],
    v3: Sequence[float],
    elevation: float,
    points: List[np.ndarray],
    *,
    up_axis: str = "y",
) -> List[np.ndarray]:
    """Append the 0 to 2 points where one triangle's edges cross ``elevation``.

    ``points`` is extended in place and also returned.
    """

    triangle = np.array([v1, v2, v3], dtype=float)
    points.extend(plane_intersections(triangle, elevation, up_axis=up_axis))
    return points
