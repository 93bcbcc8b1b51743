"""Cross-sectional area of a mesh at a single elevation."""
from __future__ import annotations

import logging
from typing import List

import numpy as np

from .intersections import plane_intersections
from .model import Mesh
from .polygon import DEFAULT_PRECISION, assemble_polygon, polygon_area

logger = logging.getLogger(__name__)


def section_points(mesh: Mesh, elevation: float, *, up_axis: str = "y") -> List[np.ndarray]:
    """Collect the raw, unordered plane intersections of every triangle."""

    return list(plane_intersections(mesh.triangles, elevation, up_axis=up_axis))


def cross_section_area(
    mesh: Mesh,
    elevation: float,
    *,
    up_axis: str = "y",
    precision: int = DEFAULT_PRECISION,
) -> float:
    """Return the area enclosed by the mesh surface at ``elevation``.

    Meshes without geometry, and planes that miss the mesh or only touch a
    vertex or an edge, give an area of ``0``.
    """

    if mesh.is_empty:
        return 0.0

    ring = assemble_polygon(
        section_points(mesh, elevation, up_axis=up_axis),
        up_axis=up_axis,
        precision=precision,
    )
    if len(ring) < 3:
        logger.debug("Degenerate cross-section at %s=%g (%d points)", up_axis, elevation, len(ring))
        return 0.0
    return polygon_area(ring, up_axis=up_axis)
