"""Volume estimation by integrating cross-sections over elevation."""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Optional

import numpy as np

from .cross_section import cross_section_area
from .model import Mesh
from .parameters import DEFAULT_PARAMS, EstimationParameters

logger = logging.getLogger(__name__)


@dataclass
class VolumeReport:
    """Summary of one volume estimate."""

    target_elevation: float
    min_elevation: float
    max_elevation: float
    slice_count: int
    up_axis: str
    volume: float

    def as_dict(self) -> dict:
        return asdict(self)


def band_boundaries(min_elevation: float, max_elevation: float, slice_count: int) -> np.ndarray:
    """Return ``slice_count + 1`` evenly spaced elevations spanning the range.

    The first and last entries equal the range ends exactly.
    """

    return np.linspace(min_elevation, max_elevation, slice_count + 1)


def _integrate(mesh: Mesh, min_elevation: float, max_elevation: float, params: EstimationParameters) -> float:
    boundaries = band_boundaries(min_elevation, max_elevation, params.slice_count)
    areas = np.array(
        [
            cross_section_area(mesh, float(elevation), up_axis=params.up_axis, precision=params.precision)
            for elevation in boundaries
        ]
    )
    # Each interior boundary is shared by the bands below and above it.
    heights = np.diff(boundaries)
    total = 0.0
    for height, area_low, area_high in zip(heights, areas[:-1], areas[1:]):
        total += height * (area_low + area_high) / 2.0
    return float(total)


def _elevation_range(mesh: Mesh, target_elevation: float, params: EstimationParameters) -> Optional[tuple]:
    if mesh.is_empty or math.isnan(target_elevation):
        return None
    min_elevation, mesh_max = mesh.elevation_range(params.up_axis)
    if target_elevation < min_elevation:
        return None
    return min_elevation, min(target_elevation, mesh_max)


def estimate_volume(
    mesh: Mesh,
    target_elevation: float,
    slice_count: int = 100,
    *,
    up_axis: str = "y",
    precision: int = 6,
) -> float:
    """Estimate the volume enclosed by ``mesh`` from its base up to ``target_elevation``.

    The range between the mesh's lowest elevation and the target (clamped to
    the mesh's top) is split into ``slice_count`` equal bands and the
    cross-sectional area is integrated with the trapezoidal rule.

    Returns ``0`` for meshes without positions or indices and for targets
    below the mesh.

    For a fixed ``slice_count`` the estimate is only guaranteed to grow with
    ``target_elevation`` while cross-sections do not shrink. On tapering
    meshes a coarse slicing can give a smaller result for a higher target,
    because the bands widen while the top section narrows; raise
    ``slice_count`` until the estimate settles.
    """

    params = EstimationParameters(slice_count=slice_count, up_axis=up_axis, precision=precision)
    return VolumeEstimator(params).estimate(mesh, target_elevation)


class VolumeEstimator:
    """Estimate enclosed volumes using a fixed set of parameters."""

    def __init__(self, params: EstimationParameters = DEFAULT_PARAMS) -> None:
        self.params = params

    def estimate(self, mesh: Mesh, target_elevation: float) -> float:
        return self.report(mesh, target_elevation).volume

    def report(self, mesh: Mesh, target_elevation: float) -> VolumeReport:
        target_elevation = float(target_elevation)
        elevation_range = _elevation_range(mesh, target_elevation, self.params)
        if elevation_range is None:
            logger.debug("Nothing to integrate below %s=%g", self.params.up_axis, target_elevation)
            return VolumeReport(
                target_elevation=target_elevation,
                min_elevation=target_elevation,
                max_elevation=target_elevation,
                slice_count=self.params.slice_count,
                up_axis=self.params.up_axis,
                volume=0.0,
            )

        min_elevation, max_elevation = elevation_range
        logger.debug(
            "Integrating %d slices over %s in [%g, %g]",
            self.params.slice_count,
            self.params.up_axis,
            min_elevation,
            max_elevation,
        )
        volume = _integrate(mesh, min_elevation, max_elevation, self.params)
        return VolumeReport(
            target_elevation=target_elevation,
            min_elevation=min_elevation,
            max_elevation=max_elevation,
            slice_count=self.params.slice_count,
            up_axis=self.params.up_axis,
            volume=volume,
        )
