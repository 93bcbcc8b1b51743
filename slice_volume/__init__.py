"""Slice-based volume estimation for closed triangle meshes."""

from .cross_section import cross_section_area
from .intersections import find_intersections, plane_intersections
from .model import Mesh, load_mesh
from .parameters import EstimationParameters, load_parameters
from .polygon import assemble_polygon, polygon_area, remove_duplicate_points, sort_points_by_angle
from .volume import VolumeEstimator, VolumeReport, estimate_volume

__all__ = [
    "cross_section_area",
    "find_intersections",
    "plane_intersections",
    "Mesh",
    "load_mesh",
    "EstimationParameters",
    "load_parameters",
    "assemble_polygon",
    "polygon_area",
    "remove_duplicate_points",
    "sort_points_by_angle",
    "VolumeEstimator",
    "VolumeReport",
    "estimate_volume",
]
