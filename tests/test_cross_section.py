from __future__ import annotations

import math

import numpy as np
import pytest
import trimesh

from slice_volume.cross_section import cross_section_area, section_points
from slice_volume.model import Mesh


@pytest.fixture
def cube() -> Mesh:
    return Mesh.from_trimesh(trimesh.creation.box(extents=(2.0, 2.0, 2.0)))


def test_square_section_of_cube(cube):
    assert cross_section_area(cube, 0.0, up_axis="z") == pytest.approx(4.0)
    assert cross_section_area(cube, 0.25, up_axis="y") == pytest.approx(4.0)


def test_section_through_flat_face_is_finite(cube):
    area = cross_section_area(cube, 1.0, up_axis="z")
    assert math.isfinite(area)
    assert area == pytest.approx(4.0)
    assert all(np.all(np.isfinite(p)) for p in section_points(cube, 1.0, up_axis="z"))


def test_plane_missing_mesh_has_zero_area(cube):
    assert cross_section_area(cube, 3.0, up_axis="z") == 0.0
    assert cross_section_area(cube, -1.5, up_axis="z") == 0.0


def test_plane_touching_single_vertex_has_zero_area():
    positions = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
    indices = [0, 2, 1, 0, 1, 3, 0, 3, 2, 1, 2, 3]
    tetrahedron = Mesh(positions, indices)
    assert cross_section_area(tetrahedron, 1.0, up_axis="z") == 0.0
    assert cross_section_area(tetrahedron, 0.5, up_axis="z") == pytest.approx(0.125)


def test_circular_section_of_cylinder():
    cylinder = Mesh.from_trimesh(trimesh.creation.cylinder(radius=1.0, height=2.0, sections=64))
    assert cross_section_area(cylinder, 0.3, up_axis="z") == pytest.approx(math.pi, rel=1e-2)


def test_missing_geometry_has_zero_area():
    assert cross_section_area(Mesh(None, [0, 1, 2]), 0.0) == 0.0
    assert cross_section_area(Mesh([0.0, 0.0, 0.0], None), 0.0) == 0.0
    assert cross_section_area(Mesh([0.0] * 9, []), 0.0) == 0.0
