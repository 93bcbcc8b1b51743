"""Mesh container and loading utilities for volume estimation."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import trimesh

AXES = {"x": 0, "y": 1, "z": 2}


def axis_index(up_axis: str) -> int:
    try:
        return AXES[up_axis]
    except KeyError:
        raise ValueError(f"Unknown up axis {up_axis!r}: expected one of 'x', 'y', 'z'") from None


def plane_axes(up_axis: str) -> tuple[int, int]:
    """Return the two in-plane coordinate indices for ``up_axis``."""

    up = axis_index(up_axis)
    first, second = (i for i in range(3) if i != up)
    return first, second


@dataclass(frozen=True)
class Mesh:
    """Flat vertex positions and triangle indices, treated as read-only.

    ``positions`` holds ``x0, y0, z0, x1, ...`` and ``indices`` holds triangle
    vertex triples. Either may be ``None`` when the geometry is absent.
    """

    positions: Optional[np.ndarray]
    indices: Optional[np.ndarray]
    bounds: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.positions is not None:
            object.__setattr__(self, "positions", np.asarray(self.positions, dtype=float).ravel())
        if self.indices is not None:
            object.__setattr__(self, "indices", np.asarray(self.indices, dtype=np.int64).ravel())
        if self.bounds is not None:
            object.__setattr__(self, "bounds", np.asarray(self.bounds, dtype=float).reshape(2, 3))

    @classmethod
    def from_trimesh(cls, mesh: trimesh.Trimesh) -> "Mesh":
        return cls(
            positions=np.asarray(mesh.vertices, dtype=float).ravel(),
            indices=np.asarray(mesh.faces, dtype=np.int64).ravel(),
            bounds=None if mesh.bounds is None else np.asarray(mesh.bounds, dtype=float),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.positions is None
            or self.indices is None
            or self.positions.size < 3
            or self.indices.size < 3
        )

    @property
    def vertices(self) -> np.ndarray:
        if self.positions is None:
            return np.empty((0, 3), dtype=float)
        usable = self.positions.size - self.positions.size % 3
        return self.positions[:usable].reshape(-1, 3)

    @property
    def triangle_count(self) -> int:
        if self.indices is None:
            return 0
        return self.indices.size // 3

    @property
    def triangles(self) -> np.ndarray:
        """Return an ``(n, 3, 3)`` array of triangle corner positions."""

        if self.is_empty:
            return np.empty((0, 3, 3), dtype=float)
        faces = self.indices[: self.triangle_count * 3].reshape(-1, 3)
        return self.vertices[faces]

    def axis_aligned_bounds(self) -> np.ndarray:
        """Return ``[min_xyz, max_xyz]``, preferring precomputed bounds."""

        if self.bounds is not None:
            return self.bounds
        vertices = self.vertices
        if len(vertices) == 0:
            raise ValueError("Mesh contains no vertices")
        return np.array([vertices.min(axis=0), vertices.max(axis=0)])

    def elevation_range(self, up_axis: str = "y") -> tuple[float, float]:
        bounds = self.axis_aligned_bounds()
        axis = axis_index(up_axis)
        return float(bounds[0][axis]), float(bounds[1][axis])


def load_mesh(path: Path) -> Mesh:
    """Load a triangle mesh from any format trimesh understands."""

    loaded = trimesh.load_mesh(path)
    if isinstance(loaded, trimesh.Scene):
        loaded = trimesh.util.concatenate(loaded.dump())
    if not isinstance(loaded, trimesh.Trimesh):
        raise TypeError("Unsupported mesh type: expected a triangular mesh")
    return Mesh.from_trimesh(loaded)
