"""
Grid Mesh Generation
====================
Builds the flat, tessellated square grid used as the land surface.

Why is this file needed?
------------------------
1. Geometry: It turns a (size, resolution) pair into vertex positions, normals
   and texture coordinates laid out row by row.
2. Topology: It produces the triangle index list with the winding order the
   renderer expects (two triangles per grid cell).
3. Decoupling: The result is a set of plain NumPy arrays. Converting them into
   a renderer specific mesh type is left to the view layer.

Classes:
    GridSpec: Immutable input parameters.
    MeshBuffers: Container for the generated arrays.
    GridMeshBuilder: The generator itself.
"""
from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import numpy as np

from landmesh.config import MAX_RESOLUTION

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

UP_NORMAL = (0.0, 1.0, 0.0)


class InvalidGridSpec(ValueError):
    """Raised when a GridSpec cannot produce a valid mesh."""


@dataclass(frozen=True)
class GridSpec:
    """
    Parameters of a square grid.

    Attributes:
        size: Edge length parameter of the land, must be positive.
        resolution: Number of subdivisions per axis (vertices per axis = resolution + 1).
    """
    size: float
    resolution: int

    @property
    def vertices_per_axis(self) -> int:
        return self.resolution + 1

    @property
    def vertex_count(self) -> int:
        return self.vertices_per_axis ** 2

    @property
    def triangle_count(self) -> int:
        return 2 * self.resolution ** 2

    def validate(self) -> None:
        """
        Check the preconditions of the builder.

        Raises:
            InvalidGridSpec: If the size is not a positive finite number, or the
                resolution is not an integer in the range [0, MAX_RESOLUTION].
        """
        if isinstance(self.size, bool) or not isinstance(self.size, (int, float, np.integer, np.floating)):
            raise InvalidGridSpec(f"Grid size must be a number, got {type(self.size).__name__}.")
        if not math.isfinite(self.size) or self.size <= 0.0:
            raise InvalidGridSpec(f"Grid size must be a positive finite number, got {self.size}.")

        if isinstance(self.resolution, bool) or not isinstance(self.resolution, (int, np.integer)):
            raise InvalidGridSpec(f"Grid resolution must be an integer, got {type(self.resolution).__name__}.")
        if self.resolution < 0:
            raise InvalidGridSpec(f"Grid resolution must not be negative, got {self.resolution}.")
        if self.resolution > MAX_RESOLUTION:
            raise InvalidGridSpec(
                f"Grid resolution {self.resolution} exceeds {MAX_RESOLUTION}; "
                f"vertex indices would not fit into uint32."
            )


@dataclass(eq=False)
class MeshBuffers:
    """
    The generated land mesh as plain arrays.

    All per-vertex arrays share the same row-major vertex order.
    """
    positions: npt.NDArray[np.float32]  # (N, 3)
    normals: npt.NDArray[np.float32]  # (N, 3)
    uvs: npt.NDArray[np.float32]  # (N, 2)
    indices: npt.NDArray[np.uint32]  # (3 * T,)
    colors: Optional[npt.NDArray[np.float32]] = None  # (N, 4)

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0] // 3)

    @property
    def triangles(self) -> npt.NDArray[np.uint32]:
        """Index list viewed as (T, 3) triples."""
        return self.indices.reshape(-1, 3)

    def with_colors(self, colors: npt.NDArray[np.float32]) -> MeshBuffers:
        """Return a copy of the buffers carrying the given color attribute."""
        colors = np.asarray(colors, dtype=np.float32)
        if colors.shape != (self.vertex_count, 4):
            raise ValueError(
                f"Expected colors of shape ({self.vertex_count}, 4), got {colors.shape}."
            )
        return dataclasses.replace(self, colors=colors)


class GridMeshBuilder:
    """
    Generates the vertex and index buffers of a flat square grid.

    The grid lies in the XZ plane at y = 0. Vertices are emitted row by row
    (row along Z varies slower than col along X). The centering offset is
    0.5 * extent, so the grid spans [-size/4, +size/4] on both axes.
    """

    @staticmethod
    def vertex_index(row: int, col: int, resolution: int) -> int:
        """Flatten grid coordinates into a linear vertex index."""
        return row * (resolution + 1) + col

    def build(self, spec: GridSpec) -> MeshBuffers:
        spec.validate()

        resolution = int(spec.resolution)
        extent = float(spec.size) / 2.0
        # A zero resolution degenerates to a single vertex; x / 0 is taken as 0
        step = extent / resolution if resolution else 0.0

        positions = self._positions(resolution, extent, step)
        normals = np.tile(np.asarray(UP_NORMAL, dtype=np.float32), (spec.vertex_count, 1))
        uvs = self._uvs(resolution)
        indices = self._indices(resolution)

        logger.debug(
            f"Built grid (size={spec.size}, resolution={resolution}): "
            f"{positions.shape[0]} vertices, {indices.shape[0] // 3} triangles."
        )

        return MeshBuffers(positions=positions, normals=normals, uvs=uvs, indices=indices)

    @staticmethod
    def _grid_coords(resolution: int) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.int64]]:
        """Row and column of every vertex in row-major order."""
        axis = np.arange(resolution + 1, dtype=np.int64)
        rows, cols = np.meshgrid(axis, axis, indexing="ij")
        return rows.ravel(), cols.ravel()

    def _positions(self, resolution: int, extent: float, step: float) -> npt.NDArray[np.float32]:
        rows, cols = self._grid_coords(resolution)
        offset = 0.5 * extent

        positions = np.zeros((rows.size, 3), dtype=np.float64)
        positions[:, 0] = cols * step - offset
        positions[:, 2] = rows * step - offset
        return positions.astype(np.float32)

    def _uvs(self, resolution: int) -> npt.NDArray[np.float32]:
        rows, cols = self._grid_coords(resolution)
        if resolution == 0:
            return np.zeros((1, 2), dtype=np.float32)
        return np.column_stack((cols / resolution, rows / resolution)).astype(np.float32)

    @staticmethod
    def _indices(resolution: int) -> npt.NDArray[np.uint32]:
        if resolution == 0:
            return np.empty(0, dtype=np.uint32)

        axis = np.arange(resolution, dtype=np.int64)
        rows, cols = np.meshgrid(axis, axis, indexing="ij")
        i = (rows * (resolution + 1) + cols).ravel()

        r = resolution
        triangles = np.column_stack((
            # Triangle A
            i, i + r + 2, i + 1,
            # Triangle B
            i, i + r + 1, i + r + 2,
        ))
        return triangles.ravel().astype(np.uint32)
