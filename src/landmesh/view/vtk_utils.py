"""
VTK Utilities
Converts the generated land buffers into PyVista data structures.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt
import pyvista as pv

from landmesh.config import LAND_TRANSLATION
from landmesh.model.grid import MeshBuffers
from landmesh.model.material import LandMaterial

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def triangles_to_faces(triangles: npt.NDArray[np.uint32]) -> npt.NDArray[np.int_]:
        """
        Convert (T, 3) triangle triples into the VTK cell layout [3, a, b, c, 3, ...].
        """
        triangles = np.asarray(triangles, dtype=np.int_).reshape(-1, 3)
        sizes = np.full((triangles.shape[0], 1), 3, dtype=np.int_)
        return np.hstack([sizes, triangles]).ravel()

    @staticmethod
    def mesh_to_polydata(
        mesh: MeshBuffers,
        translation: Optional[Sequence[float]] = LAND_TRANSLATION,
    ) -> pv.PolyData:
        """
        Build a triangle PolyData from the land buffers.

        Args:
            mesh: Generated buffers. Colors are attached when present.
            translation: Offset added to every point, None keeps the raw positions.

        Returns:
            PolyData with point arrays 'Normals', 'UV' and optionally 'Colors'.
        """
        points = np.array(mesh.positions, dtype=np.float32, copy=True)
        if translation is not None:
            points += np.asarray(translation, dtype=np.float32)

        if mesh.triangle_count:
            pd = pv.PolyData(points, VtkUtils.triangles_to_faces(mesh.triangles))
        else:
            pd = pv.PolyData(points)

        pd.point_data["Normals"] = mesh.normals
        pd.point_data["UV"] = mesh.uvs
        pd.active_texture_coordinates = mesh.uvs

        if mesh.colors is not None:
            pd.point_data["Colors"] = mesh.colors

        logger.debug(f"Converted land mesh to PolyData ({pd.n_points} points, {pd.n_cells} cells).")
        return pd

    @staticmethod
    def material_field_data(pd: pv.PolyData, material: LandMaterial) -> pv.PolyData:
        """Attach the material uniforms as field data, untouched."""
        pd.field_data["time"] = np.array([material.time], dtype=np.float32)
        pd.field_data["vertex_shader"] = np.array([material.vertex_shader()])
        return pd
