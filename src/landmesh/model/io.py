"""
Input/Output Manager (HDF5)
Handles saving and loading generated land meshes to .h5 files, and exporting
them to the mesh formats supported by PyVista.
"""
import logging
import os
from importlib.metadata import version, PackageNotFoundError
from typing import Tuple

import h5py
import numpy as np

from landmesh.model.grid import GridSpec, MeshBuffers

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("landmesh")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

REQUIRED_DATASETS = ("positions", "normals", "uvs", "indices")


class IOManager:

    @staticmethod
    def save_mesh(mesh: MeshBuffers, spec: GridSpec, filepath: str) -> None:
        logger.info(f"Saving land mesh to: {filepath}")
        try:
            with h5py.File(filepath, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["size"] = float(spec.size)
                f.attrs["resolution"] = int(spec.resolution)

                f.create_dataset("positions", data=mesh.positions, compression="gzip")
                f.create_dataset("normals", data=mesh.normals, compression="gzip")
                f.create_dataset("uvs", data=mesh.uvs, compression="gzip")
                f.create_dataset("indices", data=mesh.indices, compression="gzip")

                if mesh.colors is not None:
                    f.create_dataset("colors", data=mesh.colors, compression="gzip")
                else:
                    logger.debug("Mesh has no colors, skipping 'colors' dataset.")

            logger.info(f"Land mesh saved to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save land mesh: {e}")
            raise e

    @staticmethod
    def load_mesh(filepath: str) -> Tuple[GridSpec, MeshBuffers]:
        logger.info(f"Loading land mesh from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"File not found: {filepath}"
            logger.error(msg)
            raise FileNotFoundError(msg)

        try:
            with h5py.File(filepath, "r") as f:
                missing = [name for name in REQUIRED_DATASETS if name not in f]
                if missing or "size" not in f.attrs or "resolution" not in f.attrs:
                    raise ValueError(
                        f"'{filepath}' does not contain a land mesh "
                        f"(missing datasets: {', '.join(missing) or 'none'})."
                    )

                file_version = f.attrs.get("version", "unknown")
                if file_version != APP_VERSION:
                    logger.debug(f"File written by version {file_version}, running {APP_VERSION}.")

                spec = GridSpec(
                    size=float(f.attrs["size"]),
                    resolution=int(f.attrs["resolution"]),
                )
                spec.validate()

                positions = np.asarray(f["positions"][:], dtype=np.float32)
                normals = np.asarray(f["normals"][:], dtype=np.float32)
                uvs = np.asarray(f["uvs"][:], dtype=np.float32)
                raw_indices = np.asarray(f["indices"][:]).ravel()
                colors = np.asarray(f["colors"][:], dtype=np.float32) if "colors" in f else None

            IOManager._check_buffers(positions, normals, uvs, raw_indices)

            mesh = MeshBuffers(
                positions=positions,
                normals=normals,
                uvs=uvs,
                indices=raw_indices.astype(np.uint32),
            )
            if colors is not None:
                mesh = mesh.with_colors(colors)

            logger.info(f"Land mesh loaded from: {filepath}")
            return spec, mesh

        except Exception as e:
            logger.exception(f"Failed to load land mesh: {e}")
            raise e

    @staticmethod
    def _check_buffers(
        positions: np.ndarray,
        normals: np.ndarray,
        uvs: np.ndarray,
        indices: np.ndarray,
    ) -> None:
        """Reject buffers that do not describe one consistent triangle mesh."""
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"Expected positions of shape (N, 3), got {positions.shape}.")

        n = positions.shape[0]
        if normals.shape != (n, 3):
            raise ValueError(f"Expected normals of shape ({n}, 3), got {normals.shape}.")
        if uvs.shape != (n, 2):
            raise ValueError(f"Expected uvs of shape ({n}, 2), got {uvs.shape}.")

        if indices.size % 3 != 0:
            raise ValueError(f"Index count {indices.size} is not a multiple of 3.")
        if indices.size and not np.issubdtype(indices.dtype, np.integer):
            raise ValueError(f"Indices must be integers, got {indices.dtype}.")
        if indices.size and (indices.min() < 0 or indices.max() >= n):
            raise ValueError(f"Indices out of range for {n} vertices.")

    # ---- EXPORT HELPERS ----
    @staticmethod
    def export_polydata(mesh: MeshBuffers, filepath: str) -> None:
        """
        Writes the mesh through PyVista; the format follows the file extension
        (e.g. .vtp, .vtk, .ply, .stl). Positions are written untranslated.
        """
        from landmesh.view.vtk_utils import VtkUtils

        try:
            polydata = VtkUtils.mesh_to_polydata(mesh, translation=None)
            polydata.save(filepath)
            logger.info(f"Land mesh exported to: {filepath}")
        except Exception as e:
            logger.exception("Failed to export land mesh")
            raise e
