"""
Land Pipeline
=============
Runs the full generation chain: GridSpec -> GridMeshBuilder -> VertexColorizer.
"""
from __future__ import annotations

import logging
from typing import Optional

from landmesh.config import DEFAULT_LAND_SIZE, DEFAULT_RESOLUTION
from landmesh.model.colors import VertexColorizer
from landmesh.model.grid import GridMeshBuilder, GridSpec, MeshBuffers

logger = logging.getLogger(__name__)


def default_land_spec() -> GridSpec:
    return GridSpec(size=DEFAULT_LAND_SIZE, resolution=DEFAULT_RESOLUTION)


def build_land(spec: Optional[GridSpec] = None, colorize: bool = True) -> MeshBuffers:
    """
    Build the land mesh and attach the vertex color attribute.

    Args:
        spec: Grid parameters. Defaults to the standard land (size 100, resolution 100).
        colorize: If False, the returned buffers carry no colors.

    Raises:
        InvalidGridSpec: If the spec is rejected by the builder.
    """
    if spec is None:
        spec = default_land_spec()
    mesh = GridMeshBuilder().build(spec)

    if colorize:
        mesh = mesh.with_colors(VertexColorizer().colorize(mesh.positions))

    logger.info(
        f"Land generated: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles"
        f"{', colored' if mesh.colors is not None else ''}."
    )
    return mesh
