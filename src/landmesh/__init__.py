"""
Procedural land mesh generator.

Builds a flat triangulated grid (positions, normals, UVs, indices) and a
per-vertex color attribute derived from the vertex positions.
"""
from landmesh.model.colors import VertexColorizer
from landmesh.model.grid import GridMeshBuilder, GridSpec, InvalidGridSpec, MeshBuffers
from landmesh.model.land import build_land
from landmesh.model.material import LandMaterial

__all__ = [
    "GridMeshBuilder",
    "GridSpec",
    "InvalidGridSpec",
    "LandMaterial",
    "MeshBuffers",
    "VertexColorizer",
    "build_land",
]
