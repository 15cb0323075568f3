"""
Land Material
Render settings handed to the rendering collaborator together with the mesh.
"""
from __future__ import annotations

from dataclasses import dataclass

from landmesh.config import LAND_VERTEX_SHADER_PATH


@dataclass
class LandMaterial:
    """
    Uniforms of the land shader.

    The mesh generator never reads these values; they are forwarded untouched.
    """
    time: float = 0.0

    @staticmethod
    def vertex_shader() -> str:
        """Path of the vertex shader the land is drawn with."""
        return LAND_VERTEX_SHADER_PATH
