"""
Configuration & Path Management
===============================
This module serves as the central registry for asset paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the default land parameters and the shader asset
   location in one place instead of scattering them through the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an .exe.

Exports:
    DEFAULT_LAND_SIZE (float): Edge length parameter of the default land.
    DEFAULT_RESOLUTION (int): Subdivisions per axis of the default land.
    LAND_TRANSLATION (tuple): Offset applied when the land is placed in a scene.
    MAX_RESOLUTION (int): Largest resolution whose indices fit into uint32.
    ASSETS_PATH (str): Absolute path to the assets directory.
    LAND_VERTEX_SHADER_PATH (str): Absolute path to the land vertex shader.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Tuple

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py sits at the package root, next to the bundled assets
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


# Land defaults
DEFAULT_LAND_SIZE: float = 100.0
DEFAULT_RESOLUTION: int = 100
LAND_TRANSLATION: Tuple[float, float, float] = (0.0, 0.5, 0.0)

# (resolution + 1) ** 2 vertices must be addressable by a uint32 index
MAX_RESOLUTION: int = 2 ** 16 - 1

# Assets
ASSETS_PATH: str = get_resource_path("assets")
LAND_VERTEX_SHADER_PATH: str = os.path.join(ASSETS_PATH, "shaders", "land_vertex_shader.wgsl")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
