"""
Interactive Land Preview
Opens a PyVista window with the colored land.
"""
from __future__ import annotations

import logging

import numpy as np
import pyvista as pv

logger = logging.getLogger(__name__)

CAMERA_POSITION = [(-2.0, 5.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
LIGHT_POSITION = (4.0, 8.0, 4.0)


def show_land(pd: pv.PolyData, show_edges: bool = False) -> None:
    plotter = pv.Plotter()
    plotter.add_light(pv.Light(position=LIGHT_POSITION, light_type="scene light"))

    if "Colors" in pd.point_data:
        # Out of range colors are passed through by the generator, the display clamps them
        colors = np.clip(pd.point_data["Colors"], 0.0, 1.0)
        plotter.add_mesh(pd, scalars=colors, rgb=True, show_edges=show_edges)
    else:
        logger.warning("Land has no colors, drawing it plain.")
        plotter.add_mesh(pd, color="lightgray", show_edges=show_edges)

    plotter.camera_position = CAMERA_POSITION
    plotter.reset_camera()
    plotter.show()
