"""
Per-vertex coloring of the land mesh.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class VertexColorizer:
    """
    Derives an RGBA color from each vertex position.

    Every component maps as ``(1 - c) / 2`` and alpha is fixed at 1. Positions
    outside [-1, 1] give colors outside [0, 1]; they are not clamped.
    """

    ALPHA: float = 1.0

    def colorize(self, positions: npt.ArrayLike) -> npt.NDArray[np.float32]:
        """
        Args:
            positions: (N, 3) array of vertex positions.

        Returns:
            (N, 4) float32 array of colors in the same order as the input.

        Raises:
            ValueError: If the input is not of shape (N, 3).
        """
        arr = np.asarray(positions, dtype=np.float32)
        if arr.size == 0:
            arr = arr.reshape(0, 3)

        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(f"Expected shape (N, 3), got {arr.shape}.")

        colors = np.empty((arr.shape[0], 4), dtype=np.float32)
        colors[:, :3] = (1.0 - arr) / 2.0
        colors[:, 3] = self.ALPHA

        logger.debug(f"Colorized {arr.shape[0]} vertices.")
        return colors
