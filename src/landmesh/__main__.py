"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from landmesh.config import DEFAULT_LAND_SIZE, DEFAULT_RESOLUTION
from landmesh.logging_config import level_from_verbosity, setup_logging
from landmesh.model.grid import GridSpec, InvalidGridSpec
from landmesh.model.land import build_land

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landmesh",
        description="Generate a flat, vertex colored land grid mesh.",
    )
    parser.add_argument("--size", type=float, default=DEFAULT_LAND_SIZE, help="Land size parameter")
    parser.add_argument("--resolution", type=int, default=DEFAULT_RESOLUTION, help="Subdivisions per axis")
    parser.add_argument("--no-colors", action="store_true", help="Skip the vertex color attribute")
    parser.add_argument("--output", metavar="FILE.h5", help="Save the mesh buffers to an HDF5 file")
    parser.add_argument("--export", metavar="FILE", help="Export through PyVista (.vtp, .vtk, .ply, .stl)")
    parser.add_argument("--show", action="store_true", help="Open an interactive preview window")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=level_from_verbosity(args.verbose), log_file=args.log_file)

    spec = GridSpec(size=args.size, resolution=args.resolution)
    try:
        mesh = build_land(spec, colorize=not args.no_colors)
    except InvalidGridSpec as e:
        parser.error(str(e))

    print(
        f"land: size={spec.size:g} resolution={spec.resolution} "
        f"vertices={mesh.vertex_count} triangles={mesh.triangle_count} "
        f"colors={'yes' if mesh.colors is not None else 'no'}"
    )

    if args.output:
        from landmesh.model.io import IOManager
        IOManager.save_mesh(mesh, spec, args.output)

    if args.export:
        from landmesh.model.io import IOManager
        IOManager.export_polydata(mesh, args.export)

    if args.show:
        from landmesh.model.material import LandMaterial
        from landmesh.view.preview import show_land
        from landmesh.view.vtk_utils import VtkUtils

        pd = VtkUtils.material_field_data(VtkUtils.mesh_to_polydata(mesh), LandMaterial())
        show_land(pd)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
