import os
import tempfile
import unittest

import h5py
import numpy as np
import numpy.testing as npt
import pyvista as pv

from landmesh.model.grid import GridSpec
from landmesh.model.io import APP_VERSION, IOManager
from landmesh.model.land import build_land


class TestIOManager(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_save_and_load_keeps_buffers(self) -> None:
        spec = GridSpec(size=12.0, resolution=4)
        mesh = build_land(spec)
        path = os.path.join(self.tmp_dir, "land.h5")

        IOManager.save_mesh(mesh, spec, path)
        loaded_spec, loaded = IOManager.load_mesh(path)

        self.assertEqual(loaded_spec, spec)
        npt.assert_array_equal(loaded.positions, mesh.positions)
        npt.assert_array_equal(loaded.normals, mesh.normals)
        npt.assert_array_equal(loaded.uvs, mesh.uvs)
        npt.assert_array_equal(loaded.indices, mesh.indices)
        npt.assert_array_equal(loaded.colors, mesh.colors)
        self.assertEqual(loaded.indices.dtype, np.uint32)

    def test_file_layout(self) -> None:
        spec = GridSpec(size=2.0, resolution=1)
        path = os.path.join(self.tmp_dir, "land.h5")
        IOManager.save_mesh(build_land(spec, colorize=False), spec, path)

        with h5py.File(path, "r") as f:
            self.assertEqual(f.attrs["version"], APP_VERSION)
            self.assertEqual(int(f.attrs["resolution"]), 1)
            self.assertEqual(set(f.keys()), {"positions", "normals", "uvs", "indices"})

        _, loaded = IOManager.load_mesh(path)
        self.assertIsNone(loaded.colors)

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            IOManager.load_mesh(os.path.join(self.tmp_dir, "missing.h5"))

    def test_load_rejects_foreign_file(self) -> None:
        path = os.path.join(self.tmp_dir, "other.h5")
        with h5py.File(path, "w") as f:
            f.create_dataset("temperature", data=np.zeros(3))

        with self.assertLogs("landmesh.model.io", level="ERROR"):
            with self.assertRaises(ValueError):
                IOManager.load_mesh(path)

    def _write_raw(self, name: str = "raw", size: float = 2.0, resolution: int = 1,
                   **overrides: np.ndarray) -> str:
        """Write a land file by hand, replacing any dataset given in overrides."""
        mesh = build_land(GridSpec(size=2.0, resolution=1))
        datasets = {
            "positions": mesh.positions,
            "normals": mesh.normals,
            "uvs": mesh.uvs,
            "indices": mesh.indices,
            "colors": mesh.colors,
        }
        datasets.update(overrides)

        path = os.path.join(self.tmp_dir, f"{name}.h5")
        with h5py.File(path, "w") as f:
            f.attrs["size"] = size
            f.attrs["resolution"] = resolution
            for key, data in datasets.items():
                f.create_dataset(key, data=data)
        return path

    def test_load_rejects_corrupt_files(self) -> None:
        cases = {
            "negative size": self._write_raw("size", size=-3.0),
            "misaligned colors": self._write_raw("colors", colors=np.ones((2, 4), dtype=np.float32)),
            "index out of range": self._write_raw("range", indices=np.array([0, 9, 1, 0, 2, 3], dtype=np.uint32)),
            "partial triangle": self._write_raw("partial", indices=np.array([0, 3, 1, 0], dtype=np.uint32)),
            "negative index": self._write_raw("negative", indices=np.array([0, -1, 1], dtype=np.int64)),
            "misaligned uvs": self._write_raw("uvs", uvs=np.zeros((3, 2), dtype=np.float32)),
        }
        for label, path in cases.items():
            with self.subTest(label):
                with self.assertLogs("landmesh.model.io", level="ERROR"):
                    with self.assertRaises(ValueError):
                        IOManager.load_mesh(path)

    def test_load_accepts_hand_written_file(self) -> None:
        spec, mesh = IOManager.load_mesh(self._write_raw())
        self.assertEqual(spec, GridSpec(size=2.0, resolution=1))
        self.assertEqual(mesh.triangle_count, 2)
        self.assertEqual(mesh.colors.shape, (4, 4))

    def test_export_polydata(self) -> None:
        mesh = build_land(GridSpec(size=2.0, resolution=2))
        path = os.path.join(self.tmp_dir, "land.vtp")

        IOManager.export_polydata(mesh, path)
        exported = pv.read(path)

        self.assertEqual(exported.n_points, 9)
        self.assertEqual(exported.n_cells, 8)
        # Export keeps the raw, untranslated positions
        npt.assert_allclose(exported.points[:, 1], 0.0)
        self.assertIn("Colors", exported.point_data)


if __name__ == "__main__":
    unittest.main()
