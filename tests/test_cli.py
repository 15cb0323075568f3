import contextlib
import io
import logging
import os
import tempfile
import unittest

from landmesh.__main__ import main
from landmesh.logging_config import level_from_verbosity, setup_logging
from landmesh.model.io import IOManager


class _ResetPackageLogger(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger("landmesh").handlers.clear()
        logging.getLogger("landmesh").setLevel(logging.NOTSET)


class TestCommandLine(_ResetPackageLogger):
    def run_cli(self, *argv: str) -> str:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(list(argv))
        self.assertEqual(code, 0)
        return out.getvalue()

    def test_prints_summary(self) -> None:
        output = self.run_cli("--size", "2", "--resolution", "3")
        self.assertIn("vertices=16 triangles=18 colors=yes", output)

    def test_no_colors(self) -> None:
        output = self.run_cli("--resolution", "1", "--no-colors")
        self.assertIn("colors=no", output)

    def test_writes_output_and_export(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            h5_path = os.path.join(tmp_dir, "land.h5")
            vtp_path = os.path.join(tmp_dir, "land.vtp")
            self.run_cli("--size", "4", "--resolution", "2", "--output", h5_path, "--export", vtp_path)

            spec, mesh = IOManager.load_mesh(h5_path)
            self.assertEqual(spec.resolution, 2)
            self.assertEqual(mesh.vertex_count, 9)
            self.assertTrue(os.path.exists(vtp_path))

    def test_invalid_spec_exits_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()) as err:
            with self.assertRaises(SystemExit) as ctx:
                main(["--size", "-1"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("positive", err.getvalue())


class TestLoggingConfig(_ResetPackageLogger):
    def test_level_from_verbosity(self) -> None:
        self.assertEqual(level_from_verbosity(0), logging.WARNING)
        self.assertEqual(level_from_verbosity(1), logging.INFO)
        self.assertEqual(level_from_verbosity(3), logging.DEBUG)

    def test_setup_is_idempotent(self) -> None:
        setup_logging(logging.INFO)
        logger = setup_logging(logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_path = os.path.join(tmp_dir, "landmesh.log")
            logger = setup_logging(logging.INFO, log_file=log_path)
            logging.getLogger("landmesh.tests").info("hello from test")
            for handler in logger.handlers:
                handler.flush()
                handler.close()
            logger.handlers.clear()

            with open(log_path, encoding="utf-8") as f:
                self.assertIn("landmesh.tests - INFO - hello from test", f.read())


if __name__ == "__main__":
    unittest.main()
