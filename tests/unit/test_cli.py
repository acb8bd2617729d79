"""
Unit tests for the command line interface.
"""

import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock, patch

from frontend_embed.cli import CliArgs, main


class CliTester(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = Path(tempfile.mkdtemp())
        self.ui_dir = self.temp_dir / "ui"
        self.ui_dir.mkdir()
        self.static_dir = self.temp_dir / "target" / "generated"
        self.out_dir = self.temp_dir / "target" / "resources"
        self.argv = [
            "--ui-dir",
            str(self.ui_dir),
            "--static-dir",
            str(self.static_dir),
            "--out-dir",
            str(self.out_dir),
            "--npm",
            "npm",
        ]

    def tearDown(self) -> None:
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _fake_npm(self, cmd: list[str], cwd: Path) -> int:
        if cmd[1] == "clean-install":
            (self.ui_dir / "node_modules").mkdir()
        else:
            dist = self.ui_dir / "client" / "dist"
            dist.mkdir(parents=True)
            (dist / "index.html").write_text("<html></html>")
        return 0

    def test_parse_args(self) -> None:
        cli_args = CliArgs.parse_args(self.argv + ["--force-build", "--verbose"])

        self.assertTrue(cli_args.force_build)
        self.assertFalse(cli_args.force_install)
        self.assertFalse(cli_args.skip_resources)
        self.assertTrue(cli_args.verbose)
        self.assertEqual(self.ui_dir, cli_args.config.ui_dir)
        self.assertEqual(self.ui_dir / "client" / "dist", cli_args.config.ui_dist_dir)
        self.assertEqual("npm", cli_args.config.npm_cmd)

    @patch("frontend_embed.npm.run_process")
    def test_main_success(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = self._fake_npm

        with redirect_stdout(io.StringIO()):
            rtn = main(self.argv)

        self.assertEqual(0, rtn)
        self.assertTrue((self.static_dir / "index.html").exists())
        self.assertTrue((self.out_dir / "generated.py").exists())
        self.assertTrue((self.out_dir / "files.json").exists())

    @patch("frontend_embed.npm.run_process")
    def test_main_failure_returns_one(self, mock_run: MagicMock) -> None:
        mock_run.return_value = 1

        with redirect_stdout(io.StringIO()) as out:
            rtn = main(self.argv)

        self.assertEqual(1, rtn)
        self.assertIn("Frontend build failed", out.getvalue())
        self.assertFalse(self.out_dir.exists())


if __name__ == "__main__":
    unittest.main()
