import os
import tempfile
import unittest

from run_game import main


class TestRunGame(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.settings = os.path.join(self.tmp.name, "settings.json")

    def tearDown(self):
        self.tmp.cleanup()

    def test_host_runs_to_victory(self):
        """A small host maze is solved by the autopilot with nobody connected."""
        code = main(["--role", "host", "--port", "0", "--width", "5", "--height", "5",
                     "--seed", "2", "--fps", "1000", "--frames", "5000",
                     "--settings", self.settings])
        self.assertEqual(code, 0)

    def test_client_without_host_stops_on_frame_limit(self):
        code = main(["--role", "client", "--port", "1", "--fps", "1000", "--frames", "3",
                     "--settings", self.settings])
        self.assertEqual(code, 0)

    def test_bad_maze_exits_with_error(self):
        code = main(["--width", "-1", "--settings", self.settings])
        self.assertEqual(code, 1)

    def test_non_positive_fps_is_rejected(self):
        for fps in ("0", "-5", "nan"):
            with self.assertRaises(SystemExit) as cm:
                main(["--fps", fps, "--settings", self.settings])
            self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
