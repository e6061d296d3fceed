import os
import tempfile
import unittest

import constants as const
import main


class TestMain(unittest.TestCase):
    def _run(self, out_dir, *extra):
        return main.main(
            ["--width", "6", "--height", "4", "--cell-width", "2", "--cell-height", "3",
             "--output-dir", out_dir, *extra]
        )

    def test_writes_three_artifacts(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(self._run(tmp, "--seed", "5"), 0)
            self.assertEqual(
                sorted(os.listdir(tmp)),
                sorted([const.OUTPUT_FILE_ASCII, const.OUTPUT_FILE_PATH, const.OUTPUT_FILE_PNG]),
            )
            with open(os.path.join(tmp, const.OUTPUT_FILE_ASCII)) as f:
                lines = f.read().splitlines()
            self.assertEqual(len(lines), 9)
            self.assertTrue(all(len(line) == 13 for line in lines))

    def test_stl_is_opt_in(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(self._run(tmp, "--seed", "5", "--stl"), 0)
            self.assertTrue(os.path.exists(os.path.join(tmp, const.OUTPUT_FILE_STL)))

    def test_seeded_runs_write_identical_traces(self):
        traces = []
        for _ in range(2):
            with tempfile.TemporaryDirectory() as tmp:
                self.assertEqual(self._run(tmp, "--seed", "99"), 0)
                with open(os.path.join(tmp, const.OUTPUT_FILE_PATH), "rb") as f:
                    traces.append(f.read())
        self.assertEqual(traces[0], traces[1])

    def test_legacy_start_flag(self):
        args = main.parse_args(["--legacy-start"])
        self.assertTrue(args.legacy_start)
        self.assertEqual(args.width, const.DEFAULT_PATH_WIDTH)
        self.assertFalse(args.stl)

    def test_io_failure_exits_non_zero(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = os.path.join(tmp, "blocker")
            with open(blocker, "w") as f:
                f.write("not a directory")
            self.assertEqual(self._run(blocker, "--seed", "1"), 1)

    def test_rejects_non_positive_sizes(self):
        with self.assertRaises(SystemExit):
            main.parse_args(["--width", "0"])
        with self.assertRaises(SystemExit):
            main.parse_args(["--cell-height", "-2"])


if __name__ == "__main__":
    unittest.main()
