"""Tests for the command-line interface."""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from lift_tracker.cli import build_parser, main
from lift_tracker.lift_store import SqliteLiftStore
from lift_tracker.unit_converter import to_kg, to_lbs


class TestCli(unittest.TestCase):
    def setUp(self):
        self.db_fd, self.db_path = tempfile.mkstemp(suffix=".db")

    def tearDown(self):
        os.close(self.db_fd)
        os.unlink(self.db_path)

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--backend", "sqlite", "--db", self.db_path, *argv])
        return out.getvalue()

    def stored_lifts(self):
        store = SqliteLiftStore(self.db_path)
        store.init()
        return store.list_all()

    def test_add_and_list(self):
        self.run_cli("lifts", "add", "--name", "Squat", "--weight", "225")
        output = self.run_cli("lifts", "list")
        self.assertIn("Squat", output)
        self.assertIn("225.0 lbs", output)

    def test_add_in_kg_stores_lbs(self):
        self.run_cli("--kg", "lifts", "add", "--name", "Bench Press", "--weight", "100")
        self.assertAlmostEqual(self.stored_lifts()[0].lift.max_weight, 100 / 0.453592)

    def test_add_rejects_invalid_weight(self):
        with self.assertRaises(SystemExit):
            self.run_cli("lifts", "add", "--name", "Squat", "--weight", "abc")
        self.assertEqual(self.stored_lifts(), [])

    def test_edit_weight(self):
        self.run_cli("lifts", "add", "--name", "Squat", "--weight", "225")
        self.run_cli("lifts", "edit", "1", "--weight", "250")
        self.assertEqual(self.stored_lifts()[0].lift.max_weight, 250)

    def test_edit_step(self):
        self.run_cli("lifts", "add", "--name", "Squat", "--weight", "225")
        self.run_cli("lifts", "edit", "1", "--step", "10")
        self.run_cli("lifts", "edit", "1", "--step", "-5")
        self.assertEqual(self.stored_lifts()[0].lift.max_weight, 230)

    def test_edit_step_down_in_kg(self):
        # The step is taken off the kilogram value, not the pound value
        self.run_cli("lifts", "add", "--name", "Squat", "--weight", "225")
        self.run_cli("--kg", "lifts", "edit", "1", "--step", "-2.5")
        self.assertAlmostEqual(self.stored_lifts()[0].lift.max_weight, to_lbs(to_kg(225) - 2.5))

    def test_edit_step_up_in_kg(self):
        self.run_cli("--kg", "lifts", "add", "--name", "Bench Press", "--weight", "100")
        self.run_cli("--kg", "lifts", "edit", "1", "--step", "5")
        stored = self.stored_lifts()[0].lift.max_weight
        self.assertAlmostEqual(stored, to_lbs(105))
        self.assertAlmostEqual(to_kg(stored), 105)

    def test_edit_step_to_zero_rejected(self):
        self.run_cli("lifts", "add", "--name", "Curl", "--weight", "3")
        with self.assertRaises(SystemExit):
            self.run_cli("lifts", "edit", "1", "--step", "-5")
        self.assertEqual(self.stored_lifts()[0].lift.max_weight, 3)

    def test_delete(self):
        self.run_cli("lifts", "add", "--name", "Squat", "--weight", "225")
        self.run_cli("lifts", "delete", "1")
        self.assertEqual(self.stored_lifts(), [])

    def test_plan(self):
        self.run_cli("lifts", "add", "--name", "Deadlift", "--weight", "300")
        output = self.run_cli("plan", "1", "--cycle", "5/3/1")
        self.assertIn("Deadlift", output)
        self.assertIn("Warm-up", output)
        self.assertIn("285.0 lbs", output)

    def test_plan_deload(self):
        self.run_cli("lifts", "add", "--name", "Deadlift", "--weight", "300")
        output = self.run_cli("plan", "1", "--cycle", "Deload")
        self.assertNotIn("Warm-up", output)
        self.assertIn("180.0 lbs", output)

    def test_plan_missing_lift(self):
        with self.assertRaises(SystemExit):
            self.run_cli("plan", "99")


class TestBackendFromEnvironment(unittest.TestCase):
    def test_unknown_backend_exits_with_message(self):
        out = io.StringIO()
        with mock.patch("lift_tracker.cli.STORAGE_BACKEND", "foo"):
            with redirect_stdout(out), self.assertRaises(SystemExit) as cm:
                main(["cycles"])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Unknown storage backend 'foo'", out.getvalue())


class TestParser(unittest.TestCase):
    def test_default_cycle(self):
        args = build_parser().parse_args(["plan", "1"])
        self.assertEqual(args.cycle, "5/5/5")

    def test_edit_needs_weight_or_step(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["lifts", "edit", "1"])


if __name__ == "__main__":
    unittest.main()
