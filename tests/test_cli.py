"""Tests for the command line interface."""
import logging
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, main

from typer.testing import CliRunner

from matchstats.cli import app
from matchstats.registry import StatisticsRegistry

logging.disable(logging.CRITICAL)


class CliTests(TestCase):
    """Tests for the cli commands."""

    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_demo(self):
        result = self.runner.invoke(app, ["demo"])
        self.assertEqual(result.exit_code, 0, result.stdout)
        self.assertEqual(
            result.stdout.splitlines(),
            [
                "Central received: Goals: 2, Cards: 3",
                "Estadio received: Goals: 2, Cards: 3",
                "Estadio received: Goals: 3, Cards: 4",
            ],
        )

    def test_demo_leaves_no_listeners(self):
        self.runner.invoke(app, ["demo"])
        self.assertEqual(StatisticsRegistry.get_instance().subscribers, ())

    def test_update(self):
        result = self.runner.invoke(app, ["update", "5", "1", "--listener", "Central"])
        self.assertEqual(result.exit_code, 0, result.stdout)
        lines = result.stdout.splitlines()
        self.assertEqual(lines[0], "Central received: Goals: 5, Cards: 1")
        self.assertEqual(lines[1], "Statistics set to 5 goals and 1 cards.")
        registry = StatisticsRegistry.get_instance()
        self.assertEqual((registry.goals, registry.cards), (5, 1))

    def test_update_negative(self):
        registry = StatisticsRegistry.get_instance()
        registry.update(1, 1)
        result = self.runner.invoke(app, ["update", "--listener", "Central", "--", "-1", "0"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("non-negative", result.stdout)
        self.assertNotIn("received", result.stdout)
        self.assertEqual((registry.goals, registry.cards), (1, 1))

    def test_config(self):
        with TemporaryDirectory() as folder:
            Path(folder, "matchstats.toml").write_text('[matchstats]\nmessage_template = "{goals}:{cards}"\n')
            result = self.runner.invoke(app, ["update", "2", "0", "-l", "Estadio", "--config", folder])
        self.assertEqual(result.exit_code, 0, result.stdout)
        self.assertIn("Estadio received: 2:0", result.stdout.splitlines())

    def test_invalid_config(self):
        with TemporaryDirectory() as folder:
            Path(folder, "matchstats.toml").write_text("[matchstats]\nfail_fast = 3\n")
            result = self.runner.invoke(app, ["demo", "--config", folder])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("invalid settings", result.stdout)

    def test_unformattable_template(self):
        registry = StatisticsRegistry.get_instance()
        registry.update(1, 1)
        with TemporaryDirectory() as folder:
            Path(folder, "matchstats.toml").write_text('[matchstats]\nmessage_template = "{goals:s} {cards}"\n')
            result = self.runner.invoke(app, ["update", "2", "3", "--config", folder])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("invalid settings", result.stdout)
        self.assertEqual((registry.goals, registry.cards), (1, 1))

    def test_version(self):
        result = self.runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("matchstats", result.stdout)


if __name__ == "__main__":
    main()
