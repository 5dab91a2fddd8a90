"""Tests for config persistence and input sanitization.

Validates sort-preference and workspace-path round-tripping.
Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_sort_preference_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                config.save_sort_preference("mtime", "desc")
                self.assertEqual(config.load_sort_preference(), ("mtime", "desc"))

                config.save_sort_preference(None, "asc")
                self.assertEqual(config.load_sort_preference(), (None, "asc"))
                self.assertNotIn("sort_column", config.load_config())

    def test_sort_preference_defaults_when_missing_or_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_sort_preference(), (None, "asc"))

                config.save_config({"sort_column": "colour", "sort_direction": 3})
                self.assertEqual(config.load_sort_preference(), (None, "asc"))

    def test_save_sort_preference_ignores_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                config.save_sort_preference("name", "desc")
                config.save_sort_preference("colour", "asc")
                config.save_sort_preference("size", "sideways")
                self.assertEqual(config.load_sort_preference(), ("name", "desc"))

    def test_workspace_path_round_trip_and_validation(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            workspace = Path(tmp) / "workspace.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_workspace_path())

                config.save_workspace_path(workspace)
                self.assertEqual(config.load_workspace_path(), workspace.resolve())

                config.save_config({"workspace": "   "})
                self.assertIsNone(config.load_workspace_path())
                config.save_config({"workspace": 12})
                self.assertIsNone(config.load_workspace_path())

    def test_malformed_config_file_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{broken", encoding="utf-8")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
