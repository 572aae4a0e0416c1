"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazylauncher import config
from lazylauncher.index import DEFAULT_BATCH_SIZE


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazylauncher.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertEqual(config.load_batch_size(), DEFAULT_BATCH_SIZE)
                self.assertEqual(config.load_extra_dirs(), [])
                self.assertFalse(config.load_key_by_path())

    def test_malformed_json_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazylauncher.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("lazylauncher.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_theme_name_round_trip_strips_whitespace(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazylauncher.config.CONFIG_PATH", Path(tmp) / "nested" / "config.json"):
                config.save_theme_name("  latte ")
                config.save_theme_name("   ")
                self.assertEqual(config.load_theme_name(), "latte")

    def test_values_are_sanitized(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazylauncher.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"batch_size": True, "extra_dirs": "not-a-list", "key_by_path": "yes"})
                self.assertEqual(config.load_batch_size(), DEFAULT_BATCH_SIZE)
                self.assertEqual(config.load_extra_dirs(), [])
                self.assertFalse(config.load_key_by_path())

                config.save_config({"batch_size": 0, "extra_dirs": ["/opt/apps", 3, ""], "key_by_path": True})
                self.assertEqual(config.load_batch_size(), DEFAULT_BATCH_SIZE)
                self.assertEqual(config.load_extra_dirs(), [Path("/opt/apps")])
                self.assertTrue(config.load_key_by_path())

                config.save_config({"batch_size": 25})
                self.assertEqual(config.load_batch_size(), 25)


if __name__ == "__main__":
    unittest.main()
