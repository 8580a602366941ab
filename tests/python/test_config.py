"""Unit tests for configuration loading."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from termshell import config
from termshell.config import ShellConfig, load_config
from termshell.exceptions import InvalidConfig


class TestConfig(unittest.TestCase):
    """Test TOML configuration loading."""

    def write_config(self, content: str) -> str:
        with tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".toml") as f:
            f.write(content)
        self.addCleanup(os.unlink, f.name)
        return f.name

    def test_top_level_keys(self):
        path = self.write_config('name = "tsh"\nuser = "will"\nhost = "portfolio"\n')
        cfg = load_config(path)
        self.assertEqual("tsh", cfg.name)
        self.assertEqual("will", cfg.user)
        self.assertEqual("portfolio", cfg.host)
        self.assertEqual("will@portfolio$ ", cfg.format_prompt())

    def test_shell_table(self):
        path = self.write_config('[shell]\nuser = "guest"\nprompt = "{name}> "\n')
        cfg = load_config(path)
        self.assertEqual("guest", cfg.user)
        self.assertEqual("termshell> ", cfg.format_prompt())

    def test_unknown_key(self):
        path = self.write_config('colour = "red"\n')
        with self.assertRaises(InvalidConfig):
            load_config(path)

    def test_non_string_value(self):
        path = self.write_config("user = 3\n")
        with self.assertRaises(InvalidConfig):
            load_config(path)

    def test_malformed_file(self):
        path = self.write_config("user = \n")
        with self.assertRaises(InvalidConfig):
            load_config(path)

    def test_missing_explicit_path(self):
        with self.assertRaises(InvalidConfig):
            load_config("/nonexistent/termshell/config.toml")

    def test_missing_default_path_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "config.toml"
            with mock.patch.object(config, "default_config_path", return_value=missing):
                cfg = load_config()
        self.assertEqual("termshell", cfg.name)
        self.assertIsInstance(cfg, ShellConfig)

    def test_default_path_location(self):
        self.assertEqual("config.toml", config.default_config_path().name)


if __name__ == "__main__":
    unittest.main()
