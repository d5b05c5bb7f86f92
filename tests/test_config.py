#!/usr/bin/env python3
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
"""
Unit tests for configuration loading and environment variable handling.
"""
import unittest
from unittest.mock import patch

from config import load_config, SyncConfig, DEFAULT_JOPLIN_BASE_URL
from errors import ConfigError

VALID_ENV = {
    "POCKET_CONSUMER_KEY": "test-consumer-key",
    "POCKET_ACCESS_TOKEN": "test-access-token",
    "JOPLIN_TOKEN": "test-joplin-token",
}


class TestLoadConfig(unittest.TestCase):
    """Test cases for load_config."""

    def test_defaults(self):
        config = load_config(VALID_ENV)

        self.assertEqual(config.pocket_consumer_key, "test-consumer-key")
        self.assertEqual(config.pocket_access_token, "test-access-token")
        self.assertEqual(config.joplin_token, "test-joplin-token")
        self.assertEqual(config.joplin_base_url, DEFAULT_JOPLIN_BASE_URL)
        self.assertEqual(config.tag_title, "to_read")
        self.assertEqual(config.folder_title, "Main")
        self.assertIsNone(config.request_timeout)

    def test_overrides(self):
        env = dict(
            VALID_ENV,
            JOPLIN_BASE_URL="http://joplin.local:8080/",
            JOPLIN_TAG="later",
            JOPLIN_FOLDER="Inbox",
            REQUEST_TIMEOUT="12.5",
        )
        config = load_config(env)

        self.assertEqual(config.joplin_base_url, "http://joplin.local:8080")
        self.assertEqual(config.tag_title, "later")
        self.assertEqual(config.folder_title, "Inbox")
        self.assertEqual(config.request_timeout, 12.5)

    def test_missing_required_variables_are_all_named(self):
        with self.assertRaises(ConfigError) as ctx:
            load_config({"POCKET_CONSUMER_KEY": "key"})

        message = str(ctx.exception)
        self.assertIn("POCKET_ACCESS_TOKEN", message)
        self.assertIn("JOPLIN_TOKEN", message)
        self.assertNotIn("POCKET_CONSUMER_KEY", message)

    def test_blank_value_counts_as_missing(self):
        env = dict(VALID_ENV, POCKET_ACCESS_TOKEN="   ")
        with self.assertRaises(ConfigError):
            load_config(env)

    def test_values_are_stored_stripped(self):
        env = {
            "POCKET_CONSUMER_KEY": "  key\n",
            "POCKET_ACCESS_TOKEN": " abc ",
            "JOPLIN_TOKEN": "\tjoplin ",
            "JOPLIN_TAG": " later ",
        }
        config = load_config(env)

        self.assertEqual(config.pocket_consumer_key, "key")
        self.assertEqual(config.pocket_access_token, "abc")
        self.assertEqual(config.joplin_token, "joplin")
        self.assertEqual(config.tag_title, "later")

    def test_invalid_timeout(self):
        for raw in ("soon", "0", "-3"):
            with self.subTest(raw=raw):
                with self.assertRaises(ConfigError):
                    load_config(dict(VALID_ENV, REQUEST_TIMEOUT=raw))

    def test_config_is_immutable(self):
        config = load_config(VALID_ENV)
        with self.assertRaises(Exception):
            config.joplin_token = "other"

    @patch("config.load_dotenv")
    def test_reads_process_environment(self, mock_load_dotenv):
        with patch.dict(os.environ, VALID_ENV, clear=True):
            config = load_config()

        mock_load_dotenv.assert_called_once()
        self.assertIsInstance(config, SyncConfig)
        self.assertEqual(config.joplin_token, "test-joplin-token")

    @patch("config.load_dotenv")
    def test_empty_process_environment(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigError):
                load_config()


if __name__ == "__main__":
    unittest.main()
