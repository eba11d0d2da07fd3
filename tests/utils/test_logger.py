"""Unit tests for Logger."""
from __future__ import annotations

import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from chatai.utils.logger import Logger


def _fixed_clock() -> datetime:
    return datetime(2024, 5, 1, 12, 30, 45)


class TestLogger(unittest.TestCase):
    """Test cases for Logger."""

    def setUp(self):
        """Set up test fixtures."""
        self._tmp = tempfile.TemporaryDirectory()
        self.logger = Logger(log_dir=Path(self._tmp.name), clock=_fixed_clock)

    def tearDown(self):
        self._tmp.cleanup()

    def test_lines_are_timestamped(self):
        """Test the line format."""
        self.logger.log("Hello")
        self.assertEqual(self.logger.lines, ["[12:30:45] Hello"])

    def test_empty_message_ignored(self):
        """Test that empty messages are dropped."""
        self.logger.log("")
        self.assertEqual(self.logger.lines, [])

    def test_first_subscriber_gets_replay(self):
        """Test that buffered lines replay to the first subscriber only."""
        self.logger.log("one")
        received: list[str] = []
        self.logger.on_emit = received.append
        self.logger.log("two")

        self.assertEqual(received, ["[12:30:45] one", "[12:30:45] two"])

        later: list[str] = []
        self.logger.on_emit = later.append
        self.assertEqual(later, [])

    def test_save_writes_file(self):
        """Test that save writes every line to a timestamped file."""
        self.logger.log("one")
        self.logger.log("two")

        path = self.logger.save()

        self.assertEqual(path.name, "2024-05-01_12-30-45.txt")
        self.assertEqual(
            path.read_text(encoding="utf-8"),
            "[12:30:45] one\n[12:30:45] two",
        )


if __name__ == "__main__":
    unittest.main()
