"""Tests for logging configuration."""

import logging
import sys

from helper_engine import log as helper_log


class TestConfigure:
    def test_root_handler_writes_to_stderr(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        helper_log._configure()

        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert root.level == logging.WARNING

    def test_existing_handlers_are_kept(self, monkeypatch):
        root = logging.getLogger()
        existing = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [existing])
        monkeypatch.setattr(root, "level", root.level)

        helper_log._configure()

        assert root.handlers == [existing]
