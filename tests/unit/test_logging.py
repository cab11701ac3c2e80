"""Tests for lingua.logging module."""

import logging

import structlog

from lingua.logging import LIBRARY_NAME, add_library_name, get_module_logger


class TestGetModuleLogger:
    """Tests for get_module_logger()."""

    def test_binds_library_and_module(self):
        """The caller's module and the library name are bound."""
        context = structlog.get_context(get_module_logger())
        assert context["library"] == "lingua"
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]


class TestAddLibraryName:
    """Tests for the add_library_name processor."""

    def test_adds_library(self):
        event = add_library_name(None, "info", {"event": "loaded_language"})
        assert event == {"event": "loaded_language", "library": LIBRARY_NAME}

    def test_keeps_existing_value(self):
        event = add_library_name(None, "info", {"event": "x", "library": "host"})
        assert event["library"] == "host"


class TestTestEnvironment:
    """Tests for logging under pytest."""

    def test_library_logger_silenced(self):
        """The lingua logger is silenced under pytest."""
        assert logging.getLogger(LIBRARY_NAME).level > logging.CRITICAL
