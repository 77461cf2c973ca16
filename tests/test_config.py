"""Unit tests for configuration helpers."""

import logging

import pytest

from codepoint_codec.config import DEFAULT_LOG_LEVEL, load_log_level


class TestLoadLogLevel:

    @pytest.mark.parametrize("name,level", [
        ("DEBUG", logging.DEBUG),
        ("info", logging.INFO),
        (" Warning ", logging.WARNING),
        ("error", logging.ERROR),
    ])
    def test_known_names(self, name, level):
        assert load_log_level(name) == level

    def test_default(self):
        assert load_log_level() == load_log_level(DEFAULT_LOG_LEVEL)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            load_log_level("chatty")
