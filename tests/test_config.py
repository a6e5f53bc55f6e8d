"""Tests for switchyard.config — frozen dispatcher configuration."""

import pytest

from switchyard.config import DispatcherConfig


class TestDispatcherConfig:
    def test_defaults(self) -> None:
        config = DispatcherConfig()
        assert config.logger_name == "switchyard.routing"
        assert config.log_level == "info"
        assert config.log_format == "text"
        assert config.allow_separator == ", "

    def test_override(self) -> None:
        config = DispatcherConfig(log_format="json")
        assert config.log_format == "json"

    def test_frozen(self) -> None:
        config = DispatcherConfig()
        with pytest.raises(AttributeError):
            config.log_level = "debug"  # type: ignore[misc]
