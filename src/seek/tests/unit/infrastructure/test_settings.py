"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    IsaGraphSettings,
    LoggingSettings,
    get_isa_graph_settings,
    get_logging_settings,
)
from shared_kernel.authorization import Permission


class TestIsaGraphSettings:
    """Tests for ISA graph settings."""

    def test_defaults(self):
        """Should have a node limit and check view permission by default."""
        settings = IsaGraphSettings()
        assert settings.max_nodes == 10000
        assert settings.visibility_permission is Permission.VIEW

    def test_from_environment(self, monkeypatch):
        """Should read SEEK_ISA_GRAPH_ variables."""
        monkeypatch.setenv("SEEK_ISA_GRAPH_MAX_NODES", "500")
        monkeypatch.setenv("SEEK_ISA_GRAPH_VISIBILITY_PERMISSION", "download")

        settings = IsaGraphSettings()

        assert settings.max_nodes == 500
        assert settings.visibility_permission is Permission.DOWNLOAD

    def test_empty_max_nodes_disables_limit(self, monkeypatch):
        """An empty value should mean no limit."""
        monkeypatch.setenv("SEEK_ISA_GRAPH_MAX_NODES", "")

        assert IsaGraphSettings().max_nodes is None

    def test_max_nodes_must_be_positive(self):
        with pytest.raises(ValidationError):
            IsaGraphSettings(max_nodes=0)

    def test_unknown_permission_is_rejected(self):
        with pytest.raises(ValidationError):
            IsaGraphSettings(visibility_permission="own")

    def test_settings_are_cached(self):
        assert get_isa_graph_settings() is get_isa_graph_settings()


class TestLoggingSettings:
    """Tests for logging settings."""

    def test_defaults(self):
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.json_output is None

    def test_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEEK_LOG_LEVEL", "warning")
        monkeypatch.setenv("SEEK_LOG_JSON_OUTPUT", "true")

        settings = get_logging_settings()

        assert settings.level == "WARNING"
        assert settings.json_output is True
