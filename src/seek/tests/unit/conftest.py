"""Unit test fixtures with isolated settings."""

import pytest


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop cached settings so environment changes apply per test."""
    from infrastructure.settings import get_isa_graph_settings, get_logging_settings

    get_isa_graph_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_isa_graph_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture
def isa_graph_settings():
    """Provide test ISA graph settings."""
    from infrastructure.settings import IsaGraphSettings

    return IsaGraphSettings(max_nodes=50)
