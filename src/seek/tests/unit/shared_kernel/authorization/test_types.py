"""Unit tests for authorization types."""

from shared_kernel.authorization.types import Permission, format_resource


class TestPermission:
    """Tests for the Permission enum."""

    def test_values_are_lowercase_names(self):
        assert Permission.VIEW == "view"
        assert Permission("edit") is Permission.EDIT

    def test_str_is_value(self):
        """Permissions should format as their value."""
        assert f"can_{Permission.DOWNLOAD}" == "can_download"


class TestFormatResource:
    """Tests for format_resource."""

    def test_formats_type_and_id(self):
        assert format_resource("Study", 42) == "Study:42"
