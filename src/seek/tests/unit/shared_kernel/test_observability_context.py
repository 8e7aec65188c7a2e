"""Unit tests for ObservationContext."""

import pytest

from shared_kernel.observability_context import ObservationContext


class TestObservationContext:
    """Tests for ObservationContext."""

    def test_empty_context_has_no_fields(self):
        assert ObservationContext().as_dict() == {}

    def test_as_dict_skips_none_values(self):
        """Only set values should be logged."""
        context = ObservationContext(request_id="req-1")

        assert context.as_dict() == {"request_id": "req-1"}

    def test_extra_is_merged(self):
        context = ObservationContext(user_id="u-1", extra={"client": "web"})

        assert context.as_dict() == {"user_id": "u-1", "client": "web"}

    def test_with_root(self):
        """with_root should format the root as Type:id."""
        context = ObservationContext(request_id="req-1").with_root("Study", 42)

        assert context.root == "Study:42"
        assert context.request_id == "req-1"

    def test_with_extra_does_not_mutate(self):
        original = ObservationContext(extra={"a": 1})

        updated = original.with_extra(b=2)

        assert original.extra == {"a": 1}
        assert updated.extra == {"a": 1, "b": 2}

    def test_is_immutable(self):
        context = ObservationContext()
        with pytest.raises(AttributeError):
            context.request_id = "req-2"
