"""
Unit tests for the aliasing module.

Tests for extract_aliased renaming rules.
"""

from event_facade.accessor import FieldAccessor
from event_facade.aliasing import extract_aliased


def _extract(payload, aliases, registry=None, **kwargs):
    fields = FieldAccessor(payload, registry=registry)
    return extract_aliased(fields.field("traits"), "traits", aliases, fields, **kwargs)


class TestExtractAliased:
    """Tests for extract_aliased function."""

    def test_no_aliases_copies_base(self):
        """Without aliases the result is a shallow copy of the base."""
        payload = {"traits": {"plan": "pro"}}
        result = _extract(payload, None)
        assert result == {"plan": "pro"}
        result["plan"] = "free"
        assert payload["traits"]["plan"] == "pro"

    def test_missing_base(self):
        """A missing or malformed base yields an empty dict."""
        assert _extract({}, {}) == {}
        assert _extract({"traits": "oops"}, {}) == {}

    def test_rename_is_destructive(self):
        """The source key is removed after renaming."""
        result = _extract({"traits": {"a": 1}}, {"a": "b"})
        assert result == {"b": 1}

    def test_missing_source_is_skipped(self):
        """Aliases whose value is absent leave the result untouched."""
        result = _extract({"traits": {"a": 1}}, {"missing": "a"})
        assert result == {"a": 1}

    def test_same_key_kept_by_default(self):
        """A source equal to its destination is kept."""
        assert _extract({"traits": {"a": 1}}, {"a": "a"}) == {"a": 1}

    def test_same_key_deleted_when_requested(self):
        """delete_same_key removes the key even when source equals destination."""
        assert _extract({"traits": {"a": 1}}, {"a": "a"}, delete_same_key=True) == {}

    def test_registered_accessor_is_called(self):
        """Registered accessors win over raw keys."""
        result = _extract(
            {"traits": {"nick": "raw"}},
            {"nick": "handle"},
            registry={"nick": lambda: "computed"},
        )
        assert result == {"handle": "computed"}

    def test_inject_id(self):
        """A truthy inject_id is stored as `id`."""
        assert _extract({"traits": {}}, {}, inject_id="u1") == {"id": "u1"}
        assert _extract({"traits": {}}, {}, inject_id="") == {}

    def test_delete_of_absent_source_is_noop(self):
        """Accessor-sourced aliases do not fail when the key is absent."""
        result = _extract(
            {"traits": {"a": 1}},
            {"computed": "c"},
            registry={"computed": lambda: 2},
        )
        assert result == {"a": 1, "c": 2}
