"""
Unit tests for the resolver module.

Tests for dotted-path resolution and normalized key lookup.
"""

from event_facade.resolver import lookup, normalize_key, resolve


class TestResolve:
    """Tests for resolve function."""

    def test_simple_field(self):
        """Should resolve a top-level key."""
        assert resolve({"event": "Signed Up"}, "event") == "Signed Up"

    def test_nested_field(self):
        """Should walk nested mappings with dot notation."""
        data = {"context": {"page": {"referrer": "https://acme.io"}}}
        assert resolve(data, "context.page.referrer") == "https://acme.io"

    def test_missing_intermediate_segment(self):
        """Missing segments resolve to None."""
        assert resolve({"context": {}}, "context.page.referrer") is None
        assert resolve({}, "context.page.referrer") is None

    def test_null_intermediate_segment(self):
        """An explicit null stops resolution."""
        assert resolve({"context": {"page": None}}, "context.page.referrer") is None

    def test_indexing_into_scalar(self):
        """Indexing a non-mapping resolves to None instead of raising."""
        assert resolve({"traits": "not a dict"}, "traits.email") is None
        assert resolve({"traits": ["a", "b"]}, "traits.email") is None
        assert resolve(None, "traits") is None

    def test_falsy_leaf_values_are_returned(self):
        """Falsy leaves other than None are real values."""
        data = {"properties": {"value": 0, "paid": False, "note": ""}}
        assert resolve(data, "properties.value") == 0
        assert resolve(data, "properties.paid") is False
        assert resolve(data, "properties.note") == ""

    def test_empty_path_returns_data(self):
        """An empty path resolves to the data itself."""
        data = {"a": 1}
        assert resolve(data, "") is data

    def test_does_not_mutate(self):
        """Resolution leaves the source untouched."""
        data = {"a": {"b": {"c": 1}}}
        resolve(data, "a.b.c")
        resolve(data, "a.x.y")
        assert data == {"a": {"b": {"c": 1}}}


class TestLookup:
    """Tests for lookup function."""

    def test_exact_match(self):
        """Exact keys win."""
        assert lookup({"photoUrl": "p"}, "photoUrl") == "p"

    def test_case_insensitive(self):
        """Key case is ignored."""
        assert lookup({"AVATAR": "a"}, "avatar") == "a"

    def test_separator_insensitive(self):
        """Underscores and dashes are ignored."""
        assert lookup({"photo_url": "p"}, "photoUrl") == "p"
        assert lookup({"avatar-url": "u"}, "avatarUrl") == "u"

    def test_exact_match_preferred_over_normalized(self):
        """An exact key is used even when a normalized match comes first."""
        assert lookup({"Avatar": "normalized", "avatar": "exact"}, "avatar") == "exact"

    def test_missing_key(self):
        """Missing keys and non-mappings give None."""
        assert lookup({"name": "Ada"}, "avatar") is None
        assert lookup("avatar", "avatar") is None

    def test_normalize_key(self):
        """Normalization lower-cases and drops separators."""
        assert normalize_key("Photo_Url") == "photourl"
        assert normalize_key("avatar-url") == "avatarurl"
        assert normalize_key("first name") == "firstname"
