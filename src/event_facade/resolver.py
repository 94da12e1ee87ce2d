"""
Path resolution over nested event dictionaries.

Supports:
- Dot notation for nested fields: "context.page.referrer"
- Normalized single-key lookup: "photoUrl" also matches "photo_url" or "PhotoURL"

Resolution never raises. A missing segment, an explicit null, or an attempt
to index into a non-mapping all resolve to None.
"""

import re
from typing import Any, Mapping, Optional

_SEPARATORS = re.compile(r"[\s_.\-]")


def resolve(data: Any, path: str) -> Any:
    """
    Walk a dotted path through nested mappings.

    Args:
        data: Source data, usually a dict decoded from JSON
        path: Dot separated segments, e.g. "traits.address.city"

    Returns:
        The value at the end of the path, or None if any segment is
        missing or null
    """
    if not path:
        return data

    current = data
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
        if current is None:
            return None

    return current


def normalize_key(key: str) -> str:
    """Lower-case a key and drop spaces, underscores, dashes and dots."""
    return _SEPARATORS.sub("", key).lower()


def lookup(data: Any, key: str) -> Optional[Any]:
    """
    Look up a single key, tolerating case and separator differences.

    An exact match always wins; otherwise the first key whose normalized
    form equals the normalized ``key`` is used.
    """
    if not isinstance(data, Mapping):
        return None

    if key in data:
        return data[key]

    wanted = normalize_key(key)
    for candidate, value in data.items():
        if isinstance(candidate, str) and normalize_key(candidate) == wanted:
            return value

    return None
