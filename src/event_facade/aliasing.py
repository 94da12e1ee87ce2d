"""
Alias extraction for trait and property dictionaries.

An alias map like {"xxx": "yyy"} takes whatever is at `xxx` and moves it to
`yyy` in the returned copy. When `xxx` names a registered facade accessor
the accessor is called instead of reading the raw key, so fallback chains
such as Track.username() are honored.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from event_facade.accessor import FieldAccessor

logger = logging.getLogger(__name__)


def extract_aliased(
    base: Any,
    prefix: str,
    aliases: Optional[Mapping[str, str]],
    fields: FieldAccessor,
    *,
    inject_id: Any = None,
    delete_same_key: bool = False,
) -> Dict[str, Any]:
    """
    Build a renamed shallow copy of a trait or property mapping.

    Args:
        base: The mapping to copy, e.g. the raw `traits` field
        prefix: Path of ``base`` used for raw alias lookups, e.g. "traits"
        aliases: Mapping of source key to destination key
        fields: Accessor of the facade being extracted from
        inject_id: When truthy, stored as ``id`` before aliases are applied
        delete_same_key: Remove the source key even when it equals the
            destination key

    Returns:
        A new dict. ``base`` is never modified.
    """
    if isinstance(base, Mapping):
        result = dict(base)
    else:
        if base is not None:
            logger.debug(f"Ignoring non-mapping {prefix} of type {type(base).__name__}")
        result = {}

    if inject_id:
        result["id"] = inject_id

    for source, dest in (aliases or {}).items():
        getter = fields.accessor(source)
        value = getter() if getter is not None else fields.proxy(f"{prefix}.{source}")
        if value is None:
            continue

        result[dest] = value
        if delete_same_key or source != dest:
            result.pop(source, None)

    return result
