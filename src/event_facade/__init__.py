"""
Typed facades over loosely-specified analytics event payloads.

This package provides:
- Identify: user-state view (traits, email, name, avatar, ...)
- Track: event view (properties, revenue, referrer, ...)
- create_facade: pick the facade matching a payload's `type`
- resolve/lookup: dotted-path and normalized-key lookup helpers
"""

from event_facade.accessor import FacadeOptions, FieldAccessor
from event_facade.errors import AliasConfigError, FacadeError, UnsupportedFacadeError
from event_facade.factory import create_facade
from event_facade.identify import Identify
from event_facade.resolver import lookup, resolve
from event_facade.track import Track

__all__ = [
    "AliasConfigError",
    "FacadeError",
    "FacadeOptions",
    "FieldAccessor",
    "Identify",
    "Track",
    "UnsupportedFacadeError",
    "create_facade",
    "lookup",
    "resolve",
]
