"""
Field access over a wrapped event dictionary.

FieldAccessor is embedded by every facade. It owns the raw payload and
offers two lookup modes:

- field("userId"): top-level key only
- proxy("traits.email"): the first segment goes through the facade's
  accessor registry when one is registered (so "traits" means the facade's
  materialized traits()), the rest is resolved as a dotted path
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from event_facade.primitives import parse_timestamp
from event_facade.resolver import resolve
from event_facade.settings import get_settings

logger = logging.getLogger(__name__)

Accessor = Callable[[], Any]


@dataclass(frozen=True)
class FacadeOptions:
    """Options about how a facade hands out values."""

    clone: bool = True

    @classmethod
    def from_settings(cls) -> "FacadeOptions":
        """Build options from the cached library settings."""
        return cls(clone=get_settings().CLONE)


class FieldAccessor:
    """
    Read-only access to a raw event dictionary.

    The accessor registry maps payload-style names ("traits", "userId",
    "firstName") to zero-argument callables. It is consulted by proxy() for
    the first path segment and by alias extraction for source keys.
    """

    def __init__(
        self,
        dictionary: Optional[Mapping[str, Any]],
        registry: Optional[Mapping[str, Accessor]] = None,
        clone: bool = True,
    ):
        """
        Initialize the accessor.

        Args:
            dictionary: Raw event payload. Treated as read-only.
            registry: Facade accessors keyed by payload-style name. These
                override the built-in identity accessors.
            clone: Whether values handed out are deep copies
        """
        self._obj: Mapping[str, Any] = dictionary if dictionary is not None else {}
        self.clone = clone
        self._registry: Dict[str, Accessor] = {
            "userId": self.user_id,
            "anonymousId": self.anonymous_id,
            "sessionId": self.session_id,
            "timestamp": self.timestamp,
            "ip": self.ip,
            "userAgent": self.user_agent,
            "options": self.options,
            "context": self.options,
        }
        self._registry.update(registry or {})

    def _out(self, value: Any) -> Any:
        return copy.deepcopy(value) if self.clone else value

    def accessor(self, name: str) -> Optional[Accessor]:
        """Return the registered accessor called ``name``, if any."""
        return self._registry.get(name)

    def field(self, name: str) -> Any:
        """Return the top-level value at ``name`` or None."""
        return self._out(self._obj.get(name))

    def proxy(self, path: str) -> Any:
        """
        Resolve a dotted path, routing the first segment through accessors.

        Args:
            path: e.g. "properties.revenue" or "context.page.referrer"

        Returns:
            The resolved value or None
        """
        head, _, rest = path.partition(".")
        getter = self._registry.get(head)
        value = getter() if getter is not None else self._obj.get(head)

        if value is None:
            return None
        if not rest:
            return self._out(value)
        return self._out(resolve(value, rest))

    def value(self, name: str) -> Any:
        """
        Return the top-level ``name``, else the same key in the options bag.

        Explicit event fields take precedence over option defaults.
        """
        explicit = self.field(name)
        if explicit is not None:
            return explicit
        return self.proxy(f"options.{name}")

    def json(self) -> Dict[str, Any]:
        """Return a deep copy of the wrapped dictionary."""
        return copy.deepcopy(dict(self._obj))

    # ------------------------------------------------------------------
    # Identity and envelope
    # ------------------------------------------------------------------

    def user_id(self) -> Any:
        """Get the user ID from `userId`."""
        return self.field("userId")

    def anonymous_id(self) -> Any:
        """Get the anonymous ID from `anonymousId`."""
        return self.field("anonymousId")

    def session_id(self) -> Any:
        """Alias for anonymous_id()."""
        return self.anonymous_id()

    def timestamp(self) -> Optional[datetime]:
        """Get the parsed `timestamp`, if any."""
        return parse_timestamp(self._obj.get("timestamp"))

    def ip(self) -> Any:
        """Get the client IP from `ip` or `options.ip`."""
        return self.value("ip")

    def user_agent(self) -> Any:
        """Get the user agent from `userAgent` or `options.userAgent`."""
        return self.value("userAgent")

    def options(self) -> Dict[str, Any]:
        """
        Get the options bag from `options`, falling back to `context`.

        Older clients send defaults under `options`, newer ones under
        `context`; whichever is present first is used.
        """
        value = self._obj.get("options") or self._obj.get("context") or {}
        if not isinstance(value, Mapping):
            logger.debug(f"Ignoring non-mapping options of type {type(value).__name__}")
            return {}
        return self._out(dict(value))


def fielded(name: str, doc: Optional[str] = None) -> Callable[[Any], Any]:
    """
    Build a facade method returning the top-level field ``name``.

    Example:
        class Track:
            event = fielded("event")
    """

    def getter(self) -> Any:
        return self.field(name)

    getter.__name__ = name
    getter.__doc__ = doc or f"Get the value of `{name}`."
    return getter


def proxied(path: str, doc: Optional[str] = None) -> Callable[[Any], Any]:
    """
    Build a facade method returning ``self.proxy(path)``.

    Example:
        class Track:
            plan = proxied("properties.plan")
    """

    def getter(self) -> Any:
        return self.proxy(path)

    getter.__name__ = path.rsplit(".", 1)[-1]
    getter.__doc__ = doc or f"Get the value at `{path}`."
    return getter
