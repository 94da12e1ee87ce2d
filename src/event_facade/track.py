"""
Track facade.

A read-only view over a `track` payload: one discrete thing a user did.
Event attributes live under `properties`; user traits sent along with the
event live under `context.traits` (or the legacy `options.traits`).

Example:
    track = Track({"event": "Order Completed", "properties": {"total": "$50.00"}})
    track.revenue()  # 50.0
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from event_facade.accessor import Accessor, FacadeOptions, FieldAccessor, fielded, proxied
from event_facade.aliasing import extract_aliased
from event_facade.currency import currency
from event_facade.identify import Identify
from event_facade.primitives import is_email

logger = logging.getLogger(__name__)

ORDER_COMPLETED = re.compile(
    r"^[ _]?completed[ _]?order[ _]?|^[ _]?order[ _]?completed[ _]?$",
    re.IGNORECASE,
)


class Track:
    """
    Event view over a track payload.

    Accessors return None when a value is absent; they never raise.
    """

    def __init__(
        self,
        dictionary: Optional[Mapping[str, Any]] = None,
        options: Optional[FacadeOptions] = None,
    ):
        """
        Initialize the facade.

        Args:
            dictionary: The payload to wrap (`event`, `userId`, `properties`, ...)
            options: How values are handed out. Defaults to library settings.
        """
        self.opts = options or FacadeOptions.from_settings()
        self._fields = FieldAccessor(dictionary, self._registry(), clone=self.opts.clone)

    def _registry(self) -> Dict[str, Accessor]:
        """Map payload-style names to this facade's zero-argument accessors."""
        return {
            "traits": self.traits,
            "properties": self.properties,
            "event": self.event,
            "value": self.value,
            "category": self.category,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "plan": self.plan,
            "referrer": self.referrer,
            "query": self.query,
            "username": self.username,
            "email": self.email,
            "revenue": self.revenue,
        }

    def __repr__(self) -> str:
        """Short representation for logs."""
        return f"Track(event={self.event()!r})"

    # ------------------------------------------------------------------
    # Envelope
    # ------------------------------------------------------------------

    def action(self) -> str:
        """Return the type of facade this is, always "track"."""
        return "track"

    type = action

    def field(self, name: str) -> Any:
        """Get the top-level field `name`."""
        return self._fields.field(name)

    def proxy(self, path: str) -> Any:
        """Resolve a dotted path such as "traits.email"."""
        return self._fields.proxy(path)

    def json(self) -> Dict[str, Any]:
        """Return a deep copy of the wrapped payload."""
        return self._fields.json()

    def options(self) -> Dict[str, Any]:
        """Get the options bag from `options`, falling back to `context`."""
        return self._fields.options()

    context = options

    def user_id(self) -> Any:
        """Get the user ID from `userId`."""
        return self._fields.user_id()

    def anonymous_id(self) -> Any:
        """Get the anonymous ID from `anonymousId`."""
        return self._fields.anonymous_id()

    def session_id(self) -> Any:
        """Alias for anonymous_id()."""
        return self._fields.session_id()

    def timestamp(self) -> Optional[datetime]:
        """Get the parsed `timestamp`."""
        return self._fields.timestamp()

    def ip(self) -> Any:
        """Get the client IP from `ip` or `options.ip`."""
        return self._fields.ip()

    def user_agent(self) -> Any:
        """Get the user agent from `userAgent` or `options.userAgent`."""
        return self._fields.user_agent()

    # ------------------------------------------------------------------
    # Event attributes
    # ------------------------------------------------------------------

    event = fielded("event", "Get the event name from `event`.")
    value = proxied("properties.value", "Get the event value, usually monetary, from `properties.value`.")
    category = proxied("properties.category")
    id = proxied("properties.id")
    name = proxied("properties.name")
    description = proxied("properties.description")
    plan = proxied("properties.plan", "Get the plan the user is on from `properties.plan`.")
    query = proxied("options.query")

    def referrer(self) -> Any:
        """Get the referrer from `context.referrer.url`, `context.page.referrer` or `properties.referrer`."""
        return (
            self.proxy("context.referrer.url")
            or self.proxy("context.page.referrer")
            or self.proxy("properties.referrer")
        )

    def properties(self, aliases: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        Get the event's properties from `properties`.

        Aliases work like Identify.traits(), except that the source key is
        always removed after aliasing, even when it equals the destination.
        No `id` is injected.

        Example:
            track = Track({"properties": {"foo": "bar"}, "anonymousId": "xxx"})
            track.properties({"foo": "asdf"})  # {"asdf": "bar"}
            track.properties({"foo": "foo"})   # {}
        """
        return extract_aliased(
            self._fields.field("properties"),
            "properties",
            aliases,
            self._fields,
            delete_same_key=True,
        )

    def traits(self, aliases: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        Get the user traits sent with the event from `context.traits`, with
        `id` set to the `userId`. Aliases behave as in Identify.traits().
        """
        return extract_aliased(
            self._fields.proxy("context.traits"),
            "context.traits",
            aliases,
            self._fields,
            inject_id=self.user_id(),
        )

    # ------------------------------------------------------------------
    # Heuristics
    # ------------------------------------------------------------------

    def username(self) -> Any:
        """Get the username from `traits.username`, `properties.username`, `userId` or `anonymousId`."""
        return (
            self.proxy("traits.username")
            or self.proxy("properties.username")
            or self.user_id()
            or self.session_id()
        )

    def email(self) -> Any:
        """
        Get the email from `traits.email`, `properties.email` or
        `options.traits.email`, falling back to `userId` if it looks like
        a valid email.
        """
        email = (
            self.proxy("traits.email")
            or self.proxy("properties.email")
            or self.proxy("options.traits.email")
        )
        if email:
            return email

        user_id = self.user_id()
        if is_email(user_id):
            return user_id
        return None

    def revenue(self) -> Any:
        """
        Get the revenue for this event.

        This is `properties.revenue`, unless that is missing on an
        "Order Completed" event, in which case `properties.total` is used.
        Dollar signs are removed and the result is parsed into a number.
        """
        revenue = self.proxy("properties.revenue")
        event = self.event()

        if not revenue and isinstance(event, str) and ORDER_COMPLETED.search(event):
            revenue = self.proxy("properties.total")

        return currency(revenue)

    def identify(self) -> Identify:
        """
        Convert this event into an Identify facade.

        The new facade wraps a copy of this event's payload whose `traits`
        are this event's traits(). Later changes to either payload do not
        affect the other.
        """
        json = self.json()
        json["traits"] = self.traits()
        logger.debug(f"Converting {self.event()!r} to identify", extra={"facade": "track"})
        return Identify(json, self.opts)
