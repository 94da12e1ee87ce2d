"""
Identify facade.

A read-only view over an `identify` payload: a snapshot of who the user is
and what we know about them. Traits are read from the top-level `traits`
object, augmented with `id` from `userId`.

Example:
    identify = Identify({"userId": "u1", "traits": {"firstName": "Ada", "lastName": "Lovelace"}})
    identify.name()    # "Ada Lovelace"
    identify.traits()  # {"firstName": "Ada", "lastName": "Lovelace", "id": "u1"}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from event_facade.accessor import Accessor, FacadeOptions, FieldAccessor, proxied
from event_facade.aliasing import extract_aliased
from event_facade.primitives import is_email, parse_timestamp
from event_facade.resolver import lookup


class Identify:
    """
    User-state view over an identify payload.

    Accessors return None when a value is absent; they never raise. Values
    *should* have the documented types but may not if a client isn't
    adhering to the tracking plan.
    """

    def __init__(
        self,
        dictionary: Optional[Mapping[str, Any]] = None,
        options: Optional[FacadeOptions] = None,
    ):
        """
        Initialize the facade.

        Args:
            dictionary: The payload to wrap (`userId`, `anonymousId`, `traits`, ...)
            options: How values are handed out. Defaults to library settings.
        """
        self.opts = options or FacadeOptions.from_settings()
        self._fields = FieldAccessor(dictionary, self._registry(), clone=self.opts.clone)

    def _registry(self) -> Dict[str, Accessor]:
        """Map payload-style names to this facade's zero-argument accessors."""
        return {
            "traits": self.traits,
            "email": self.email,
            "created": self.created,
            "name": self.name,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "uid": self.uid,
            "description": self.description,
            "avatar": self.avatar,
            "username": self.username,
            "phone": self.phone,
            "website": self.website,
            "gender": self.gender,
            "birthday": self.birthday,
            "age": self.age,
            "position": self.position,
            "address": self.address,
            "companyName": self.company_name,
        }

    def __repr__(self) -> str:
        """Short representation for logs."""
        return f"Identify(user_id={self.user_id()!r})"

    # ------------------------------------------------------------------
    # Envelope
    # ------------------------------------------------------------------

    def action(self) -> str:
        """Return the type of facade this is, always "identify"."""
        return "identify"

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
    # Traits
    # ------------------------------------------------------------------

    def traits(self, aliases: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        Get the user's traits from `traits`, with `id` set to the `userId`.

        Each alias like {"xxx": "yyy"} moves whatever is at `xxx` to `yyy`.
        If `xxx` is a registered accessor (e.g. "email", "firstName") it is
        called instead of reading the raw trait. A source key equal to its
        destination is kept.

        Example:
            identify = Identify({"traits": {"foo": "bar"}, "anonymousId": "xxx"})
            identify.traits()                       # {"foo": "bar"}
            identify.traits({"foo": "asdf"})        # {"asdf": "bar"}
            identify.traits({"sessionId": "rofl"})  # {"foo": "bar", "rofl": "xxx"}
        """
        return extract_aliased(
            self._fields.field("traits"),
            "traits",
            aliases,
            self._fields,
            inject_id=self.user_id(),
        )

    def email(self) -> Any:
        """
        Get the user's email from `traits.email`, falling back to `userId`
        only if it looks like a valid email.
        """
        email = self.proxy("traits.email")
        if email:
            return email

        user_id = self.user_id()
        if is_email(user_id):
            return user_id
        return None

    def created(self) -> Optional[datetime]:
        """Get when the user was created from `traits.created` or `traits.createdAt`."""
        created = self.proxy("traits.created") or self.proxy("traits.createdAt")
        if created:
            return parse_timestamp(created)
        return None

    def name(self) -> Optional[str]:
        """
        Get the user's name from `traits.name`, falling back to combining
        first_name() and last_name() when both are known.
        """
        name = self.proxy("traits.name")
        if isinstance(name, str):
            return name.strip()

        first_name = self.first_name()
        last_name = self.last_name()
        if first_name and last_name:
            return f"{first_name} {last_name}".strip()
        return None

    def first_name(self) -> Optional[str]:
        """Get `traits.firstName`, else the first word of `traits.name`."""
        first_name = self.proxy("traits.firstName")
        if isinstance(first_name, str):
            return first_name.strip()

        name = self.proxy("traits.name")
        if isinstance(name, str):
            return name.strip().split(" ")[0]
        return None

    def last_name(self) -> Optional[str]:
        """Get `traits.lastName`, else everything after the first word of `traits.name`."""
        last_name = self.proxy("traits.lastName")
        if isinstance(last_name, str):
            return last_name.strip()

        name = self.proxy("traits.name")
        if not isinstance(name, str):
            return None

        _, space, rest = name.strip().partition(" ")
        if not space:
            return None
        return rest.strip()

    def uid(self) -> Any:
        """Get the user's unique id from `userId`, `traits.username` or `traits.email`."""
        return self.user_id() or self.username() or self.email()

    def description(self) -> Any:
        """Get the user's description from `traits.description` or `traits.background`."""
        return self.proxy("traits.description") or self.proxy("traits.background")

    def avatar(self) -> Any:
        """Get the user's avatar URL from `traits.avatar`, `traits.photoUrl` or `traits.avatarUrl`."""
        traits = self.traits()
        return lookup(traits, "avatar") or lookup(traits, "photoUrl") or lookup(traits, "avatarUrl")

    username = proxied("traits.username", "Get the user's username from `traits.username`.")

    def phone(self) -> Any:
        """Get `traits.phone`, else the first entry of `traits.phones`."""
        phone = self.proxy("traits.phone")
        if phone:
            return phone

        phones = self.proxy("traits.phones")
        if isinstance(phones, list) and phones:
            return phones[0]
        return None

    def website(self) -> Any:
        """Get `traits.website`, else the first entry of `traits.websites`."""
        website = self.proxy("traits.website")
        if website:
            return website

        websites = self.proxy("traits.websites")
        if isinstance(websites, list) and websites:
            return websites[0]
        return None

    gender = proxied("traits.gender")
    position = proxied("traits.position")
    address = proxied("traits.address")

    def birthday(self) -> Optional[datetime]:
        """Get the parsed `traits.birthday`."""
        birthday = self.proxy("traits.birthday")
        if birthday:
            return parse_timestamp(birthday)
        return None

    def age(self) -> Any:
        """Get `traits.age`, else the number of calendar years since birthday()."""
        age = lookup(self.traits(), "age")
        if age is not None:
            return age

        birthday = self.birthday()
        if birthday is None:
            return None
        return datetime.now(timezone.utc).year - birthday.year

    def company_name(self) -> Any:
        """Get the company name from `traits.company.name` or `traits.companyName`."""
        return self.proxy("traits.company.name") or self.proxy("traits.companyName")
