"""Exceptions raised by the event_facade package.

Accessors never raise; these cover construction and configuration only.
"""


class FacadeError(Exception):
    """Base class for all event_facade errors."""


class UnsupportedFacadeError(FacadeError):
    """Raised when a payload declares a type with no matching facade."""

    def __init__(self, facade_type: str):
        self.facade_type = facade_type
        super().__init__(f"No facade registered for type {facade_type!r}")


class AliasConfigError(FacadeError):
    """Raised when alias presets are missing or malformed."""
