"""
Shared pytest fixtures for the event_facade test suite.

Provides reusable payload factories for Identify and Track facades.
"""

import pytest

from event_facade.settings import get_settings


@pytest.fixture
def identify_payload():
    """
    Return a function that builds identify payloads with sensible defaults.

    Example:
        payload = identify_payload(userId="u2", traits={"name": "Grace"})
    """

    def _identify_payload(**kwargs) -> dict:
        defaults = {
            "type": "identify",
            "userId": "u1",
            "anonymousId": "anon-1",
            "timestamp": "2024-06-15T20:00:00Z",
            "traits": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@acme.io",
                "username": "ada",
            },
        }
        defaults.update(kwargs)
        return defaults

    return _identify_payload


@pytest.fixture
def track_payload():
    """Return a function that builds track payloads with sensible defaults."""

    def _track_payload(**kwargs) -> dict:
        defaults = {
            "type": "track",
            "event": "Order Completed",
            "userId": "u1",
            "anonymousId": "anon-1",
            "properties": {
                "id": "order-1",
                "total": "$50.00",
                "category": "books",
            },
            "context": {
                "traits": {"email": "ada@acme.io", "username": "ada"},
                "page": {"referrer": "https://search.acme.io"},
            },
        }
        defaults.update(kwargs)
        return defaults

    return _track_payload


@pytest.fixture
def fresh_settings():
    """Clear cached settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
