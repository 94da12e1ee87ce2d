"""
Value classification and parsing primitives.

- is_email: "looks like an email" check backed by pydantic's validate_email
- parse_timestamp: best-effort conversion of epoch numbers and ISO 8601
  strings into timezone-aware datetimes
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import validate_email
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

# Epoch values below one year's worth of milliseconds are taken as seconds.
_SECONDS_THRESHOLD = 31557600000

_NUMERIC = re.compile(r"^-?\d+(\.\d+)?$")


def is_email(value: Any) -> bool:
    """
    Return True when ``value`` is a string shaped like an email address.

    The whole value must be the address: display-name forms such as
    "Ada <ada@acme.io>" are rejected. Special-use domains (".test",
    "localhost") are rejected as well.
    """
    if not isinstance(value, str) or not value:
        return False

    try:
        _, email = validate_email(value)
    except PydanticCustomError:
        return False

    # validate_email lower-cases the domain
    return email.casefold() == value.casefold()


def _from_epoch(number: float) -> Optional[datetime]:
    if abs(number) < _SECONDS_THRESHOLD:
        number *= 1000
    try:
        return datetime.fromtimestamp(number / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug(f"Epoch value out of range: {number}")
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp from an event payload.

    Handles:
    - datetime instances (naive ones are assumed to be UTC)
    - epoch seconds or milliseconds, as numbers or numeric strings
    - ISO 8601 strings, including a trailing "Z"

    Args:
        value: Raw timestamp value

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, (int, float)):
        return _from_epoch(float(value))

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    if _NUMERIC.match(text):
        return _from_epoch(float(text))

    try:
        if text.endswith("Z"):
            parsed = datetime.fromisoformat(text[:-1] + "+00:00")
        else:
            parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparsable timestamp: {value!r}")
        return None

    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
