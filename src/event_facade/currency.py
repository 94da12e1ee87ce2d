"""
Currency Parser.

Normalizes monetary values found in event properties into floats.
Currency symbols are stripped, no conversion is performed.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)


class CurrencyParser:
    """
    Parse revenue-like values into plain numbers.

    Mirrors the lenient behavior of client libraries: the longest numeric
    prefix of a string is used, so "12.50 USD" parses to 12.5.
    """

    # Symbols removed before parsing
    STRIPPED_SYMBOLS = "$"

    # Leading float literal, as accepted by lenient number parsers
    NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

    @classmethod
    def parse_amount(cls, value: Any) -> float | int | None:
        """
        Parse a monetary value.

        - 0, "", None and other falsy values -> None
        - 42 / 4.2 -> returned unchanged (NaN and infinities -> None)
        - "$1,000" -> 1 (the prefix before the comma)
        - "abc" -> None

        Args:
            value: Raw value from the event payload

        Returns:
            Parsed number, or None if nothing finite could be extracted
        """
        if not value or isinstance(value, bool):
            return None

        if isinstance(value, int):
            return value

        if isinstance(value, float):
            return value if math.isfinite(value) else None

        if not isinstance(value, str):
            return None

        cleaned = value
        for symbol in cls.STRIPPED_SYMBOLS:
            cleaned = cleaned.replace(symbol, "")

        match = cls.NUMBER_PREFIX.match(cleaned)
        if not match:
            logger.debug(f"No numeric value in {value!r}")
            return None

        amount = float(match.group())
        if not math.isfinite(amount):
            return None

        return amount


def currency(value: Any) -> float | int | None:
    """Shortcut for CurrencyParser.parse_amount."""
    return CurrencyParser.parse_amount(value)
